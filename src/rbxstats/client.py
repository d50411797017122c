"""Clientes públicos de la API de RbxStats.

Un único camino: path -> URL (`core.endpoints`) -> GET (`adapters.http_client`)
-> texto o JSON. Los grupos `offsets`, `exploits`, `versions` y `game` son
solo puntos de llamada sobre ese camino.
"""

from __future__ import annotations

from typing import Any

import httpx

from rbxstats.adapters.http_client import (
    AsyncHttpExecutor,
    HttpExecutor,
    build_async_client,
    build_client,
    decode_json,
)
from rbxstats.adapters.resources import Exploits, Game, Offsets, Versions
from rbxstats.core.config import AppSettings
from rbxstats.core.domain.models import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, ClientConfig, JSONValue
from rbxstats.core.endpoints import build_url, redact_url
from rbxstats.core.interfaces.executor import AsyncRequestExecutor, RequestExecutor


class _SyncRequester:
    def __init__(self, config: ClientConfig, executor: RequestExecutor) -> None:
        self._config = config
        self._executor = executor

    def fetch_text(self, path: str) -> str:
        return self._executor.get_text(build_url(self._config, path))

    def fetch_json(self, path: str) -> JSONValue:
        url = build_url(self._config, path)
        return decode_json(self._executor.get_text(url), url=redact_url(url))


class _AsyncRequester:
    def __init__(self, config: ClientConfig, executor: AsyncRequestExecutor) -> None:
        self._config = config
        self._executor = executor

    async def fetch_text(self, path: str) -> str:
        return await self._executor.get_text(build_url(self._config, path))

    async def fetch_json(self, path: str) -> JSONValue:
        url = build_url(self._config, path)
        text = await self._executor.get_text(url)
        return decode_json(text, url=redact_url(url))


def _make_config(api_key: str, base_url: str, timeout_seconds: float, user_agent: str) -> ClientConfig:
    return ClientConfig(
        api_key=api_key,
        base_url=base_url,
        timeout_seconds=timeout_seconds,
        user_agent=user_agent,
    )


class RbxStatsClient:
    """Cliente bloqueante.

    Uso:

        with RbxStatsClient("my-key") as client:
            client.offsets.get_offset_by_name("Humanoid")

    Si se pasa `http_client`, el llamador es dueño de él y `close()` no lo cierra.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 20.0,
        user_agent: str = DEFAULT_USER_AGENT,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._config = _make_config(api_key, base_url, timeout_seconds, user_agent)
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else build_client(self._config)

        requester = _SyncRequester(self._config, HttpExecutor(self._http))
        self.offsets = Offsets(requester)
        self.exploits = Exploits(requester)
        self.versions = Versions(requester)
        self.game = Game(requester)

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings | None = None,
        *,
        api_key: str | None = None,
        http_client: httpx.Client | None = None,
    ) -> "RbxStatsClient":
        """Construye el cliente desde env vars / .env (`RBXSTATS_*`)."""

        config = (settings or AppSettings()).to_client_config(api_key=api_key)
        return cls(
            config.api_key.get_secret_value(),
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
            user_agent=config.user_agent,
            http_client=http_client,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "RbxStatsClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"RbxStatsClient(base_url={self._config.base_url!r})"


class AsyncRbxStatsClient:
    """Cliente asyncio; mismos grupos y métodos, que devuelven awaitables.

        async with AsyncRbxStatsClient("my-key") as client:
            latest = await client.versions.get_latest()
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 20.0,
        user_agent: str = DEFAULT_USER_AGENT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = _make_config(api_key, base_url, timeout_seconds, user_agent)
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else build_async_client(self._config)

        requester = _AsyncRequester(self._config, AsyncHttpExecutor(self._http))
        self.offsets = Offsets(requester)
        self.exploits = Exploits(requester)
        self.versions = Versions(requester)
        self.game = Game(requester)

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings | None = None,
        *,
        api_key: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> "AsyncRbxStatsClient":
        config = (settings or AppSettings()).to_client_config(api_key=api_key)
        return cls(
            config.api_key.get_secret_value(),
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
            user_agent=config.user_agent,
            http_client=http_client,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "AsyncRbxStatsClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"AsyncRbxStatsClient(base_url={self._config.base_url!r})"
