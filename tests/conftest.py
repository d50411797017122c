"""Pytest bootstrap configuration.

- Aísla los tests de las variables `RBXSTATS_*` del entorno real.
- Provee un transporte httpx simulado que registra cada request.
"""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from rbxstats import AsyncRbxStatsClient, RbxStatsClient

API_KEY = "test-key-123"
BASE_URL = "https://api.rbxstats.test"


class RecordingTransport:
    """Handler para `httpx.MockTransport`: responde fijo y guarda los requests."""

    def __init__(
        self,
        *,
        status_code: int = 200,
        body: str = "{}",
        error: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.body)

    @property
    def last_url(self) -> str:
        return str(self.requests[-1].url)


@pytest.fixture(autouse=True)
def isolate_settings_env(monkeypatch, tmp_path):
    for name in (
        "RBXSTATS_API_KEY",
        "RBXSTATS_BASE_URL",
        "RBXSTATS_HTTP_TIMEOUT_SECONDS",
        "RBXSTATS_USER_AGENT",
        "RBXSTATS_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    # Evita leer un `.env` del directorio del proyecto.
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def make_client() -> Callable[[RecordingTransport], RbxStatsClient]:
    def _make(handler: RecordingTransport) -> RbxStatsClient:
        http = httpx.Client(transport=httpx.MockTransport(handler), follow_redirects=True)
        return RbxStatsClient(API_KEY, base_url=BASE_URL, http_client=http)

    return _make


@pytest.fixture
def make_async_client() -> Callable[[RecordingTransport], AsyncRbxStatsClient]:
    def _make(handler: RecordingTransport) -> AsyncRbxStatsClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=True)
        return AsyncRbxStatsClient(API_KEY, base_url=BASE_URL, http_client=http)

    return _make
