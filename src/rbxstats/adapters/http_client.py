"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers, redirects y el mapeo de errores de httpx a
  los errores propios de la librería.
- Facilita testeo: se puede inyectar un `httpx.Client` con `MockTransport`.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any

import httpx

from rbxstats.core.domain.models import ClientConfig, JSONValue
from rbxstats.core.endpoints import redact_url
from rbxstats.core.errors import BadStatusError, MalformedResponseError, RequestFailedError

logger = logging.getLogger(__name__)


def _default_headers(config: ClientConfig, extra_headers: dict[str, str] | None) -> dict[str, str]:
    headers: dict[str, str] = {
        "User-Agent": config.user_agent,
        "Accept": "application/json, text/plain;q=0.9, */*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return headers


def build_client(
    config: ClientConfig,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults seguros (timeout + redirects)."""

    return httpx.Client(
        timeout=httpx.Timeout(config.timeout_seconds),
        follow_redirects=True,
        headers=_default_headers(config, extra_headers),
        transport=transport,
    )


def build_async_client(
    config: ClientConfig,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Igual que `build_client` pero asíncrono."""

    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.timeout_seconds),
        follow_redirects=True,
        headers=_default_headers(config, extra_headers),
        transport=transport,
    )


def _transport_failure(exc: Exception, safe_url: str) -> RequestFailedError:
    # Algunos mensajes de httpx incluyen la URL completa (con la key).
    detail = redact_url(str(exc)) or exc.__class__.__name__
    logger.warning("GET %s failed: %s", safe_url, detail)
    return RequestFailedError(f"Request failed: {detail}", url=safe_url)


def _checked_text(response: httpx.Response, safe_url: str, started: float) -> str:
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.debug("GET %s -> %s (%.1f ms)", safe_url, response.status_code, elapsed_ms)
    if not response.is_success:
        logger.warning("GET %s returned status %s", safe_url, response.status_code)
        raise BadStatusError(response.status_code, body=response.text, url=safe_url)
    return response.text


class HttpExecutor:
    """GET bloqueante sobre un `httpx.Client` (implementa `RequestExecutor`)."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def get_text(self, url: str) -> str:
        safe_url = redact_url(url)
        if self._client.is_closed:
            raise RequestFailedError("HTTP client is closed", url=safe_url)
        started = time.perf_counter()
        try:
            response = self._client.get(url, follow_redirects=True)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise _transport_failure(exc, safe_url) from exc
        return _checked_text(response, safe_url, started)


class AsyncHttpExecutor:
    """GET asíncrono sobre un `httpx.AsyncClient`."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def get_text(self, url: str) -> str:
        safe_url = redact_url(url)
        if self._client.is_closed:
            raise RequestFailedError("HTTP client is closed", url=safe_url)
        started = time.perf_counter()
        try:
            response = await self._client.get(url, follow_redirects=True)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise _transport_failure(exc, safe_url) from exc
        return _checked_text(response, safe_url, started)


def decode_json(text: str, *, url: str | None = None) -> JSONValue:
    """Decodifica el cuerpo como JSON estándar.

    Cualquier fallo (incluido un cuerpo vacío) se reporta como
    `MalformedResponseError`; nunca se devuelve un resultado vacío silencioso.
    """

    try:
        value: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(
            f"Malformed JSON response: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            body=text,
            url=url,
        ) from exc
    return value
