"""Errores públicos del cliente.

Dos familias:
- `RequestFailedError`: el request no produjo una respuesta utilizable
  (DNS, conexión, TLS, timeout, o status no-2xx vía `BadStatusError`).
- `MalformedResponseError`: la respuesta llegó pero no es JSON válido.

Todas heredan de `RbxStatsError` para que el llamador pueda capturar una sola.
"""

from __future__ import annotations

_BODY_EXCERPT_CHARS = 200


def _excerpt(body: str | None) -> str | None:
    if body is None:
        return None
    if len(body) <= _BODY_EXCERPT_CHARS:
        return body
    return body[: _BODY_EXCERPT_CHARS - 1] + "…"


class RbxStatsError(Exception):
    """Error base de la librería."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        self.message = message
        # Siempre redactada (sin la API key).
        self.url = url
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.message]
        if self.url:
            parts.append(f"URL: {self.url}")
        return " | ".join(parts)


class RequestFailedError(RbxStatsError):
    """Fallo de transporte: no hubo respuesta HTTP utilizable."""


class BadStatusError(RequestFailedError):
    """El servidor respondió con un status fuera de 2xx."""

    def __init__(self, status_code: int, *, body: str = "", url: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"API request failed with status {status_code}", url=url)

    def __str__(self) -> str:
        parts = [super().__str__()]
        excerpt = _excerpt(self.body)
        if excerpt:
            parts.append(f"Body: {excerpt}")
        return " | ".join(parts)


class MalformedResponseError(RbxStatsError):
    """El cuerpo de la respuesta no se pudo decodificar como JSON."""

    def __init__(self, message: str, *, body: str = "", url: str | None = None) -> None:
        self.body = _excerpt(body) or ""
        super().__init__(message, url=url)
