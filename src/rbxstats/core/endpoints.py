"""Construcción de URLs de la API.

Forma única: `<base>/api/<path>?api=<key>`.

Los segmentos que vienen del usuario (nombres, prefijos, IDs) se codifican
con `quote(..., safe="")`: un `/` dentro de un nombre no puede crear un
segmento nuevo.
"""

from __future__ import annotations

import re
from urllib.parse import quote, urlencode

from rbxstats.core.domain.models import ClientConfig

_API_PARAM_RE = re.compile(r"([?&]api=)[^&#]*")


def encode_segment(value: str) -> str:
    # `.` y `..` serían segmentos de punto y el cliente HTTP los normaliza.
    if value in (".", ".."):
        return value.replace(".", "%2E")
    return quote(value, safe="")


def build_path(*static: str, param: str | None = None, suffix: str | None = None) -> str:
    """Une segmentos fijos + un segmento de usuario opcional + sufijo fijo.

    >>> build_path("offsets", "search", param="Humanoid", suffix="plain")
    'offsets/search/Humanoid/plain'
    """

    parts = [s.strip("/") for s in static if s]
    if param is not None:
        parts.append(encode_segment(param))
    if suffix:
        parts.append(suffix.strip("/"))
    return "/".join(parts)


def build_url(config: ClientConfig, path: str) -> str:
    query = urlencode({"api": config.api_key.get_secret_value()})
    return f"{config.base_url}/api/{path.lstrip('/')}?{query}"


def redact_url(url: str) -> str:
    """Reemplaza el valor de `api=` por `***` (para logs y errores)."""

    return _API_PARAM_RE.sub(r"\1***", url)


def require_text(value: object, field: str) -> str:
    """Valida un segmento de usuario antes de hacer el request."""

    if not isinstance(value, str):
        raise TypeError(f"{field} must be a str, got {type(value).__name__}")
    if not value.strip():
        raise ValueError(f"{field} must not be empty")
    return value


def require_game_id(value: object) -> int:
    # bool es subclase de int; no es un ID válido.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"game_id must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError("game_id must be >= 0")
    return value
