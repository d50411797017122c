"""Endpoints de offsets: `/api/offsets/...`.

Variantes `*_plain` devuelven el texto tal cual (formato `/plain` del servicio).
"""

from __future__ import annotations

from typing import Any

from rbxstats.core.endpoints import build_path, require_text
from rbxstats.core.interfaces.executor import Requester


class Offsets:
    """Offsets completos, por nombre, por prefijo y de cámara."""

    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    def get_all(self) -> Any:
        return self._requester.fetch_json(build_path("offsets"))

    def get_all_plain(self) -> Any:
        return self._requester.fetch_text(build_path("offsets", suffix="plain"))

    def get_offset_by_name(self, name: str) -> Any:
        """Busca un offset por nombre exacto (p.ej. `Humanoid`)."""

        name = require_text(name, "name")
        return self._requester.fetch_json(build_path("offsets", "search", param=name))

    def get_offset_by_name_plain(self, name: str) -> Any:
        name = require_text(name, "name")
        return self._requester.fetch_text(build_path("offsets", "search", param=name, suffix="plain"))

    def get_offsets_by_prefix(self, prefix: str) -> Any:
        prefix = require_text(prefix, "prefix")
        return self._requester.fetch_json(build_path("offsets", "prefix", param=prefix))

    def get_camera(self) -> Any:
        return self._requester.fetch_json(build_path("offsets", "camera"))
