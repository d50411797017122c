"""Endpoints de versiones del cliente: `/api/versions/...`."""

from __future__ import annotations

from typing import Any

from rbxstats.core.endpoints import build_path
from rbxstats.core.interfaces.executor import Requester


class Versions:
    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    def get_latest(self) -> Any:
        """Versión actualmente desplegada."""

        return self._requester.fetch_json(build_path("versions", "latest"))

    def get_future(self) -> Any:
        """Próxima versión conocida (si el servicio la publica)."""

        return self._requester.fetch_json(build_path("versions", "future"))
