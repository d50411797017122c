"""Endpoints de estado de exploits: `/api/exploits/...`."""

from __future__ import annotations

from typing import Any

from rbxstats.core.endpoints import build_path
from rbxstats.core.interfaces.executor import Requester


class Exploits:
    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    def _get(self, *segments: str) -> Any:
        return self._requester.fetch_json(build_path("exploits", *segments))

    def get_all(self) -> Any:
        return self._get()

    def get_windows(self) -> Any:
        return self._get("windows")

    def get_mac(self) -> Any:
        return self._get("mac")

    def get_undetected(self) -> Any:
        return self._get("undetected")

    def get_detected(self) -> Any:
        return self._get("detected")

    def get_free(self) -> Any:
        return self._get("free")
