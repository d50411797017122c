"""Offsets por juego: `/api/offsets/game/<id>`.

Nota:
- Vive bajo `offsets/` en el servicio, pero se expone como grupo aparte
  (`client.game`) porque la clave es un ID numérico de juego.
"""

from __future__ import annotations

from typing import Any

from rbxstats.core.endpoints import build_path, require_game_id
from rbxstats.core.interfaces.executor import Requester


class Game:
    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    def get_game_by_id(self, game_id: int) -> Any:
        game_id = require_game_id(game_id)
        return self._requester.fetch_json(build_path("offsets", "game", param=str(game_id)))

    def get_game_by_id_plain(self, game_id: int) -> Any:
        game_id = require_game_id(game_id)
        return self._requester.fetch_text(build_path("offsets", "game", param=str(game_id), suffix="plain"))
