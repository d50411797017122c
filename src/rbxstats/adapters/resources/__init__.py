"""Grupos de endpoints de la API.

Por qué un paquete:
- Agrupa los endpoints por recurso (offsets, exploits, versions, game).
- Cada grupo recibe un `core.interfaces.executor.Requester` compartido; no hay
  herencia entre grupos ni con el cliente.
"""

from rbxstats.adapters.resources.exploits import Exploits
from rbxstats.adapters.resources.game import Game
from rbxstats.adapters.resources.offsets import Offsets
from rbxstats.adapters.resources.versions import Versions

__all__ = [
	"Exploits",
	"Game",
	"Offsets",
	"Versions",
]
