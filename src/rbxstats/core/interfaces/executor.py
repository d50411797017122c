"""Contratos de ejecución de requests.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- Los grupos de endpoints son los mismos para el cliente síncrono y el
  asíncrono; solo cambia el `Requester` que reciben.
"""

from __future__ import annotations

from typing import Any, Awaitable, Protocol, runtime_checkable


@runtime_checkable
class RequestExecutor(Protocol):
    """GET bloqueante: URL completa -> cuerpo de la respuesta como texto."""

    def get_text(self, url: str) -> str:
        ...


@runtime_checkable
class AsyncRequestExecutor(Protocol):
    """Versión asíncrona de `RequestExecutor`."""

    def get_text(self, url: str) -> Awaitable[str]:
        ...


@runtime_checkable
class Requester(Protocol):
    """Lo que ven los grupos de endpoints.

    Reglas de diseño:
    - Recibe solo el path (`offsets/camera`); la URL base y la key las pone
      el requester.
    - En el cliente asíncrono ambos métodos devuelven awaitables.
    """

    def fetch_json(self, path: str) -> Any:
        ...

    def fetch_text(self, path: str) -> Any:
        ...
