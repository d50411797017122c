"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta de la configuración del cliente en el borde (constructor).
- `SecretStr` evita que la API key aparezca en `repr()` o en logs.

Nota:
- Las respuestas de la API no tienen esquema local: se devuelven tal cual las
  decodifica `json` (ver `JSONValue`).
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field, SecretStr, field_validator
from pydantic.config import ConfigDict

DEFAULT_BASE_URL = "https://api.rbxstats.xyz"
DEFAULT_USER_AGENT = "rbxstats-python/0.1"

# Forma definida por el servicio remoto; no se valida localmente.
JSONValue = Union[dict[str, Any], list[Any], str, int, float, bool, None]


class ClientConfig(BaseModel):
    """Configuración compartida por el cliente y sus grupos de endpoints.

    Por qué inmutable:
    - Cada grupo (offsets, exploits, ...) guarda una referencia a esta misma
      instancia; nadie puede cambiar la key o la base URL por debajo.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_key: SecretStr = Field(
        ...,
        description="API key enviada como query param `api`.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="URL base del servicio (sin `/api`).",
    )
    timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        min_length=1,
        description="User-Agent enviado en cada request.",
    )

    @field_validator("api_key")
    @classmethod
    def _key_not_blank(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("api_key must not be empty")
        return value

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not (value.startswith("http://") or value.startswith("https://")):
            raise ValueError("base_url must start with http:// or https://")
        return value
