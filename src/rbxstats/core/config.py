"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que el cliente y la CLI lean la config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from rbxstats.core.domain.models import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, ClientConfig


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "rbxstats"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "rbxstats"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "rbxstats"
    return Path.home() / ".config" / "rbxstats"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# rbxstats user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central (env vars + .env).

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars).
    - Un único contrato de configuración para cliente y CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="RBXSTATS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: SecretStr | None = Field(
        default=None,
        description="API key de RbxStats (query param `api`).",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="URL base del servicio.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        min_length=1,
        description="User-Agent para las peticiones.",
    )
    debug: bool = Field(
        default=False,
        description="Logs en consola legibles y nivel DEBUG en la CLI.",
    )

    def to_client_config(self, *, api_key: str | None = None) -> ClientConfig:
        """Construye un `ClientConfig`; `api_key` explícita tiene prioridad."""

        key = api_key
        if key is None and self.api_key is not None:
            key = self.api_key.get_secret_value()
        if not key:
            raise ValueError("No API key configured (set RBXSTATS_API_KEY or pass api_key)")
        return ClientConfig(
            api_key=key,
            base_url=self.base_url,
            timeout_seconds=self.http_timeout_seconds,
            user_agent=self.user_agent,
        )
