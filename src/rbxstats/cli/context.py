"""Estado compartido entre comandos de la CLI."""

from __future__ import annotations

from dataclasses import dataclass

import typer

from rbxstats.client import RbxStatsClient
from rbxstats.core.config import AppSettings


@dataclass
class CliState:
    settings: AppSettings
    api_key: str | None = None
    base_url: str | None = None
    table: bool = False


def get_state(ctx: typer.Context) -> CliState:
    state = ctx.find_object(CliState)
    if state is None:
        # Subcomandos invocados sin pasar por el callback raíz (tests).
        state = CliState(settings=AppSettings())
        ctx.obj = state
    return state


def open_client(state: CliState) -> RbxStatsClient:
    """Crea el cliente a partir de flags + settings (los flags mandan)."""

    settings = state.settings
    if state.base_url:
        settings = settings.model_copy(update={"base_url": state.base_url})
    return RbxStatsClient.from_settings(settings, api_key=state.api_key)
