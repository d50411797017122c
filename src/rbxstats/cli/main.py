"""CLI `rbxstats` (Typer + Rich).

Por qué una CLI:
- Permite consultar la API desde terminal/pipelines sin escribir Python.
- La salida por defecto es JSON (apto para `jq`); `--table` para lectura humana.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import typer
from rich.console import Console

from rbxstats.cli import doctor
from rbxstats.cli.context import CliState, get_state, open_client
from rbxstats.cli.ui_components import print_error, render_value
from rbxstats.client import RbxStatsClient
from rbxstats.core.config import AppSettings
from rbxstats.core.errors import RbxStatsError
from rbxstats.core.logging_config import configure_logging

app = typer.Typer(no_args_is_help=True, help="Query the RbxStats API (offsets, exploits, versions).")
offsets_app = typer.Typer(no_args_is_help=True, help="Roblox client offsets.")
exploits_app = typer.Typer(no_args_is_help=True, help="Exploit status lists.")
versions_app = typer.Typer(no_args_is_help=True, help="Roblox client versions.")
game_app = typer.Typer(no_args_is_help=True, help="Per-game offsets.")

app.add_typer(offsets_app, name="offsets")
app.add_typer(exploits_app, name="exploits")
app.add_typer(versions_app, name="versions")
app.add_typer(game_app, name="game")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


@app.callback()
def main(
    ctx: typer.Context,
    api_key: Optional[str] = typer.Option(
        None, "--api-key", help="API key (default: RBXSTATS_API_KEY / user .env).", show_default=False
    ),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Override the API base URL."),
    table: bool = typer.Option(False, "--table", help="Render flat responses as a table instead of JSON."),
    debug: bool = typer.Option(False, "--debug", help="Verbose console logs on stderr."),
) -> None:
    try:
        settings = AppSettings()
    except ValueError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=1) from exc
    configure_logging(debug=debug or settings.debug)
    ctx.obj = CliState(settings=settings, api_key=api_key, base_url=base_url, table=table)


def _run(ctx: typer.Context, call: Callable[[RbxStatsClient], Any], *, title: str | None = None) -> None:
    state = get_state(ctx)
    try:
        with open_client(state) as client:
            value = call(client)
    except (RbxStatsError, ValueError, TypeError) as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=1) from exc
    render_value(_console, value, table=state.table, title=title)


# --- offsets -----------------------------------------------------------------


@offsets_app.command("all")
def offsets_all(
    ctx: typer.Context,
    plain: bool = typer.Option(False, "--plain", help="Use the /plain text endpoint."),
) -> None:
    """All known offsets."""

    if plain:
        _run(ctx, lambda c: c.offsets.get_all_plain())
    else:
        _run(ctx, lambda c: c.offsets.get_all(), title="Offsets")


@offsets_app.command("search")
def offsets_search(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Exact offset name, e.g. Humanoid."),
    plain: bool = typer.Option(False, "--plain", help="Use the /plain text endpoint."),
) -> None:
    """One offset by name."""

    if plain:
        _run(ctx, lambda c: c.offsets.get_offset_by_name_plain(name))
    else:
        _run(ctx, lambda c: c.offsets.get_offset_by_name(name), title=name)


@offsets_app.command("prefix")
def offsets_prefix(ctx: typer.Context, prefix: str = typer.Argument(..., help="Name prefix.")) -> None:
    """Offsets whose name starts with PREFIX."""

    _run(ctx, lambda c: c.offsets.get_offsets_by_prefix(prefix), title=f"{prefix}*")


@offsets_app.command("camera")
def offsets_camera(ctx: typer.Context) -> None:
    """Camera offsets."""

    _run(ctx, lambda c: c.offsets.get_camera(), title="Camera")


# --- exploits ----------------------------------------------------------------

_EXPLOIT_LISTS: dict[str, Callable[[RbxStatsClient], Any]] = {
    "all": lambda c: c.exploits.get_all(),
    "windows": lambda c: c.exploits.get_windows(),
    "mac": lambda c: c.exploits.get_mac(),
    "undetected": lambda c: c.exploits.get_undetected(),
    "detected": lambda c: c.exploits.get_detected(),
    "free": lambda c: c.exploits.get_free(),
}


def _register_exploit_command(name: str, call: Callable[[RbxStatsClient], Any]) -> None:
    def command(ctx: typer.Context) -> None:
        _run(ctx, call, title=f"Exploits ({name})")

    command.__doc__ = f"Exploits: {name}."
    exploits_app.command(name)(command)


for _name, _call in _EXPLOIT_LISTS.items():
    _register_exploit_command(_name, _call)


# --- versions ----------------------------------------------------------------


@versions_app.command("latest")
def versions_latest(ctx: typer.Context) -> None:
    """Currently deployed client version."""

    _run(ctx, lambda c: c.versions.get_latest(), title="Latest version")


@versions_app.command("future")
def versions_future(ctx: typer.Context) -> None:
    """Upcoming client version."""

    _run(ctx, lambda c: c.versions.get_future(), title="Future version")


# --- game --------------------------------------------------------------------


@game_app.command("get")
def game_get(
    ctx: typer.Context,
    game_id: int = typer.Argument(..., min=0, help="Numeric game (place) ID."),
    plain: bool = typer.Option(False, "--plain", help="Use the /plain text endpoint."),
) -> None:
    """Offsets for one game."""

    if plain:
        _run(ctx, lambda c: c.game.get_game_by_id_plain(game_id))
    else:
        _run(ctx, lambda c: c.game.get_game_by_id(game_id), title=f"Game {game_id}")


def run() -> None:
    app()
