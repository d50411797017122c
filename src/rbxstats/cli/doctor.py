"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from rbxstats.cli.context import CliState, get_state, open_client
from rbxstats.cli.ui_components import describe_error, print_banner
from rbxstats.core.config import get_user_env_file, write_user_env_vars
from rbxstats.core.errors import BadStatusError, RbxStatsError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_api(state: CliState) -> tuple[bool, str]:
    """Hit `versions/latest`: validates connectivity and the API key at once."""

    try:
        with open_client(state) as client:
            latest = client.versions.get_latest()
    except BadStatusError as exc:
        if exc.status_code in (401, 403):
            return False, f"HTTP {exc.status_code} (API key rejected)"
        return False, f"HTTP {exc.status_code}"
    except RbxStatsError as exc:
        return False, exc.message
    except ValueError as exc:
        return False, describe_error(exc)
    if isinstance(latest, dict):
        version = latest.get("version") or latest.get("Version")
        if version:
            return True, f"latest version {version}"
    return True, "OK"


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    state = get_state(ctx)
    settings = state.settings
    print_banner(_console)

    table = Table(title="RbxStats Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    has_key = bool(state.api_key) or settings.api_key is not None
    if has_key:
        table.add_row("API key", "OK", "configured")
    else:
        table.add_row("API key", "MISSING", f"Run `rbxstats doctor setup` (stores it in {get_user_env_file()})")
    table.add_row("Base URL", "OK", state.base_url or settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    ok_api = False
    if has_key:
        ok_api, detail_api = _check_api(state)
        table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)
    else:
        table.add_row("API connectivity", "SKIPPED", "No API key")

    _console.print(table)

    if not ok_api:
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores the API key in the user config .env)."""

    api_key = typer.prompt("RbxStats API key", hide_input=True, confirmation_prompt=False).strip()
    if not api_key:
        raise typer.BadParameter("API key is required")

    env_path = write_user_env_vars({"RBXSTATS_API_KEY": api_key})
    _console.print(f"[green]Saved API key to:[/green] {env_path}")
