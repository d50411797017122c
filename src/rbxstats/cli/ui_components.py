"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError
from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

_SCALARS = (str, int, float, bool, type(None))


def print_banner(console: Console) -> None:
    """Imprime el banner (solo en comandos interactivos, p.ej. `doctor`)."""

    title = Text("RbxStats", style="bold cyan")
    subtitle = Text("Offsets • Exploits • Versions", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def describe_error(exc: BaseException) -> str:
    """Mensaje de una línea; los `ValidationError` de pydantic se resumen por campo."""

    if isinstance(exc, ValidationError):
        return "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
    return str(exc)


def print_error(console: Console, exc: BaseException) -> None:
    console.print(f"[red]Error:[/red] {escape(describe_error(exc))}")


def _cell(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def build_mapping_table(mapping: dict[str, Any], *, title: str | None = None) -> Table:
    """Tabla clave/valor para respuestas planas (p.ej. offsets por nombre)."""

    table = Table(title=title)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key, value in mapping.items():
        table.add_row(str(key), _cell(value))
    return table


def build_records_table(records: list[dict[str, Any]], *, title: str | None = None) -> Table:
    """Tabla para listas de objetos (p.ej. exploits). Columnas = unión de keys."""

    columns: list[str] = []
    for record in records:
        for key in record:
            if key not in columns:
                columns.append(key)

    table = Table(title=title)
    for idx, column in enumerate(columns):
        table.add_column(column, style="cyan" if idx == 0 else "white", no_wrap=idx == 0)
    for record in records:
        table.add_row(*(_cell(record.get(column)) for column in columns))
    return table


def _is_flat_mapping(value: Any) -> bool:
    return isinstance(value, dict) and all(isinstance(v, _SCALARS) for v in value.values())


def _is_record_list(value: Any) -> bool:
    return (
        isinstance(value, list)
        and bool(value)
        and all(_is_flat_mapping(item) for item in value)
    )


def render_value(console: Console, value: Any, *, table: bool = False, title: str | None = None) -> None:
    """Imprime una respuesta: texto tal cual, JSON indentado o tabla.

    `table=True` solo aplica a formas tabulares (dict plano o lista de dicts
    planos); en el resto se cae a JSON.
    """

    if isinstance(value, str):
        console.print(value, markup=False, highlight=False, emoji=False, soft_wrap=True)
        return
    if table and _is_flat_mapping(value):
        console.print(build_mapping_table(value, title=title))
        return
    if table and _is_record_list(value):
        console.print(build_records_table(value, title=title))
        return
    console.print_json(data=value)
