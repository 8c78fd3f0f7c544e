"""Componentes de UI para CLI.

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- La tabla de resultados es texto plano alineado (como `column -t`) para
  que siga siendo útil en pipes; los avisos van por Rich a stderr.
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape

from core.domain.models import TagRecord

RESULTS_HEADER = ("MODEL", "TAG", "PARAMS", "SIZE")
COLUMN_GAP = "  "


def render_table(rows: Sequence[Sequence[str]]) -> str:
    """Alinea columnas separadas por dos espacios; la última sin relleno."""

    if not rows:
        return ""
    widths = [max(len(row[col]) for row in rows) for col in range(len(rows[0]))]
    lines: list[str] = []
    for row in rows:
        cells = [cell.ljust(widths[i]) for i, cell in enumerate(row[:-1])]
        cells.append(row[-1])
        lines.append(COLUMN_GAP.join(cells))
    return "\n".join(lines)


def render_results(records: Sequence[TagRecord]) -> str:
    """Tabla de resultados con cabecera, o cadena vacía si no hay registros."""

    if not records:
        return ""
    return render_table([RESULTS_HEADER, *(record.as_row() for record in records)])


def print_warning(console: Console, message: str) -> None:
    console.print(f"[yellow]warning:[/yellow] {escape(message)}", highlight=False, soft_wrap=True)


def print_error(console: Console, message: str, detail: str | None = None) -> None:
    console.print(f"[red]{escape(message)}[/red]", highlight=False, soft_wrap=True)
    if detail:
        console.print(f"  {detail}", highlight=False, markup=False, soft_wrap=True)
