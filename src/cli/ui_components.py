"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `lookup` y `doctor`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import LookupResponse


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (se omite con `--json`)."""

    title = Text("NIK-PROXY", style="bold cyan")
    subtitle = Text("KPU voter lookup • NIK", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_result_table(response: LookupResponse) -> Table:
    """Tabla campo/valor con el resultado normalizado."""

    table = Table(title="Lookup result")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for field, value in response.body.items():
        table.add_row(field, value)
    return table


def build_error_panel(response: LookupResponse) -> Panel:
    """Panel para respuestas que no son 200 (validación, upstream, not found)."""

    style = "yellow" if response.status_code in (404, 406) else "red"
    body = Text(response.body.get("message", ""), style=style)
    return Panel(body, title=f"HTTP {response.status_code}", border_style=style)
