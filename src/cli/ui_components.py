"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar el bucle del menú con detalles visuales.
- Permite reutilizar tablas/paneles entre `menu` y `list`.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.language import Language
from core.interfaces.describable import Describable


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("DEVICE CATALOG", style="bold cyan")
    subtitle = Text("Televisions • Radio receivers • Devices", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_menu_panel(title: str, options: Sequence[str]) -> Panel:
    """Panel numerado (1..n) con las opciones de un menú."""

    body = Text()
    for number, option in enumerate(options, start=1):
        body.append(f"{number}) ", style="bold cyan")
        body.append(option + ("\n" if number < len(options) else ""))
    return Panel(body, title=Text(title, style="bold"), border_style="cyan", expand=False)


def print_descriptions(console: Console, lines: Iterable[str]) -> None:
    """Una línea por dispositivo, sin markup ni corte de línea."""

    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def build_devices_table(devices: Iterable[Describable], language: Language) -> Table:
    """Tabla Rich con el catálogo completo."""

    table = Table(title="Devices")
    table.add_column("#", style="cyan", no_wrap=True, justify="right")
    table.add_column("Kind", style="magenta", no_wrap=True)
    table.add_column("Description", style="white")
    for number, device in enumerate(devices, start=1):
        table.add_row(str(number), device.kind, Text(device.describe(language)))
    return table
