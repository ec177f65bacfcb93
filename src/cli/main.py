"""CLI entry point (Typer).

Commands:
- `menu` (default): interactive add/list/modify loop.
- `list`: print the seed catalog as a table.
- `config`: show settings / persist the output language.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console

from cli import config_cmd
from cli.menu import run_menu
from cli.ui_components import build_devices_table, print_banner
from core.config import AppSettings
from core.domain.language import Language
from core.logging_config import setup_logging
from core.services.catalog import DeviceCatalog, default_devices

logger = logging.getLogger(__name__)

app = typer.Typer(help="Catalog of televisions, radio receivers and other devices.")
app.add_typer(config_cmd.app, name="config")

_console = Console()


def _build_catalog(settings: AppSettings, empty: bool) -> DeviceCatalog:
    if empty or not settings.seed_defaults:
        return DeviceCatalog()
    return DeviceCatalog.from_devices(default_devices())


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Configure logging; without a subcommand, start the menu."""

    settings = AppSettings()
    setup_logging(settings.log_level, settings.log_file)
    if ctx.invoked_subcommand is None:
        ctx.invoke(menu, language=None, empty=False)


@app.command()
def menu(
    language: Language | None = typer.Option(None, "--language", "-l", help="Output language (en/es/ru)."),
    empty: bool = typer.Option(False, "--empty", help="Start without the seed devices."),
) -> None:
    """Interactive menu: add, list and modify devices."""

    settings = AppSettings()
    catalog = _build_catalog(settings, empty)
    if settings.show_banner:
        print_banner(_console)
    logger.debug("Starting menu with %d devices", len(catalog))
    run_menu(catalog, console=_console, language=language or settings.language)


@app.command(name="list")
def list_devices(
    language: Language | None = typer.Option(None, "--language", "-l", help="Output language (en/es/ru)."),
) -> None:
    """Print the seed catalog."""

    settings = AppSettings()
    catalog = _build_catalog(settings, empty=False)
    if catalog.is_empty:
        _console.print("[yellow]The list is empty.[/yellow]")
        return
    _console.print(build_devices_table(catalog, language or settings.language))


def run() -> None:
    app()
