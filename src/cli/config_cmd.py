"""Config commands: inspect settings and persist the output language."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from core.config import AppSettings, get_user_env_file, save_user_setting
from core.domain.language import Language

app = typer.Typer(no_args_is_help=True, help="Show and change the catalog configuration.")

_console = Console()


@app.command()
def show() -> None:
    """Print the effective settings."""

    settings = AppSettings()

    table = Table(title="Device Catalog Settings")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("language", f"{settings.language.value} ({settings.language.label()})")
    table.add_row("seed_defaults", str(settings.seed_defaults))
    table.add_row("show_banner", str(settings.show_banner))
    table.add_row("log_level", settings.log_level)
    table.add_row("log_file", str(settings.log_file) if settings.log_file else "-")
    table.add_row("user .env", str(get_user_env_file()))

    _console.print(table)


@app.command(name="set-language")
def set_language(
    language: Language = typer.Argument(..., help="Output language for device descriptions."),
    env_file: Path | None = typer.Option(
        None,
        "--env-file",
        help="Write to this .env instead of the per-user config file.",
    ),
) -> None:
    """Store the output language in the user config .env."""

    env_path = save_user_setting("DEVICE_CATALOG_LANGUAGE", language.value, env_path=env_file)
    _console.print(f"[green]Saved language {language.label()} to:[/green] {env_path}")
