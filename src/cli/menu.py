"""Interactive menu loop.

The menu owns no state of its own: it receives the catalog, the console and
the output language from the caller. Domain failures come back as `Err`
outcomes and are reported before returning to the main menu.
"""

from __future__ import annotations

import logging
from typing import Callable

import typer
from rich.console import Console
from rich.markup import escape

from cli.prompts import read_bool, read_decimal, read_float, read_int, read_non_empty
from cli.ui_components import build_menu_panel, print_descriptions
from core.domain.language import Language
from core.domain.models import (
    FREQUENCY_MAX_MHZ,
    FREQUENCY_MIN_MHZ,
    PRICE_MAX,
    PRICE_MIN,
    SCREEN_SIZE_MAX,
    SCREEN_SIZE_MIN,
    Device,
    RadioReceiver,
    Television,
)
from core.domain.outcome import Err, Outcome, apply_update, assign, create_device
from core.services.catalog import DeviceCatalog

logger = logging.getLogger(__name__)

MAIN_OPTIONS = (
    "Add television",
    "Add radio receiver",
    "Show devices",
    "Modify device",
    "Exit",
)

PRICE_PROMPT = "Price"
SCREEN_PROMPT = f"Screen size (inches {SCREEN_SIZE_MIN}-{SCREEN_SIZE_MAX})"
BAND_PROMPT = "Band (AM, FM, AM/FM, DAB)"
MIN_FREQ_PROMPT = f"Min frequency (MHz {FREQUENCY_MIN_MHZ}-{FREQUENCY_MAX_MHZ:g})"
MAX_FREQ_PROMPT = f"Max frequency (MHz {FREQUENCY_MIN_MHZ}-{FREQUENCY_MAX_MHZ:g})"


def run_menu(catalog: DeviceCatalog, *, console: Console, language: Language) -> None:
    """Loop until the user picks "Exit" (the catalog is cleared on exit)."""

    while True:
        console.print()
        console.print(build_menu_panel("Menu", MAIN_OPTIONS))
        choice = typer.prompt("Your choice", default="", show_default=False).strip()
        console.print()

        if choice == "1":
            _report(console, _add(catalog, "television", _television_fields), "Television added.")
        elif choice == "2":
            _report(console, _add(catalog, "radio", _radio_fields), "Radio receiver added.")
        elif choice == "3":
            if catalog.is_empty:
                console.print("[yellow]The list is empty.[/yellow]")
            else:
                console.print("[bold]=== Devices ===[/bold]")
                print_descriptions(console, catalog.describe_all(language))
        elif choice == "4":
            modify_device(catalog, console=console, language=language)
        elif choice == "5":
            catalog.clear()
            console.print("Bye.")
            break
        else:
            console.print("[yellow]Unknown menu option.[/yellow]")


def modify_device(catalog: DeviceCatalog, *, console: Console, language: Language) -> None:
    if catalog.is_empty:
        console.print("[yellow]The device list is empty.[/yellow]")
        return

    console.print("[bold]=== Choose a device to modify ===[/bold]")
    print_descriptions(console, catalog.describe_all(language))
    position = read_int("Device number", 1, len(catalog))
    device = catalog.get(position)
    logger.debug("Editing %s at position %d", device.kind, position)

    console.print(f"\nSelected device: {device.brand} {device.model}", markup=False, highlight=False)
    console.print("Current settings:")
    print_descriptions(console, [device.describe(language)])

    editor = _EDITORS[device.kind]
    outcome = editor(device, console)
    _report(console, outcome, None)

    console.print("\nUpdated settings:")
    print_descriptions(console, [device.describe(language)])


def _report(console: Console, outcome: Outcome[Device], success: str | None) -> None:
    if isinstance(outcome, Err):
        console.print(f"[red]Rejected:[/red] {escape(outcome.message)}", highlight=False)
    elif success:
        console.print(f"[green]{success}[/green]")


def _add(catalog: DeviceCatalog, kind: str, read_fields: Callable[[], dict]) -> Outcome[Device]:
    outcome = create_device(kind, **read_fields())
    if not isinstance(outcome, Err):
        catalog.add(outcome.value)
    return outcome


def _base_fields() -> dict:
    return {
        "brand": read_non_empty("Brand"),
        "model": read_non_empty("Model"),
        "color": read_non_empty("Color"),
        "price": read_decimal(PRICE_PROMPT, PRICE_MIN, PRICE_MAX),
    }


def _television_fields() -> dict:
    fields = _base_fields()
    fields["screen_size_inches"] = read_int(SCREEN_PROMPT, SCREEN_SIZE_MIN, SCREEN_SIZE_MAX)
    fields["resolution"] = read_non_empty("Resolution (e.g. 1080p, 4K)")
    fields["is_smart"] = read_bool("Smart TV? (y/n)")
    fields["panel_type"] = read_non_empty("Panel type (LED, OLED, QLED...)")
    return fields


def _radio_fields() -> dict:
    fields = _base_fields()
    fields["band"] = read_non_empty(BAND_PROMPT)
    fields["min_frequency_mhz"] = read_float(MIN_FREQ_PROMPT, FREQUENCY_MIN_MHZ, FREQUENCY_MAX_MHZ)
    fields["max_frequency_mhz"] = read_float(MAX_FREQ_PROMPT, FREQUENCY_MIN_MHZ, FREQUENCY_MAX_MHZ)
    fields["has_rds"] = read_bool("RDS? (y/n)")
    return fields


def _choose(console: Console, title: str, options: tuple[str, ...]) -> int:
    console.print(build_menu_panel(title, options))
    return read_int("Setting to change", 1, len(options))


def _edit_price_or_color(device: Device, choice: int) -> Outcome[Device]:
    if choice == 1:
        return apply_update(device, "update_price", read_decimal("New price", PRICE_MIN, PRICE_MAX))
    return apply_update(device, "update_color", read_non_empty("New color"))


def _edit_device(device: Device, console: Console) -> Outcome[Device]:
    choice = _choose(console, "Device settings", ("Change price", "Change color"))
    return _edit_price_or_color(device, choice)


def _edit_television(tv: Television, console: Console) -> Outcome[Device]:
    choice = _choose(
        console,
        "Television settings",
        (
            "Change price",
            "Change color",
            "Change screen size",
            "Change resolution",
            "Change panel type",
            "Change Smart TV",
        ),
    )
    if choice in (1, 2):
        return _edit_price_or_color(tv, choice)
    if choice == 3:
        return apply_update(tv, "update_screen_size", read_int("New screen size", SCREEN_SIZE_MIN, SCREEN_SIZE_MAX))
    if choice == 4:
        return apply_update(tv, "update_resolution", read_non_empty("New resolution"))
    if choice == 5:
        return assign(tv, "panel_type", read_non_empty("New panel type"))
    return assign(tv, "is_smart", read_bool("Smart TV? (y/n)"))


def _edit_radio(radio: RadioReceiver, console: Console) -> Outcome[Device]:
    choice = _choose(
        console,
        "Radio receiver settings",
        (
            "Change price",
            "Change color",
            "Change band",
            "Change frequency range",
            "Change RDS",
        ),
    )
    if choice in (1, 2):
        return _edit_price_or_color(radio, choice)
    if choice == 3:
        return apply_update(radio, "update_band", read_non_empty("New band (AM, FM, AM/FM, DAB)"))
    if choice == 4:
        min_mhz = read_float(MIN_FREQ_PROMPT, FREQUENCY_MIN_MHZ, FREQUENCY_MAX_MHZ)
        max_mhz = read_float(MAX_FREQ_PROMPT, FREQUENCY_MIN_MHZ, FREQUENCY_MAX_MHZ)
        return apply_update(radio, "update_frequency_range", min_mhz, max_mhz)
    return assign(radio, "has_rds", read_bool("RDS? (y/n)"))


# Method table keyed by the `kind` discriminator.
_EDITORS: dict[str, Callable[..., Outcome[Device]]] = {
    "device": _edit_device,
    "television": _edit_television,
    "radio": _edit_radio,
}
