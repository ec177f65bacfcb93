"""Validadores compartidos por todas las entidades.

Funciones puras: no guardan estado y no hacen I/O. Los modelos las llaman
desde sus `field_validator` para que el constructor y la asignación usen
exactamente las mismas reglas.
"""

from __future__ import annotations

from typing import Any, TypeVar

from core.domain.errors import InvalidArgument, OutOfRange

T = TypeVar("T")

RADIO_BANDS: tuple[str, ...] = ("AM", "FM", "AM/FM", "DAB")


def validate_non_empty(value: Any, field_name: str) -> str:
    """Devuelve `value` sin espacios laterales o lanza `InvalidArgument`."""

    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"{field_name} cannot be empty.", field_name=field_name)
    return value.strip()


def validate_range(value: T, minimum: Any, maximum: Any, field_name: str) -> T:
    """Comprueba `minimum <= value <= maximum` (intervalo cerrado)."""

    if value < minimum or value > maximum:
        raise OutOfRange(field_name, value, minimum, maximum)
    return value


def normalize_band(value: Any) -> str:
    """Normaliza la banda a mayúsculas y la valida contra `RADIO_BANDS`."""

    band = validate_non_empty(value, "band").upper()
    if band not in RADIO_BANDS:
        raise InvalidArgument(
            f"band must be one of: {', '.join(RADIO_BANDS)}.",
            field_name="band",
        )
    return band
