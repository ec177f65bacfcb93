"""Language utilities for the device catalog.

This module centralizes the language options supported by `describe()` and
the CLI. Keeping it in the domain layer lets both the models and the CLI share
a single source of truth without circular imports.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    ENGLISH = "en"
    SPANISH = "es"
    RUSSIAN = "ru"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language used across the application."""

        return cls.ENGLISH

    def label(self) -> str:
        """Human readable label for prompts and logging."""

        return _LABELS[self]

    def yes_no(self, flag: bool) -> str:
        """Localized affirmative/negative token."""

        yes, no = _YES_NO[self]
        return yes if flag else no

    def term(self, key: str) -> str:
        """Translated label used by `describe()`."""

        return _TERMS[self][key]


_LABELS: dict[Language, str] = {
    Language.ENGLISH: "English",
    Language.SPANISH: "Spanish",
    Language.RUSSIAN: "Russian",
}

_YES_NO: dict[Language, tuple[str, str]] = {
    Language.ENGLISH: ("yes", "no"),
    Language.SPANISH: ("sí", "no"),
    Language.RUSSIAN: ("да", "нет"),
}

_TERMS: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        "device": "Device",
        "television": "Television",
        "radio": "Radio receiver",
        "color": "color",
        "price": "price",
        "panel": "panel",
        "band": "band",
        "mhz": "MHz",
    },
    Language.SPANISH: {
        "device": "Dispositivo",
        "television": "Televisor",
        "radio": "Radiorreceptor",
        "color": "color",
        "price": "precio",
        "panel": "panel",
        "band": "banda",
        "mhz": "MHz",
    },
    Language.RUSSIAN: {
        "device": "Устройство",
        "television": "Телевизор",
        "radio": "Радиоприемник",
        "color": "цвет",
        "price": "цена",
        "panel": "панель",
        "band": "диапазон",
        "mhz": "МГц",
    },
}
