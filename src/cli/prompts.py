"""Input readers for the interactive menu.

Each reader prompts, parses and re-prompts until the value is acceptable: the
parsers below raise `typer.BadParameter`, which `typer.prompt` reports and
answers by asking again. Values are pre-filtered here, but the domain models
validate them again.
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Callable

import typer

YES_TOKENS = frozenset({"y", "yes", "s", "si", "sí", "д", "да"})
NO_TOKENS = frozenset({"n", "no", "н", "нет"})


def parse_non_empty(value: str) -> str:
    text = value.strip()
    if not text:
        raise typer.BadParameter("Value cannot be empty.")
    return text


def parse_yes_no(value: str) -> bool:
    token = value.strip().lower()
    if token in YES_TOKENS:
        return True
    if token in NO_TOKENS:
        return False
    raise typer.BadParameter("Enter y/n.")


def int_in_range(minimum: int, maximum: int) -> Callable[[str], int]:
    def parse(value: str) -> int:
        try:
            number = int(value.strip())
        except ValueError:
            number = None
        if number is None or not minimum <= number <= maximum:
            raise typer.BadParameter(f"Enter an integer in range [{minimum}; {maximum}].")
        return number

    return parse


def float_in_range(minimum: float, maximum: float) -> Callable[[str], float]:
    def parse(value: str) -> float:
        try:
            number = float(value.strip())
        except ValueError:
            number = math.nan
        if not math.isfinite(number) or not minimum <= number <= maximum:
            raise typer.BadParameter(
                f"Enter a number in range [{minimum:g}; {maximum:g}] (use '.' as separator)."
            )
        return number

    return parse


def decimal_in_range(minimum: Decimal, maximum: Decimal) -> Callable[[str], Decimal]:
    """Decimal in `[minimum; maximum]`, always with `.` as separator."""

    def parse(value: str) -> Decimal:
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            number = None
        if number is None or not number.is_finite() or not minimum <= number <= maximum:
            raise typer.BadParameter(
                f"Enter a number in range [{minimum}; {maximum}] (use '.' as separator)."
            )
        return number

    return parse


def read_non_empty(prompt: str) -> str:
    return typer.prompt(prompt, value_proc=parse_non_empty)


def read_decimal(prompt: str, minimum: Decimal, maximum: Decimal) -> Decimal:
    return typer.prompt(prompt, value_proc=decimal_in_range(minimum, maximum))


def read_int(prompt: str, minimum: int, maximum: int) -> int:
    return typer.prompt(prompt, value_proc=int_in_range(minimum, maximum))


def read_float(prompt: str, minimum: float, maximum: float) -> float:
    return typer.prompt(prompt, value_proc=float_in_range(minimum, maximum))


def read_bool(prompt: str) -> bool:
    return typer.prompt(prompt, value_proc=parse_yes_no)
