"""
Unit tests for cli.prompts parsers and readers
"""
from decimal import Decimal

import pytest
import typer
from typer.testing import CliRunner

from cli.prompts import (
    decimal_in_range,
    float_in_range,
    int_in_range,
    parse_non_empty,
    parse_yes_no,
    read_bool,
    read_decimal,
    read_float,
    read_int,
    read_non_empty,
)

runner = CliRunner()


def run_reader(reader, *args, lines):
    """Run `reader(*args)` inside a one-command app fed with `lines`."""

    app = typer.Typer()

    @app.command()
    def read() -> None:
        typer.echo(f"value={reader(*args)!r}")

    return runner.invoke(app, [], input="\n".join(lines) + "\n")


class TestParseNonEmpty:
    def test_trims(self):
        assert parse_non_empty("  OLED ") == "OLED"

    def test_blank_fails(self):
        with pytest.raises(typer.BadParameter):
            parse_non_empty("   ")


class TestDecimalInRange:
    def setup_method(self):
        self.parse = decimal_in_range(Decimal(0), Decimal(1_000_000))

    @pytest.mark.parametrize("raw,expected", [("12.50", Decimal("12.50")), (" 0 ", Decimal(0)), ("1000000", Decimal(1_000_000))])
    def test_valid(self, raw, expected):
        assert self.parse(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "12,5", "-1", "1000000.01", "NaN", "Infinity"])
    def test_invalid(self, raw):
        with pytest.raises(typer.BadParameter):
            self.parse(raw)


class TestIntAndFloatInRange:
    @pytest.mark.parametrize("raw", ["9", "121", "5.5", "big", ""])
    def test_int_invalid(self, raw):
        with pytest.raises(typer.BadParameter):
            int_in_range(10, 120)(raw)

    def test_int_bounds_inclusive(self):
        parse = int_in_range(10, 120)
        assert (parse("10"), parse(" 120 ")) == (10, 120)

    @pytest.mark.parametrize("raw", ["0.01", "300.5", "nan", "inf", "87,5"])
    def test_float_invalid(self, raw):
        with pytest.raises(typer.BadParameter):
            float_in_range(0.05, 300.0)(raw)

    def test_float_valid(self):
        assert float_in_range(0.05, 300.0)("87.5") == 87.5


class TestParseYesNo:
    @pytest.mark.parametrize("raw", ["y", "YES", "да", "Д", "si"])
    def test_yes(self, raw):
        assert parse_yes_no(raw) is True

    @pytest.mark.parametrize("raw", ["n", "No", "нет", "н"])
    def test_no(self, raw):
        assert parse_yes_no(raw) is False

    def test_other_fails(self):
        with pytest.raises(typer.BadParameter):
            parse_yes_no("maybe")


class TestReaders:
    def test_non_empty_asks_again(self):
        result = run_reader(read_non_empty, "Brand", lines=["   ", " LG "])
        assert result.exit_code == 0, result.output
        assert "Error: Value cannot be empty." in result.output
        assert "value='LG'" in result.output

    def test_decimal_asks_again(self):
        result = run_reader(read_decimal, "Price", Decimal(0), Decimal(1_000_000), lines=["abc", "-5", "12.50"])
        assert result.exit_code == 0, result.output
        assert result.output.count("Error: Enter a number in range [0; 1000000]") == 2
        assert "value=Decimal('12.50')" in result.output

    def test_int_asks_again(self):
        result = run_reader(read_int, "Screen size", 10, 120, lines=["big", "121", "65"])
        assert result.exit_code == 0, result.output
        assert result.output.count("Error: Enter an integer in range [10; 120].") == 2
        assert "value=65" in result.output

    def test_float_asks_again(self):
        result = run_reader(read_float, "Min frequency", 0.05, 300.0, lines=["nan", "400", "87.5"])
        assert result.exit_code == 0, result.output
        assert result.output.count("Error: Enter a number in range [0.05; 300]") == 2
        assert "value=87.5" in result.output

    def test_bool_asks_again(self):
        result = run_reader(read_bool, "Smart TV", lines=["maybe", "да"])
        assert result.exit_code == 0, result.output
        assert "Error: Enter y/n." in result.output
        assert "value=True" in result.output
