"""
Unit tests for core.domain.validators
"""
from decimal import Decimal

import pytest

from core.domain.errors import DeviceValidationError, InvalidArgument, OutOfRange
from core.domain.validators import RADIO_BANDS, normalize_band, validate_non_empty, validate_range


class TestValidateNonEmpty:
    def test_returns_trimmed_value(self):
        assert validate_non_empty("  Sony  ", "brand") == "Sony"

    @pytest.mark.parametrize("value", ["", "   ", "\t\n", None, 42])
    def test_rejects_blank_or_non_text(self, value):
        with pytest.raises(InvalidArgument) as exc_info:
            validate_non_empty(value, "brand")
        assert exc_info.value.field_name == "brand"
        assert "brand" in str(exc_info.value)


class TestValidateRange:
    def test_inclusive_bounds(self):
        assert validate_range(10, 10, 120, "screen_size_inches") == 10
        assert validate_range(120, 10, 120, "screen_size_inches") == 120

    def test_returns_value_unchanged(self):
        value = Decimal("19.99")
        assert validate_range(value, Decimal(0), Decimal(1_000_000), "price") is value

    @pytest.mark.parametrize("value", [9, 121, -1])
    def test_outside_interval(self, value):
        with pytest.raises(OutOfRange) as exc_info:
            validate_range(value, 10, 120, "screen_size_inches")
        err = exc_info.value
        assert (err.minimum, err.maximum, err.value) == (10, 120, value)
        assert err.field_name == "screen_size_inches"

    def test_errors_share_a_value_error_base(self):
        assert issubclass(OutOfRange, DeviceValidationError)
        assert issubclass(InvalidArgument, ValueError)


class TestNormalizeBand:
    @pytest.mark.parametrize("raw,expected", [("am", "AM"), (" fm ", "FM"), ("Am/Fm", "AM/FM"), ("dab", "DAB")])
    def test_case_normalized(self, raw, expected):
        assert normalize_band(raw) == expected

    def test_all_known_bands_accepted(self):
        for band in RADIO_BANDS:
            assert normalize_band(band) == band

    @pytest.mark.parametrize("value", ["Invalid", "LW", "", "  "])
    def test_rejects_unknown_or_empty(self, value):
        with pytest.raises(InvalidArgument):
            normalize_band(value)
