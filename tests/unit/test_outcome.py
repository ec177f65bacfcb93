"""
Unit tests for core.domain.outcome
"""
import pytest

from core.domain.errors import InvalidArgument, OutOfRange
from core.domain.models import RadioReceiver, Television
from core.domain.outcome import Err, Ok, apply_update, assign, attempt, create_device


class TestCreateDevice:
    def test_ok_for_valid_fields(self):
        outcome = create_device("television", brand="Sony", model="Bravia", screen_size_inches=55)
        assert isinstance(outcome, Ok)
        assert isinstance(outcome.value, Television)
        assert outcome.value.screen_size_inches == 55

    def test_err_carries_error_kind(self):
        outcome = create_device("television", screen_size_inches=5)
        assert isinstance(outcome, Err)
        assert isinstance(outcome.error, OutOfRange)
        assert "screen_size_inches" in outcome.message

    def test_err_for_band(self):
        outcome = create_device("radio", band="Invalid")
        assert isinstance(outcome, Err)
        assert isinstance(outcome.error, InvalidArgument)

    def test_unknown_kind(self):
        outcome = create_device("toaster")
        assert isinstance(outcome, Err)
        assert outcome.error.field_name == "kind"


class TestApplyUpdate:
    def test_ok_returns_same_device(self, tv):
        outcome = apply_update(tv, "update_screen_size", 65)
        assert isinstance(outcome, Ok)
        assert outcome.value is tv
        assert tv.screen_size_inches == 65

    def test_err_on_frequency_order(self):
        radio = RadioReceiver()
        outcome = apply_update(radio, "update_frequency_range", 100.0, 90.0)
        assert isinstance(outcome, Err)
        assert isinstance(outcome.error, InvalidArgument)

    def test_unknown_operation_is_a_programming_error(self, tv):
        with pytest.raises(AttributeError):
            apply_update(tv, "update_weight", 3)


class TestAssign:
    def test_ok(self, tv):
        assert isinstance(assign(tv, "panel_type", "QLED"), Ok)
        assert tv.panel_type == "QLED"

    def test_err_leaves_value(self, tv):
        outcome = assign(tv, "panel_type", "   ")
        assert isinstance(outcome, Err)
        assert tv.panel_type == "OLED"


class TestAttempt:
    def test_other_exceptions_propagate(self):
        with pytest.raises(ZeroDivisionError):
            attempt(lambda: 1 / 0)

    def test_wraps_return_value(self):
        assert attempt(max, 1, 2) == Ok(2)
