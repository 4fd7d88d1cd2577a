"""Tests for fire_util helpers."""
import pytest
import numpy as np

from firebehavior.exceptions import ValidationError
from firebehavior.utilities.fire_util import TimeLagClass, UtilFuncs


class TestTimeLagClass:

    def test_classes(self):
        assert TimeLagClass.all_classes == (1, 10, 100, 1000)

    def test_descriptions_cover_all_classes(self):
        assert set(TimeLagClass.descriptions) == set(TimeLagClass.all_classes)


class TestIsNumber:

    @pytest.mark.parametrize("value", [0, -3, 2.5, np.float64(1.5), np.int32(7), 1e308])
    def test_numbers(self, value):
        assert UtilFuncs.is_number(value)

    @pytest.mark.parametrize("value", [
        True, False, np.bool_(True), None, "5", [1], float("nan"),
        float("inf"), -float("inf"), np.float64("inf"), 1j,
    ])
    def test_non_numbers(self, value):
        assert not UtilFuncs.is_number(value)


class TestCheckNumeric:

    def test_valid_values_pass(self):
        UtilFuncs.check_numeric("bad", a=1, b=2.0)

    def test_names_offending_field(self):
        with pytest.raises(ValidationError) as exc_info:
            UtilFuncs.check_numeric("Invalid input", a=1, b="two")
        assert exc_info.value.field == "b"
        assert exc_info.value.value == "two"
        assert exc_info.value.message == "Invalid input"


class TestRoundHalfUp:

    @pytest.mark.parametrize("value, digits, expected", [
        (2.5, 0, 3),
        (3.5, 0, 4),
        (-2.5, 0, -2),
        (1.25, 1, 1.3),
        (0.125, 2, 0.13),
        (13.58, 1, 13.6),
        (7.0, 2, 7.0),
    ])
    def test_rounding(self, value, digits, expected):
        assert UtilFuncs.round_half_up(value, digits) == pytest.approx(expected)

    def test_differs_from_bankers_rounding(self):
        assert round(2.5) == 2
        assert UtilFuncs.round_half_up(2.5) == 3

    def test_too_large_for_decimals_unchanged(self):
        assert UtilFuncs.round_half_up(1e307, 2) == 1e307

    def test_large_whole_value(self):
        assert UtilFuncs.round_half_up(1e300) == 1e300
