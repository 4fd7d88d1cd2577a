"""Tests for unit conversion functions."""
import pytest

from firebehavior.utilities.unit_conversions import (
    ft_to_m,
    ft_min_to_chains_hr,
    ft_min_to_m_min,
    TPA_to_Lbsft2,
    deg_to_pct_slope,
)


class TestLengthConversions:

    def test_ft_to_m(self):
        assert ft_to_m(10) == pytest.approx(3.048)


class TestSpreadRateConversions:

    def test_one_chain_per_hour(self):
        """66 ft per hour is 1.1 ft/min."""
        assert ft_min_to_chains_hr(1.1) == pytest.approx(1.0)

    def test_ft_min_to_m_min(self):
        assert ft_min_to_m_min(100) == pytest.approx(30.48)


class TestFuelLoadConversions:

    def test_tons_per_acre(self):
        assert TPA_to_Lbsft2(1) == pytest.approx(2000 / 43560)


class TestSlopeConversion:

    @pytest.mark.parametrize("deg, pct", [(0, 0), (45, 100), (-45, -100)])
    def test_deg_to_pct_slope(self, deg, pct):
        assert deg_to_pct_slope(deg) == pytest.approx(pct, abs=1e-9)
