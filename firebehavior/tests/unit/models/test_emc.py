"""Tests for the equilibrium moisture content calculation."""
import pytest
import numpy as np

from firebehavior.exceptions import FireBehaviorError, InvalidInputError, OutOfRangeError, ValidationError
from firebehavior.models.emc import (
    compute_emc,
    validate_weather,
    calc_low_rh_emc,
    calc_mid_rh_emc,
    calc_high_rh_emc,
    EMC_MIN,
    EMC_MAX,
)
from firebehavior.utilities.data_classes import WeatherObservation


class TestEMCBands:
    """Pinned values for each relative humidity band."""

    def test_low_rh_band(self):
        """0.03 + 0.2626*5 - 0.00104*5*90"""
        assert compute_emc(90, 5) == pytest.approx(0.875)

    def test_low_rh_band_upper_edge(self):
        """rh = 10 still uses the low humidity band."""
        assert compute_emc(70, 10) == pytest.approx(1.928)

    def test_mid_rh_band(self):
        """1.5 + 0.15*25 - 0.01*85/10"""
        assert compute_emc(85, 25) == pytest.approx(5.165)
        assert compute_emc(70, 30) == pytest.approx(5.93)

    def test_mid_rh_band_upper_edge(self):
        """rh = 50 still uses the mid humidity band."""
        assert compute_emc(70, 50) == pytest.approx(8.93)

    def test_high_rh_band(self):
        """6 + 0.25*(80 - 50) + 0.02*(100 - 60)/10"""
        assert compute_emc(60, 80) == pytest.approx(13.58)

    def test_saturated_air(self):
        assert compute_emc(70, 100) == pytest.approx(18.56)

    def test_band_helpers_match(self):
        assert compute_emc(90, 5) == pytest.approx(calc_low_rh_emc(90, 5))
        assert compute_emc(85, 25) == pytest.approx(calc_mid_rh_emc(85, 25))
        assert compute_emc(60, 80) == pytest.approx(calc_high_rh_emc(60, 80))

    def test_returns_unrounded_float(self):
        result = compute_emc(85, 25)
        assert isinstance(result, float)
        assert result != round(result, 1)


class TestEMCClamping:
    """EMC is never zero and never unbounded."""

    def test_zero_humidity_floors(self):
        """rh = 0 leaves only the 0.03 constant, below the floor."""
        assert compute_emc(100, 0) == EMC_MIN

    def test_extreme_heat_floors(self):
        """The temperature interaction term drives the raw value negative."""
        assert calc_low_rh_emc(300, 10) == EMC_MIN
        assert compute_emc(300, 10) == EMC_MIN

    def test_extreme_cold_caps(self):
        assert compute_emc(-20000, 100) == EMC_MAX

    @pytest.mark.parametrize("temp_f", [0, 32, 70, 100, 130])
    def test_range_over_all_humidities(self, temp_f):
        """Output lies in [0.1, 40] for every valid humidity."""
        for rh in np.linspace(0, 100, 201):
            emc = compute_emc(temp_f, float(rh))
            assert EMC_MIN <= emc <= EMC_MAX

    def test_humidity_bounds_are_inclusive(self):
        assert compute_emc(70, 0) >= EMC_MIN
        assert compute_emc(70, 100) <= EMC_MAX


class TestEMCValidation:
    """Invalid weather is rejected before any arithmetic."""

    @pytest.mark.parametrize("rh", [-0.1, -5, 100.5, 150])
    def test_humidity_out_of_range(self, rh):
        with pytest.raises(OutOfRangeError, match="Relative humidity must be between 0 and 100"):
            compute_emc(70, rh)

    def test_out_of_range_message_is_exact(self):
        with pytest.raises(OutOfRangeError) as exc_info:
            compute_emc(70, 150)
        assert exc_info.value.message == "Relative humidity must be between 0 and 100"
        assert str(exc_info.value) == "Relative humidity must be between 0 and 100"

    @pytest.mark.parametrize("temp_f, rh", [
        ("85", 25),
        (85, None),
        (None, None),
        (85, float("nan")),
        (float("inf"), 25),
        (True, 25),
    ])
    def test_non_numeric_input(self, temp_f, rh):
        with pytest.raises(InvalidInputError, match="temperature and humidity must be numbers"):
            compute_emc(temp_f, rh)

    def test_out_of_range_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            compute_emc(70, -1)

    def test_all_errors_share_base(self):
        with pytest.raises(FireBehaviorError):
            validate_weather("hot", 20)

    def test_numpy_scalars_accepted(self):
        assert compute_emc(np.float64(85), np.int64(25)) == pytest.approx(5.165)


class TestWeatherObservation:
    """Tests for the validated weather record."""

    def test_emc_matches_function(self, hot_dry_weather):
        assert hot_dry_weather.emc() == compute_emc(85, 25)

    def test_humid_observation(self, humid_weather):
        assert humid_weather.emc() == pytest.approx(13.58)

    def test_invalid_humidity_rejected_on_construction(self):
        with pytest.raises(OutOfRangeError):
            WeatherObservation(temp_f=70, rh=101)
