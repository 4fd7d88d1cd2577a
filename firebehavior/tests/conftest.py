"""Shared pytest fixtures for the firebehavior test suite.

This module provides reusable fixtures for testing firebehavior components,
including representative weather observations, fuel models and prediction
inputs.
"""

import pytest


# ============================================================================
# Weather Fixtures
# ============================================================================

@pytest.fixture
def hot_dry_weather():
    """Provide a hot, dry afternoon observation.

    Returns:
        WeatherObservation: 85 °F and 25% relative humidity.
    """
    from firebehavior.utilities.data_classes import WeatherObservation
    return WeatherObservation(temp_f=85, rh=25)


@pytest.fixture
def humid_weather():
    """Provide a cool, humid observation.

    Returns:
        WeatherObservation: 60 °F and 80% relative humidity.
    """
    from firebehavior.utilities.data_classes import WeatherObservation
    return WeatherObservation(temp_f=60, rh=80)


@pytest.fixture
def diurnal_steps():
    """Provide a day of weather as (temp_f, rh, hours) mappings.

    Returns:
        list: Overnight recovery followed by afternoon drying.
    """
    return [
        {"temp_f": 55, "rh": 80, "hours": 6},
        {"temp_f": 70, "rh": 45, "hours": 6},
        {"temp_f": 90, "rh": 15, "hours": 6},
        {"temp_f": 65, "rh": 60, "hours": 6},
    ]


# ============================================================================
# Fuel Fixtures
# ============================================================================

@pytest.fixture
def timber_grass_fuel():
    """Provide Anderson fuel model 2, timber with grass understory.

    Returns:
        Anderson13: Fuel model 2.
    """
    from firebehavior.models.fuel_models import Anderson13
    return Anderson13(2)


@pytest.fixture
def short_grass_fuel():
    """Provide Anderson fuel model 1, short grass.

    Returns:
        Anderson13: Fuel model 1.
    """
    from firebehavior.models.fuel_models import Anderson13
    return Anderson13(1)


# ============================================================================
# Prediction Fixtures
# ============================================================================

@pytest.fixture
def red_flag_inputs():
    """Provide prediction inputs for windy, dry conditions on a slope.

    Returns:
        FireBehaviorInputs: Model 2 fuel at 8% moisture.
    """
    from firebehavior.utilities.data_classes import FireBehaviorInputs
    return FireBehaviorInputs(
        wind_speed=15,      # mph
        fuel_moisture=8,    # %
        slope=20,           # degrees
        fuel_model='2',
        temp=85,            # °F
        rh=25,              # %
        use_emc=False
    )
