"""Equilibrium moisture content (EMC) of fine dead fuels.

EMC is the moisture content a dead fuel particle approaches asymptotically
when held at a constant air temperature and relative humidity. This module
evaluates a three-band regression in the spirit of Nelson's moisture
equilibrium theory, selecting the band by relative humidity.

Bands:
    - rh <= 10: very dry air, nearly linear in rh with a small negative
      temperature-humidity interaction term.
    - 10 < rh <= 50: the primary fire weather range, linear in rh and
      temperature.
    - rh > 50: moist air, EMC rising faster with rh and slightly with
      cooler temperatures. This band is linear in rh, not quadratic.

The result is clamped to [0.1, 40] percent.

References:
    Nelson, R. M. (1984). A method for describing equilibrium moisture content
    of forest fuels. Canadian Journal of Forest Research, 14(4), 597-600.
"""
import logging

from firebehavior.exceptions import OutOfRangeError, ValidationError
from firebehavior.utilities.fire_util import UtilFuncs

logger = logging.getLogger(__name__)

EMC_MIN = 0.1 # percent
EMC_MAX = 40.0 # percent

LOW_RH_LIMIT = 10
MID_RH_LIMIT = 50


def validate_weather(temp_f: float, rh: float):
    """Check that a temperature and relative humidity pair can be used.

    Args:
        temp_f (float): Air temperature (°F).
        rh (float): Relative humidity (%).

    Raises:
        ValidationError: If either value is not a number.
        OutOfRangeError: If `rh` lies outside [0, 100].
    """
    if not UtilFuncs.is_number(temp_f) or not UtilFuncs.is_number(rh):
        raise ValidationError("Invalid input: temperature and humidity must be numbers")

    if rh < 0 or rh > 100:
        raise OutOfRangeError("Relative humidity must be between 0 and 100")


def compute_emc(temp_f: float, rh: float) -> float:
    """Compute the equilibrium moisture content for the given weather.

    Args:
        temp_f (float): Air temperature (°F).
        rh (float): Relative humidity (%), between 0 and 100.

    Returns:
        float: Equilibrium moisture content (%), in [0.1, 40].

    Raises:
        ValidationError: If either value is not a number.
        OutOfRangeError: If `rh` lies outside [0, 100].
    """
    validate_weather(temp_f, rh)

    if rh <= LOW_RH_LIMIT:
        emc = calc_low_rh_emc(temp_f, rh)
    elif rh <= MID_RH_LIMIT:
        emc = calc_mid_rh_emc(temp_f, rh)
    else:
        emc = calc_high_rh_emc(temp_f, rh)

    emc = max(EMC_MIN, min(EMC_MAX, emc))
    logger.debug("EMC %.3f%% at %.1f F, %.1f%% RH", emc, temp_f, rh)

    return float(emc)

def calc_low_rh_emc(temp_f: float, rh: float) -> float:
    emc = 0.03 + (0.2626 * rh) - (0.00104 * rh * temp_f)

    return max(EMC_MIN, emc)

def calc_mid_rh_emc(temp_f: float, rh: float) -> float:
    # EMC increases with rh and falls slightly with temperature
    return 1.5 + (0.15 * rh) - (0.01 * temp_f / 10)

def calc_high_rh_emc(temp_f: float, rh: float) -> float:
    return 6 + (0.25 * (rh - MID_RH_LIMIT)) + (0.02 * (100 - temp_f) / 10)
