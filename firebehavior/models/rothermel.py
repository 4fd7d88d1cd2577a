"""Rothermel (1972) surface fire spread with Byram intensity and flame length.

The spread engine works from a single fine dead fuel class per fuel model:

    R = R_0 * (1 + phi_w + phi_s),    R_0 = I_R * xi / (w_0 * 0.01)

where I_R is the moisture-damped reaction intensity, xi the propagating flux
ratio and phi_w, phi_s the wind and slope coefficients. Fireline intensity
follows Byram (1959) and flame length follows Brown and Davis (1973).

References:
    Rothermel, R. C. (1972). A mathematical model for predicting fire spread
    in wildland fuels. USDA Forest Service Research Paper INT-115.
"""
import logging
from typing import Tuple, Union

import numpy as np

from firebehavior.exceptions import OutOfRangeError
from firebehavior.models.fuel_models import Anderson13, Fuel, DEFAULT_HEAT_CONTENT
from firebehavior.utilities.data_classes import FlameLength, SpreadResult
from firebehavior.utilities.fire_util import UtilFuncs
from firebehavior.utilities.unit_conversions import (
    TPA_to_Lbsft2,
    deg_to_pct_slope,
    ft_min_to_chains_hr,
    ft_min_to_m_min,
    ft_to_m,
)

logger = logging.getLogger(__name__)

# Divisor applied to the fuel load in the no-wind, no-slope spread rate
ROS_SCALING = 0.01


def calc_rate_of_spread(wind_speed: float, fuel_moisture: float, slope_deg: float,
                        fuel_model: Union[str, int, Fuel] = '2') -> SpreadResult:
    """Calculate the head fire rate of spread for a fuel model.

    Args:
        wind_speed (float): Midflame wind speed (mph).
        fuel_moisture (float): Fine dead fuel moisture (%).
        slope_deg (float): Slope steepness (degrees).
        fuel_model (Union[str, int, Fuel], optional): Anderson fuel model
            number or a :class:`Fuel`. Defaults to '2'.

    Returns:
        SpreadResult: Rate of spread in ft/min, ch/h and m/min and the
                      reaction intensity. `can_spread` is False, with all
                      rates zero, when the fuel is at or above its moisture
                      of extinction.

    Raises:
        FuelModelError: If the fuel model number is unknown.
        ValidationError: If a weather or terrain input is not a number.
        OutOfRangeError: If the wind speed or fuel moisture is negative, or the
            rate of spread overflows.
    """
    fuel = fuel_model if isinstance(fuel_model, Fuel) else Anderson13(fuel_model)

    UtilFuncs.check_numeric("Invalid input: all parameters must be numbers",
                            wind_speed=wind_speed, fuel_moisture=fuel_moisture,
                            slope_deg=slope_deg)

    if wind_speed < 0:
        raise OutOfRangeError("Wind speed must not be negative", field="wind_speed", value=wind_speed)

    if fuel_moisture < 0:
        raise OutOfRangeError("Fuel moisture must not be negative", field="fuel_moisture",
                              value=fuel_moisture)

    if fuel_moisture >= fuel.moisture_extinction:
        logger.debug("Fuel moisture %.2f%% at or above extinction (%s%%) for model %d",
                     fuel_moisture, fuel.moisture_extinction, fuel.model_num)
        return SpreadResult(can_spread=False)

    R_0, I_r = calc_r_0(fuel, fuel_moisture)

    phi_w = calc_wind_factor(fuel, wind_speed)
    phi_s = calc_slope_factor(fuel, slope_deg)

    R = R_0 * (1 + phi_w + phi_s) # ft/min

    if not np.isfinite(R):
        raise OutOfRangeError("Rate of spread is not finite", field="ros_ft_per_min", value=float(R))

    return SpreadResult(
        can_spread=True,
        ros_ft_per_min=R,
        ros_chains_per_hour=ft_min_to_chains_hr(R),
        ros_m_per_min=ft_min_to_m_min(R),
        reaction_intensity=I_r
    )

def calc_r_0(fuel: Fuel, m_f: float) -> Tuple[float, float]:
    """Calculate the no-wind, no-slope rate of spread.

    Args:
        fuel (Fuel): Fuel model.
        m_f (float): Fine dead fuel moisture (%).

    Returns:
        Tuple[float, float]: R_0 (ft/min) and reaction intensity (BTU/ft^2-min).
    """
    moisture_damping = calc_moisture_damping(m_f, fuel.moisture_extinction)

    I_r = calc_I_r(fuel, moisture_damping)
    flux_ratio = calc_flux_ratio(fuel)

    R_0 = (I_r * flux_ratio) / (fuel.load * ROS_SCALING)

    return R_0, I_r

def calc_moisture_damping(m_f: float, m_x: float) -> float:
    """Moisture damping coefficient, reduced combustion efficiency of wet fuel.

    Args:
        m_f (float): Fuel moisture.
        m_x (float): Moisture of extinction, same units as `m_f`.

    Returns:
        float: Damping coefficient in [0, 1].
    """
    if m_x <= 0:
        return 0.0

    r_m = m_f / m_x

    moist_damping = 1 - 2.59 * r_m + 5.11 * (r_m)**2 - 3.52 * (r_m)**3

    return max(0, moist_damping)

def calc_I_r(fuel: Fuel, moisture_damping: float) -> float:
    # Reaction intensity normalized to a per-minute rate
    I_r = (fuel.load * fuel.heat_content * moisture_damping) / 60

    return I_r

def calc_flux_ratio(fuel: Fuel) -> float:
    """Propagating flux ratio.

    Finer fuels (larger surface-area-to-volume ratio) and deeper beds
    propagate more of the reaction heat to unburned fuel.

    Args:
        fuel (Fuel): Fuel model.

    Returns:
        float: Propagating flux ratio (dimensionless).
    """
    sigma = fuel.sav_ratio

    return np.exp((0.792 + 0.681 * np.sqrt(sigma)) * (0.1 + fuel.fuel_depth_ft))

def calc_wind_factor(fuel: Fuel, wind_speed: float) -> float:
    """Wind coefficient phi_w.

    Args:
        fuel (Fuel): Fuel model.
        wind_speed (float): Midflame wind speed (mph).

    Returns:
        float: phi_w, zero in calm air.
    """
    if wind_speed <= 0:
        return 0.0

    phi_w = 0.4 * (wind_speed ** 0.5) * fuel.sav_ratio ** (-0.5)

    return phi_w

def calc_slope_factor(fuel: Fuel, slope_deg: float) -> float:
    """Slope coefficient phi_s.

    Args:
        fuel (Fuel): Fuel model.
        slope_deg (float): Slope steepness (degrees).

    Returns:
        float: phi_s, zero on flat or downhill ground.
    """
    slope_pct = deg_to_pct_slope(slope_deg)

    if slope_pct <= 0:
        return 0.0

    phi_s = 5.275 * (fuel.sav_ratio ** (-0.3)) * (slope_pct / 100) ** 2

    return phi_s

def calc_fireline_intensity(ros_ft_min: float, fuel_load_tpa: float,
                            heat_content: float = DEFAULT_HEAT_CONTENT) -> float:
    """Byram fireline intensity.

    Args:
        ros_ft_min (float): Rate of spread (ft/min).
        fuel_load_tpa (float): Available fuel load (tons/acre).
        heat_content (float, optional): Heat content (BTU/lb). Defaults to 8000.

    Returns:
        float: Fireline intensity (BTU/ft/s).
    """
    UtilFuncs.check_numeric("Invalid input: all parameters must be numbers",
                            ros_ft_min=ros_ft_min, fuel_load_tpa=fuel_load_tpa,
                            heat_content=heat_content)

    w = TPA_to_Lbsft2(fuel_load_tpa) # lbs/ft^2

    # Per-minute spread converted to per-second intensity
    I = (heat_content * w * ros_ft_min) / 60

    if not np.isfinite(I):
        raise OutOfRangeError("Fireline intensity is not finite", field="intensity", value=float(I))

    return I

def calc_flame_len(intensity: float) -> FlameLength:
    """Flame length from fireline intensity (Brown and Davis 1973 pg. 175).

    Args:
        intensity (float): Fireline intensity (BTU/ft/s).

    Returns:
        FlameLength: Flame length in feet and meters. Zero for a
                     non-positive intensity.
    """
    UtilFuncs.check_numeric("Invalid input: intensity must be a number", intensity=intensity)

    if intensity <= 0:
        return FlameLength(feet=0.0, meters=0.0)

    flame_len_ft = 0.45 * intensity ** (0.46)

    return FlameLength(feet=flame_len_ft, meters=ft_to_m(flame_len_ft))
