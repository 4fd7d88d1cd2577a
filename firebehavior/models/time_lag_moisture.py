"""Time-lag dead fuel moisture model.

Dead fuels exchange moisture with the air until they reach the equilibrium
moisture content (EMC) for the current weather. The approach is modelled as
first-order exponential relaxation with a time constant equal to the fuel's
time-lag class:

    M(t) = EMC + (M_0 - EMC) * exp(-t / tau)

Fine 1-hour fuels follow the weather closely, while 100-hour and 1000-hour
fuels respond over days to weeks. Every multi-step and drying-pattern
calculation here is repeated application of :func:`step_moisture`.

Functions:
    - step_moisture: Advance a moisture content toward EMC over an elapsed time.
    - run_model: Advance moisture through a sequence of weather steps.
    - calculate_drying_pattern: Sample the approach to EMC under fixed weather.
    - calculate_all_fuel_moistures: Step every time-lag class over one period.
    - calculate_live_moisture: Seasonal live fuel moisture estimate.
    - estimate_from_weather: Quick dead and live moisture estimates.

References:
    Fosberg, M. A., & Deeming, J. E. (1971). Derivation of the 1- and 10-hour
    timelag fuel moisture calculations for fire-danger rating. USDA Forest
    Service Research Note RM-207.
"""
import datetime
import logging
from collections.abc import Mapping, Sequence
from typing import List, Optional

import numpy as np

from firebehavior.exceptions import DomainError, OutOfRangeError, ValidationError
from firebehavior.models.emc import compute_emc
from firebehavior.utilities.data_classes import (
    AllFuelMoistures,
    DryingPattern,
    DryingSample,
    FuelMoistureEstimate,
    InitialMoistures,
    MoistureState,
    WeatherStep,
)
from firebehavior.utilities.fire_util import TimeLagClass, UtilFuncs

logger = logging.getLogger(__name__)

# Maximum number of samples in a drying pattern
MAX_DRYING_SAMPLES = 24

# Weights given to the previous value when lagging 10-h and 100-h fuels by an hour
TEN_HOUR_LAG_COEFF = 0.9
HUNDRED_HOUR_LAG_COEFF = 0.95

# Ratios applied to the 1-h value when no previous moisture is known
TEN_HOUR_RATIO = 1.2
HUNDRED_HOUR_RATIO = 1.4

# Seasonal live fuel moisture (%) by month, Northern Hemisphere
LIVE_MOISTURE_BY_MONTH = {
    1: 80, 2: 85, 3: 100, 4: 120,
    5: 130, 6: 120, 7: 100, 8: 90,
    9: 80, 10: 75, 11: 70, 12: 75
}

LIVE_MOISTURE_DEFAULT = 100
LIVE_MOISTURE_MIN = 60
LIVE_MOISTURE_MAX = 200

STEP_FIELDS_MSG = "Invalid weather step: must contain temp_f, rh, and hours"


def step_moisture(current_moisture: float, emc: float, elapsed_hours: float,
                  time_lag_hours: float) -> float:
    """Advance a fuel moisture content toward equilibrium.

    Args:
        current_moisture (float): Current fuel moisture (%).
        emc (float): Equilibrium moisture content (%).
        elapsed_hours (float): Time elapsed (hours).
        time_lag_hours (float): Time-lag constant of the fuel class (hours),
                                typically 1, 10, 100, or 1000.

    Returns:
        float: New fuel moisture (%), never negative.

    Raises:
        ValidationError: If any argument is not a number.
        DomainError: If `time_lag_hours` is not positive.
    """
    UtilFuncs.check_numeric("Invalid input: all parameters must be numbers",
                            current_moisture=current_moisture, emc=emc,
                            elapsed_hours=elapsed_hours, time_lag_hours=time_lag_hours)

    if time_lag_hours <= 0:
        raise DomainError("Timelag must be greater than 0", value=time_lag_hours)

    new_moisture = emc + (current_moisture - emc) * np.exp(-elapsed_hours / time_lag_hours)

    return float(max(0.0, new_moisture))

def run_model(initial_moisture: float, steps: Sequence,
              time_lag: float = TimeLagClass.ONE_HOUR) -> List[MoistureState]:
    """Run the time-lag model through a sequence of weather steps.

    Each step holds its weather for `hours` hours. The EMC for the step is
    computed from its temperature and humidity and the moisture is advanced
    with :func:`step_moisture`.

    Args:
        initial_moisture (float): Fuel moisture at hour 0 (%).
        steps (Sequence): Weather steps, each a :class:`WeatherStep` or a
                          mapping with `temp_f`, `rh` and `hours` keys.
        time_lag (float, optional): Time-lag constant (hours). Defaults to 1.

    Returns:
        List[MoistureState]: One state at hour 0 followed by one per step, with
                             moisture and EMC rounded to 0.1%.

    Raises:
        ValidationError: If `steps` is not a sequence or a step is malformed.
        DomainError: If `time_lag` is not positive.
    """
    if isinstance(steps, (str, bytes)) or not isinstance(steps, Sequence):
        raise ValidationError("weather steps must be a sequence", field="steps",
                              value=type(steps).__name__)

    UtilFuncs.check_numeric("Invalid input: all parameters must be numbers",
                            initial_moisture=initial_moisture, time_lag=time_lag)

    if time_lag <= 0:
        raise DomainError("Timelag must be greater than 0", value=time_lag)

    results = [MoistureState(hours=0, moisture=initial_moisture, emc=None)]

    curr_moisture = initial_moisture
    cumulative_hours = 0

    for i, step in enumerate(steps):
        temp_f, rh, hours = _unpack_step(step, i)

        emc = compute_emc(temp_f, rh)
        curr_moisture = step_moisture(curr_moisture, emc, hours, time_lag)
        cumulative_hours += hours

        results.append(MoistureState(
            hours=cumulative_hours,
            moisture=UtilFuncs.round_half_up(curr_moisture, 1),
            emc=UtilFuncs.round_half_up(emc, 1),
            temp_f=temp_f,
            rh=rh
        ))

    logger.debug("Ran %d weather steps for %s-hour fuel", len(steps), time_lag)

    return results

def _unpack_step(step, index: int):
    field = f"steps[{index}]"

    if isinstance(step, WeatherStep):
        values = (step.temp_f, step.rh, step.hours)
    elif isinstance(step, Mapping):
        values = (step.get("temp_f"), step.get("rh"), step.get("hours"))
    else:
        raise ValidationError(STEP_FIELDS_MSG, field=field)

    if not all(UtilFuncs.is_number(v) for v in values):
        raise ValidationError(STEP_FIELDS_MSG, field=field)

    if values[2] < 0:
        raise OutOfRangeError("Weather step hours must not be negative", field=field, value=values[2])

    return values

def calculate_drying_pattern(initial_moisture: float, temp_f: float, rh: float,
                             duration_hours: float,
                             time_lag: float = TimeLagClass.ONE_HOUR) -> DryingPattern:
    """Sample a fuel's approach to equilibrium under constant weather.

    The duration is split into at most 24 equal intervals, each at least an
    hour long. Samples move monotonically toward the EMC.

    Args:
        initial_moisture (float): Fuel moisture at hour 0 (%).
        temp_f (float): Air temperature held for the whole duration (°F).
        rh (float): Relative humidity held for the whole duration (%).
        duration_hours (float): Length of the pattern (hours).
        time_lag (float, optional): Time-lag constant (hours). Defaults to 1.

    Returns:
        DryingPattern: Samples, final moisture and a one-line description.
    """
    UtilFuncs.check_numeric("Invalid input: all parameters must be numbers",
                            initial_moisture=initial_moisture,
                            duration_hours=duration_hours, time_lag=time_lag)

    if duration_hours < 0:
        raise OutOfRangeError("Duration must not be negative", field="duration_hours",
                              value=duration_hours)

    if time_lag <= 0:
        raise DomainError("Timelag must be greater than 0", value=time_lag)

    emc = compute_emc(temp_f, rh)
    interval_hours = max(1, duration_hours / MAX_DRYING_SAMPLES)

    # Small tolerance so durations that divide evenly keep their last sample
    num_intervals = int(np.floor(duration_hours / interval_hours + 1e-9))

    curr_moisture = initial_moisture
    steps = [DryingSample(hours=0, moisture=initial_moisture)]

    for k in range(1, num_intervals + 1):
        curr_moisture = step_moisture(curr_moisture, emc, interval_hours, time_lag)
        steps.append(DryingSample(
            hours=UtilFuncs.round_half_up(k * interval_hours, 1),
            moisture=UtilFuncs.round_half_up(curr_moisture, 1)
        ))

    final_moisture = steps[-1].moisture
    description = (f"{time_lag:g}-hour fuel drying from {initial_moisture:g}% "
                   f"to {final_moisture:g}% over {duration_hours:g} hours")

    return DryingPattern(
        emc=UtilFuncs.round_half_up(emc, 1),
        time_lag=time_lag,
        steps=tuple(steps),
        final_moisture=final_moisture,
        description=description
    )

def calculate_all_fuel_moistures(temp_f: float, rh: float, hours: float = 12,
                                 initial: Optional[InitialMoistures] = None) -> AllFuelMoistures:
    """Step every dead fuel time-lag class toward the same EMC.

    Args:
        temp_f (float): Air temperature (°F).
        rh (float): Relative humidity (%).
        hours (float, optional): Time period (hours). Defaults to 12.
        initial (InitialMoistures, optional): Starting moistures per class.
                                              Defaults to 10/12/14/16%.

    Returns:
        AllFuelMoistures: EMC and the new moisture for each class, to 0.01%.
    """
    if initial is None:
        initial = InitialMoistures()

    emc = compute_emc(temp_f, rh)

    def step(m_0, time_lag):
        return UtilFuncs.round_half_up(step_moisture(m_0, emc, hours, time_lag), 2)

    return AllFuelMoistures(
        emc=UtilFuncs.round_half_up(emc, 2),
        one_hour=step(initial.hr1, TimeLagClass.ONE_HOUR),
        ten_hour=step(initial.hr10, TimeLagClass.TEN_HOUR),
        hundred_hour=step(initial.hr100, TimeLagClass.HUNDRED_HOUR),
        thousand_hour=step(initial.hr1000, TimeLagClass.THOUSAND_HOUR),
        temp_f=temp_f,
        rh=rh,
        hours=hours
    )

def calc_ten_hour_moisture(one_hour_mf: float, prev_mf: Optional[float] = None) -> float:
    if prev_mf is not None:
        return TEN_HOUR_LAG_COEFF * prev_mf + (1 - TEN_HOUR_LAG_COEFF) * one_hour_mf

    return one_hour_mf * TEN_HOUR_RATIO

def calc_hundred_hour_moisture(one_hour_mf: float, prev_mf: Optional[float] = None) -> float:
    ten_hour_mf = calc_ten_hour_moisture(one_hour_mf, prev_mf)

    if prev_mf is not None:
        return HUNDRED_HOUR_LAG_COEFF * prev_mf + (1 - HUNDRED_HOUR_LAG_COEFF) * ten_hour_mf

    return ten_hour_mf * HUNDRED_HOUR_RATIO

def calculate_live_moisture(month: int, temp_f: float, rainfall_30day: float = 0) -> float:
    """Estimate live fuel moisture from season, heat stress and recent rain.

    Args:
        month (int): Month of the year (1-12).
        temp_f (float): Air temperature (°F). Each degree above 85 °F dries
                        live fuels by 0.3%.
        rainfall_30day (float, optional): Rainfall over the last 30 days
                                          (inches). Counts up to 30.

    Returns:
        float: Live fuel moisture (%), within [60, 200].
    """
    UtilFuncs.check_numeric("Invalid input: all parameters must be numbers",
                            temp_f=temp_f, rainfall_30day=rainfall_30day)

    base_moisture = LIVE_MOISTURE_BY_MONTH.get(month, LIVE_MOISTURE_DEFAULT)

    base_moisture += min(30, rainfall_30day) * 0.5

    if temp_f > 85:
        base_moisture -= (temp_f - 85) * 0.3

    return float(max(LIVE_MOISTURE_MIN, min(LIVE_MOISTURE_MAX, base_moisture)))

def estimate_from_weather(temp_f: float, rh: float, month: Optional[int] = None,
                          rainfall_30day: float = 0, prev_10hr: Optional[float] = None,
                          prev_100hr: Optional[float] = None) -> FuelMoistureEstimate:
    """Estimate dead and live fuel moistures from a weather observation.

    The 1-hour value is the EMC. The 10-hour and 100-hour values lag the
    previous value by one hour when it is given, otherwise they are scaled
    up from the 1-hour value.

    Args:
        temp_f (float): Air temperature (°F).
        rh (float): Relative humidity (%).
        month (int, optional): Month of the year. Defaults to the current month.
        rainfall_30day (float, optional): Rainfall over the last 30 days.
        prev_10hr (float, optional): Previous 10-hour fuel moisture (%).
        prev_100hr (float, optional): Previous 100-hour fuel moisture (%).

    Returns:
        FuelMoistureEstimate: Whole-percent moistures for each class.
    """
    if month is None:
        month = datetime.date.today().month

    one_hour = compute_emc(temp_f, rh)
    ten_hour = calc_ten_hour_moisture(one_hour, prev_10hr)
    hundred_hour = calc_hundred_hour_moisture(one_hour, prev_100hr)
    live = calculate_live_moisture(month, temp_f, rainfall_30day)

    def whole(value, floor):
        return int(max(floor, UtilFuncs.round_half_up(value)))

    return FuelMoistureEstimate(
        one_hour=whole(one_hour, 1),
        ten_hour=whole(ten_hour, 1),
        hundred_hour=whole(hundred_hour, 1),
        live_herbaceous=whole(live, 30),
        live_stem=whole(live * 1.2, 60)
    )
