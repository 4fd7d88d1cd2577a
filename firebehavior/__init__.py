"""firebehavior - Fire behavior calculator for fire weather dashboards."""

from firebehavior.models.emc import compute_emc
from firebehavior.models.time_lag_moisture import (
    step_moisture,
    run_model,
    calculate_drying_pattern,
    calculate_all_fuel_moistures,
    calculate_live_moisture,
    estimate_from_weather,
)
from firebehavior.models.rothermel import (
    calc_rate_of_spread,
    calc_fireline_intensity,
    calc_flame_len,
)
from firebehavior.models.fuel_models import Anderson13
from firebehavior.tools.fire_behavior_predictor import FireBehaviorPredictor, predict_fire_behavior
from firebehavior.exceptions import (
    FireBehaviorError,
    ValidationError,
    InvalidInputError,
    OutOfRangeError,
    DomainError,
    FuelModelError,
    ConfigurationError,
)

__version__ = "0.1.0"

__all__ = [
    "compute_emc",
    "step_moisture",
    "run_model",
    "calculate_drying_pattern",
    "calculate_all_fuel_moistures",
    "calculate_live_moisture",
    "estimate_from_weather",
    "calc_rate_of_spread",
    "calc_fireline_intensity",
    "calc_flame_len",
    "Anderson13",
    "FireBehaviorPredictor",
    "predict_fire_behavior",
    "FireBehaviorError",
    "ValidationError",
    "InvalidInputError",
    "OutOfRangeError",
    "DomainError",
    "FuelModelError",
    "ConfigurationError",
]
