"""Demo printing predicted fire behavior for every Anderson fuel model.

Run directly: python examples/iii_fire_behavior_table.py
Set `use_emc` to False and adjust `fuel_moisture` to enter a measured fine
dead fuel moisture instead of the one computed from the weather.
"""

import logging

from firebehavior.models.fuel_models import Anderson13
from firebehavior.tools.fire_behavior_predictor import FireBehaviorPredictor
from firebehavior.utilities.data_classes import FireBehaviorFailure, FireBehaviorInputs

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

inputs = FireBehaviorInputs(
    wind_speed=10,      # mph
    fuel_moisture=8,    # %
    slope=15,           # degrees
    temp=88,            # °F
    rh=18,              # %
    use_emc=True
)

predictor = FireBehaviorPredictor()

for model_num, name in Anderson13.list_models():
    result = predictor.predict(inputs, fuel_model=model_num)

    if isinstance(result, FireBehaviorFailure):
        print(f"{model_num:>2} {name:<32} error: {result.error}")
    elif not result.can_spread:
        print(f"{model_num:>2} {name:<32} {result.message}")
    else:
        print(f"{model_num:>2} {name:<32} "
              f"ROS {result.rate_of_spread.chains_per_hour:.3g} ch/h, "
              f"flame {result.flame_length.feet:.3g} ft")

# Unknown fuel models come back as failures rather than exceptions
print(predictor.predict(inputs, fuel_model='99').to_dict())
