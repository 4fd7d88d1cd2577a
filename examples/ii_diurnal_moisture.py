"""Demo stepping fine fuel moisture through a day of changing weather.

Run directly: python examples/ii_diurnal_moisture.py
Each weather step holds its temperature and humidity for the given number
of hours.
"""

import matplotlib.pyplot as plt

from firebehavior.models.time_lag_moisture import run_model
from firebehavior.utilities.data_classes import WeatherStep
from firebehavior.utilities.fire_util import TimeLagClass

steps = [
    WeatherStep(temp_f=55, rh=85, hours=3),
    WeatherStep(temp_f=52, rh=90, hours=3),
    WeatherStep(temp_f=65, rh=60, hours=3),
    WeatherStep(temp_f=80, rh=30, hours=3),
    WeatherStep(temp_f=92, rh=15, hours=3),
    WeatherStep(temp_f=88, rh=20, hours=3),
    WeatherStep(temp_f=72, rh=45, hours=3),
    WeatherStep(temp_f=60, rh=75, hours=3),
]

for time_lag in (TimeLagClass.ONE_HOUR, TimeLagClass.TEN_HOUR):
    results = run_model(12, steps, time_lag)
    plt.step([r.hours for r in results], [r.moisture for r in results], where="post",
             label=f"{time_lag}hr")

plt.xlabel("Hours")
plt.ylabel("Fuel moisture (%)")
plt.legend()
plt.show()
