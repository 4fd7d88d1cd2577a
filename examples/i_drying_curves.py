"""Demo plotting how each dead fuel time-lag class dries under the same weather.

Run directly: python examples/i_drying_curves.py
Adjust the weather block below to see how humidity and heat change the
equilibrium moisture content the fuels approach.
"""

import matplotlib.pyplot as plt

from firebehavior.models.time_lag_moisture import calculate_drying_pattern
from firebehavior.utilities.fire_util import TimeLagClass

# Hot, dry afternoon held for two days
temp_f = 90
rh = 15
duration_hours = 48
initial_moisture = 25

for time_lag in TimeLagClass.all_classes:
    pattern = calculate_drying_pattern(initial_moisture, temp_f, rh, duration_hours, time_lag)

    hours = [s.hours for s in pattern.steps]
    moisture = [s.moisture for s in pattern.steps]

    plt.plot(hours, moisture, label=f"{time_lag}hr")
    print(pattern.description)

plt.axhline(pattern.emc, color="k", linestyle="--", label="EMC")
plt.xlabel("Hours")
plt.ylabel("Fuel moisture (%)")
plt.legend()
plt.show()
