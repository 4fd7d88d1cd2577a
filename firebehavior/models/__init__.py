"""Fire behavior and fuel moisture models.

This package provides the empirical models composed by the fire behavior
predictor.

Modules:
    - emc: Equilibrium moisture content from temperature and humidity.
    - time_lag_moisture: Exponential time-lag dead fuel moisture model.
    - fuel_models: Anderson 13 fuel model definitions.
    - rothermel: Rothermel (1972) surface fire spread, fireline intensity
      and flame length.
"""
