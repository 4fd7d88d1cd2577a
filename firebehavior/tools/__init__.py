"""Fire behavior prediction tools.

This package chains the moisture and spread models into a single
prediction for the dashboard.

Classes:
    - FireBehaviorPredictor: Fire behavior prediction with an injectable EMC model.

.. autoclass:: FireBehaviorPredictor
    :members:
"""

from firebehavior.tools.fire_behavior_predictor import FireBehaviorPredictor, predict_fire_behavior

__all__ = [
    "FireBehaviorPredictor",
    "predict_fire_behavior",
]
