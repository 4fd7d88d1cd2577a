"""Complete fire behavior prediction for a single set of conditions.

:class:`FireBehaviorPredictor` chains the models together: an optional
equilibrium moisture content computed from temperature and humidity, the
Rothermel rate of spread, Byram fireline intensity and flame length. The
result is a plain record the dashboard can render directly.

The EMC calculation is a collaborator passed to the predictor, defaulting to
:func:`firebehavior.models.emc.compute_emc`.

Example:
    >>> predictor = FireBehaviorPredictor()
    >>> result = predictor.predict(wind_speed=10, fuel_model='3', temp=90, rh=20, use_emc=True)
    >>> result.rate_of_spread.chains_per_hour
"""
import logging
from collections.abc import Mapping
from typing import Callable, Optional, Union

from firebehavior.exceptions import ConfigurationError, FireBehaviorError
from firebehavior.models.emc import compute_emc
from firebehavior.models.fuel_models import Anderson13
from firebehavior.models.rothermel import calc_rate_of_spread, calc_fireline_intensity, calc_flame_len
from firebehavior.utilities.data_classes import (
    FireBehaviorFailure,
    FireBehaviorInputs,
    FireBehaviorResult,
    FireConditions,
    FlameLength,
    RateOfSpread,
)
from firebehavior.utilities.fire_util import UtilFuncs

logger = logging.getLogger(__name__)

NO_SPREAD_MSG = "Fuel moisture exceeds extinction moisture. Fire will not spread."

EMCModel = Callable[[float, float], float]


class FireBehaviorPredictor:
    """Predicts surface fire behavior from weather, terrain and fuel inputs.

    Args:
        emc_model (Callable[[float, float], float], optional): Function taking
            temperature (°F) and relative humidity (%) and returning the
            equilibrium moisture content (%). Defaults to :func:`compute_emc`.
    """
    def __init__(self, emc_model: Optional[EMCModel] = None):
        self.emc_model = emc_model if emc_model is not None else compute_emc

    def predict(self, inputs: Union[FireBehaviorInputs, Mapping, None] = None,
                **overrides) -> Union[FireBehaviorResult, FireBehaviorFailure]:
        """Predict fire behavior.

        Inputs missing from `inputs` take the defaults of
        :class:`FireBehaviorInputs`. Keyword overrides replace individual
        inputs.

        Errors are returned, not raised: an unknown fuel model, an invalid
        humidity on the EMC path or a malformed input yields a
        :class:`FireBehaviorFailure` carrying the error message.

        Args:
            inputs (Union[FireBehaviorInputs, Mapping, None], optional):
                Prediction inputs. Defaults to None.

        Returns:
            Union[FireBehaviorResult, FireBehaviorFailure]: Rounded fire
            behavior outputs, or the reason they could not be computed.
        """
        fuel_model = None

        try:
            inputs = self._resolve_inputs(inputs, overrides)
            fuel_model = inputs.fuel_model
            return self._predict(inputs)

        except FireBehaviorError as e:
            logger.warning("Fire behavior prediction failed: %s", e)
            return FireBehaviorFailure(error=getattr(e, "message", str(e)), fuel_model=fuel_model,
                                       details=self._error_details(e))

    @staticmethod
    def _error_details(error: FireBehaviorError) -> dict:
        # Context the exception carries beyond its message
        details = {"type": type(error).__name__}

        for attr in ("field", "value", "parameter", "fuel_model_id"):
            context = getattr(error, attr, None)
            if context is not None:
                details[attr] = context

        return details

    @staticmethod
    def _resolve_inputs(inputs, overrides) -> FireBehaviorInputs:
        if inputs is None:
            inputs = FireBehaviorInputs()

        elif isinstance(inputs, Mapping):
            inputs = FireBehaviorInputs.from_dict(inputs)

        elif not isinstance(inputs, FireBehaviorInputs):
            raise ConfigurationError(f"Unsupported inputs type {type(inputs).__name__}")

        if overrides:
            inputs = inputs.with_overrides(**overrides)

        return inputs

    def _predict(self, inputs: FireBehaviorInputs) -> FireBehaviorResult:
        fuel = Anderson13(inputs.fuel_model)

        calculated_emc = None
        effective_moisture = inputs.fuel_moisture

        if inputs.use_emc and inputs.temp is not None and inputs.rh is not None:
            calculated_emc = self.emc_model(inputs.temp, inputs.rh)
            effective_moisture = calculated_emc
            logger.debug("Using EMC %.2f%% as fuel moisture", calculated_emc)

        conditions = FireConditions(
            wind_speed=inputs.wind_speed,
            fuel_moisture=effective_moisture,
            slope=inputs.slope,
            temp=inputs.temp,
            rh=inputs.rh
        )

        reported_emc = None
        if calculated_emc is not None:
            reported_emc = UtilFuncs.round_half_up(calculated_emc, 1)

        spread = calc_rate_of_spread(inputs.wind_speed, effective_moisture, inputs.slope, fuel)

        if not spread.can_spread:
            return FireBehaviorResult(
                can_spread=False,
                fuel_model=fuel.name,
                conditions=conditions,
                emc=reported_emc,
                message=NO_SPREAD_MSG
            )

        intensity = calc_fireline_intensity(spread.ros_ft_per_min, fuel.load, fuel.heat_content)
        flame_len = calc_flame_len(intensity)

        return FireBehaviorResult(
            can_spread=True,
            fuel_model=fuel.name,
            conditions=conditions,
            rate_of_spread=RateOfSpread(
                chains_per_hour=UtilFuncs.round_half_up(spread.ros_chains_per_hour, 2),
                meters_per_min=UtilFuncs.round_half_up(spread.ros_m_per_min, 2),
                feet_per_min=UtilFuncs.round_half_up(spread.ros_ft_per_min, 2)
            ),
            flame_length=FlameLength(
                feet=UtilFuncs.round_half_up(flame_len.feet, 1),
                meters=UtilFuncs.round_half_up(flame_len.meters, 1)
            ),
            fireline_intensity=int(UtilFuncs.round_half_up(intensity)),
            emc=reported_emc
        )


def predict_fire_behavior(inputs: Union[FireBehaviorInputs, Mapping, None] = None,
                          emc_model: Optional[EMCModel] = None,
                          **overrides) -> Union[FireBehaviorResult, FireBehaviorFailure]:
    """Predict fire behavior with a one-off :class:`FireBehaviorPredictor`.

    Args:
        inputs (Union[FireBehaviorInputs, Mapping, None], optional): Prediction inputs.
        emc_model (Callable[[float, float], float], optional): EMC calculation.
            Defaults to :func:`compute_emc`.

    Returns:
        Union[FireBehaviorResult, FireBehaviorFailure]: See
        :meth:`FireBehaviorPredictor.predict`.
    """
    return FireBehaviorPredictor(emc_model).predict(inputs, **overrides)
