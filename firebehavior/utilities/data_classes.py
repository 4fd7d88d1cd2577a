from dataclasses import dataclass, field, asdict, fields, replace
from typing import Optional, Dict, Mapping, Tuple, Union

from firebehavior.exceptions import ConfigurationError
from firebehavior.models.emc import compute_emc, validate_weather

# Values here are immutable records handed to the dashboard; to_dict() gives
# the plain nested structure the UI renders.

@dataclass(frozen=True)
class WeatherObservation:
    temp_f: float
    rh: float

    def __post_init__(self):
        validate_weather(self.temp_f, self.rh)

    def emc(self) -> float:
        return compute_emc(self.temp_f, self.rh)

@dataclass(frozen=True)
class WeatherStep:
    temp_f: float
    rh: float
    hours: float

@dataclass(frozen=True)
class MoistureState:
    hours: float
    moisture: float
    emc: Optional[float] = None
    temp_f: Optional[float] = None
    rh: Optional[float] = None

    def to_dict(self) -> Dict:
        return asdict(self)

@dataclass(frozen=True)
class DryingSample:
    hours: float
    moisture: float

@dataclass(frozen=True)
class DryingPattern:
    emc: float
    time_lag: float
    steps: Tuple[DryingSample, ...]
    final_moisture: float
    description: str

    def to_dict(self) -> Dict:
        return asdict(self)

@dataclass(frozen=True)
class InitialMoistures:
    """Starting dead fuel moistures (%) for each time-lag class."""
    hr1: float = 10
    hr10: float = 12
    hr100: float = 14
    hr1000: float = 16

@dataclass(frozen=True)
class AllFuelMoistures:
    emc: float
    one_hour: float
    ten_hour: float
    hundred_hour: float
    thousand_hour: float
    temp_f: float
    rh: float
    hours: float

    def to_dict(self) -> Dict:
        return asdict(self)

@dataclass(frozen=True)
class FuelMoistureEstimate:
    one_hour: int
    ten_hour: int
    hundred_hour: int
    live_herbaceous: int
    live_stem: int

    def to_dict(self) -> Dict:
        return asdict(self)

@dataclass(frozen=True)
class SpreadResult:
    can_spread: bool
    ros_ft_per_min: float = 0.0
    ros_chains_per_hour: float = 0.0
    ros_m_per_min: float = 0.0
    reaction_intensity: float = 0.0 # BTU/ft^2-min

@dataclass(frozen=True)
class FlameLength:
    feet: float
    meters: float

@dataclass(frozen=True)
class RateOfSpread:
    chains_per_hour: float
    meters_per_min: float
    feet_per_min: float

@dataclass(frozen=True)
class FireConditions:
    wind_speed: float
    fuel_moisture: float
    slope: float
    temp: Optional[float]
    rh: Optional[float]

@dataclass(frozen=True)
class FireBehaviorInputs:
    """Inputs to a fire behavior prediction.

    Attributes:
        wind_speed (float): Midflame wind speed (mph).
        fuel_moisture (float): Fine dead fuel moisture (%), used unless
                               `use_emc` is set.
        slope (float): Slope steepness (degrees).
        fuel_model (Union[str, int]): Anderson fuel model number.
        temp (float): Air temperature (°F).
        rh (float): Relative humidity (%).
        use_emc (bool): Replace `fuel_moisture` with the equilibrium moisture
                        content computed from `temp` and `rh`.
    """
    wind_speed: float = 0
    fuel_moisture: float = 10
    slope: float = 0
    fuel_model: Union[str, int] = '2'
    temp: Optional[float] = 70
    rh: Optional[float] = 30
    use_emc: bool = False

    @classmethod
    def _check_keys(cls, params: Mapping):
        known = {f.name for f in fields(cls)}

        for key in params:
            if key not in known:
                raise ConfigurationError("Unknown fire behavior input", parameter=key)

    @classmethod
    def from_dict(cls, params: Mapping) -> "FireBehaviorInputs":
        cls._check_keys(params)
        return cls(**params)

    def with_overrides(self, **overrides) -> "FireBehaviorInputs":
        self._check_keys(overrides)
        return replace(self, **overrides)

@dataclass(frozen=True)
class FireBehaviorResult:
    can_spread: bool
    fuel_model: str
    conditions: FireConditions
    rate_of_spread: Optional[RateOfSpread] = None
    flame_length: Optional[FlameLength] = None
    fireline_intensity: Optional[int] = None
    emc: Optional[float] = None
    message: Optional[str] = None

    def to_dict(self) -> Dict:
        # Drop unset optional outputs so the UI only sees what was computed
        return {k: v for k, v in asdict(self).items() if v is not None}

@dataclass(frozen=True)
class FireBehaviorFailure:
    error: str
    fuel_model: Optional[Union[str, int]] = None
    details: Dict = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return asdict(self)
