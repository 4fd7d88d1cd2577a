"""Fuel model definitions for fire behavior calculations.

This module defines the Anderson 13 Fire Behavior Fuel Models (FBFMs) used
by the spread engine. The property table ships as package data
(`Anderson13.json`), is read once on first use and cached at class level,
and is never modified afterwards.

Classes:
    - Fuel: Base class representing a generic fuel type with physical properties.
    - Anderson13: Subclass representing the 13 standard Anderson fuel models.

References:
    - Anderson, H. E. (1982). Aids to Determining Fuel Models for Estimating Fire Behavior.
      USDA Forest Service General Technical Report INT-122.

"""
import json
import os
from typing import Dict, List, Tuple

from firebehavior.exceptions import FuelModelError

DEFAULT_HEAT_CONTENT = 8000 # btu/lb


class Fuel:
    """Represents a generic fuel type with physical and combustion properties.

    Args:
        name (str): Name of the fuel model.
        model_num (int): Fuel model number (e.g., Anderson 13 fuel model ID).
        fuel_load (dict): Fuel load (tons/acre) for each size class, keyed
                          `dead_1h`, `dead_10h`, `dead_100h`, `live_herb`,
                          `live_stem`.
        sav_ratio (float): Surface-area-to-volume ratio of the fine fuels (1/ft).
        fuel_depth (float): Fuel bed depth (ft).
        moisture_extinction (float): Dead fuel moisture of extinction (%).
        description (str, optional): Description of the fuel complex.
        typical (str, optional): Typical vegetation the model represents.

    Attributes:
        load (float): Fine (1-hour) dead fuel load driving spread (tons/acre).
        heat_content (float): Heat content of the fuel (BTU/lb), `8000`.
    """
    def __init__(self, name: str, model_num: int, fuel_load: Dict[str, float], sav_ratio: float,
                 fuel_depth: float, moisture_extinction: float, description: str = "",
                 typical: str = ""):

        self.name = name
        self.model_num = model_num
        self.description = description
        self.typical = typical

        self.fuel_load = dict(fuel_load)
        self.load = self.fuel_load["dead_1h"]

        self.sav_ratio = sav_ratio
        self.fuel_depth_ft = fuel_depth
        self.moisture_extinction = moisture_extinction

        self.heat_content = DEFAULT_HEAT_CONTENT

    def __repr__(self):
        return f"{type(self).__name__}({self.model_num}, name={self.name!r})"


class Anderson13(Fuel):
    _fuel_models = None # class-level cache

    @classmethod
    def load_fuel_models(cls):
        if cls._fuel_models is None:
            json_path = os.path.join(os.path.dirname(__file__), "Anderson13.json")
            with open(json_path, "r") as f:
                cls._fuel_models = json.load(f)

    @classmethod
    def list_models(cls) -> List[Tuple[int, str]]:
        """Return (model number, name) pairs in model number order."""
        cls.load_fuel_models()
        names = cls._fuel_models["names"]

        return sorted((int(model_id), name) for model_id, name in names.items())

    @classmethod
    def is_valid(cls, model_number) -> bool:
        cls.load_fuel_models()

        if isinstance(model_number, float) and not model_number.is_integer():
            return False

        try:
            model_id = str(int(model_number))
        except (TypeError, ValueError):
            return False

        return model_id in cls._fuel_models["names"]

    def __init__(self, model_number):
        self.load_fuel_models()

        if isinstance(model_number, bool) or not self.is_valid(model_number):
            raise FuelModelError("Invalid fuel model", fuel_model_id=model_number)

        model_number = int(model_number)
        model_id = str(model_number)

        super().__init__(
            name=self._fuel_models["names"][model_id],
            model_num=model_number,
            fuel_load=self._fuel_models["fuel_load"][model_id],
            sav_ratio=self._fuel_models["sav_ratio"][model_id],
            fuel_depth=self._fuel_models["fuel_bed_depth"][model_id],
            moisture_extinction=self._fuel_models["mx_dead"][model_id],
            description=self._fuel_models["descriptions"][model_id],
            typical=self._fuel_models["typical"][model_id]
        )
