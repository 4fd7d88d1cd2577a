"""Tests for the Anderson 13 fuel model table."""
import pytest

from firebehavior.exceptions import FuelModelError
from firebehavior.models.fuel_models import Anderson13, Fuel, DEFAULT_HEAT_CONTENT


class TestAnderson13Lookup:
    """Tests for loading fuel models by number."""

    def test_model_2_properties(self, timber_grass_fuel):
        fuel = timber_grass_fuel
        assert fuel.model_num == 2
        assert fuel.name == "Timber (grass and understory)"
        assert fuel.load == 2.0
        assert fuel.sav_ratio == 3000
        assert fuel.fuel_depth_ft == 1.0
        assert fuel.moisture_extinction == 15
        assert fuel.heat_content == DEFAULT_HEAT_CONTENT

    def test_model_1_short_grass(self, short_grass_fuel):
        assert short_grass_fuel.load == 0.74
        assert short_grass_fuel.moisture_extinction == 12

    def test_string_and_integer_ids_match(self):
        by_int = Anderson13(10)
        by_str = Anderson13("10")
        by_float = Anderson13(10.0)
        assert by_int.name == by_str.name == by_float.name
        assert by_int.model_num == by_str.model_num == by_float.model_num == 10

    def test_descriptive_text(self):
        fuel = Anderson13(4)
        assert "chaparral" in fuel.description.lower()
        assert "chaparral" in fuel.typical.lower()

    def test_repr(self, timber_grass_fuel):
        assert repr(timber_grass_fuel) == "Anderson13(2, name='Timber (grass and understory)')"

    @pytest.mark.parametrize("model_number", range(1, 14))
    def test_all_models_physical(self, model_number):
        fuel = Anderson13(model_number)
        assert isinstance(fuel, Fuel)
        assert fuel.load > 0
        assert fuel.sav_ratio > 0
        assert fuel.fuel_depth_ft > 0
        assert 0 < fuel.moisture_extinction <= 40
        assert fuel.description


class TestAnderson13Validation:
    """Unknown identifiers are rejected."""

    @pytest.mark.parametrize("model_number", [0, 14, "99", "abc", None, 2.5, True, "2.5"])
    def test_invalid_model(self, model_number):
        with pytest.raises(FuelModelError, match="Invalid fuel model"):
            Anderson13(model_number)

    def test_error_carries_id(self):
        with pytest.raises(FuelModelError) as exc_info:
            Anderson13("99")
        assert exc_info.value.fuel_model_id == "99"
        assert "fuel model ID: 99" in str(exc_info.value)

    @pytest.mark.parametrize("model_number, expected", [
        (1, True), ("13", True), (7.0, True), (14, False), ("x", False), (None, False), (3.5, False),
    ])
    def test_is_valid(self, model_number, expected):
        assert Anderson13.is_valid(model_number) is expected


class TestListModels:
    """Tests for the fuel model catalogue."""

    def test_thirteen_models_in_order(self):
        models = Anderson13.list_models()
        assert [num for num, _ in models] == list(range(1, 14))

    def test_names(self):
        models = dict(Anderson13.list_models())
        assert models[1] == "Short Grass (1 foot)"
        assert models[13] == "Heavy Logging Slash"
