"""Tests for prototype cloning."""

import pytest

from pattern_catalog.patterns.creational.prototype import VehiclePrototype, demonstrate


@pytest.mark.unit
class TestVehiclePrototype:
    """Test cases for cloning a template vehicle."""

    def setup_method(self):
        self.template = VehiclePrototype()

    def test_clone_starts_equal_to_template(self):
        clone = self.template.clone()

        assert clone.type == "Vehicle"
        assert clone is not self.template

    def test_changing_clone_leaves_template_untouched(self):
        clone = self.template.clone()
        clone.type = "Car"

        assert clone.type == "Car"
        assert self.template.type == "Vehicle"

    def test_clone_does_not_share_mutable_fields(self):
        self.template.features.append("radio")
        clone = self.template.clone()

        clone.features.append("sunroof")

        assert self.template.features == ["radio"]
        assert clone.features == ["radio", "sunroof"]

    def test_clone_with_overrides(self):
        clone = self.template.clone(type="Truck")

        assert clone.type == "Truck"
        assert self.template.type == "Vehicle"

    def test_fields_added_after_cloning_stay_on_clone(self):
        clone = self.template.clone(wheels=4)
        clone.color = "blue"

        assert clone.wheels == 4
        assert clone.color == "blue"
        assert not hasattr(self.template, "wheels")
        assert not hasattr(self.template, "color")

    def test_demonstrate(self):
        assert demonstrate() == ["Clone type: Car", "Template type: Vehicle"]
