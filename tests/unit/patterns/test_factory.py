"""Tests for the single-level vehicle factory."""

import pytest
from pydantic import TypeAdapter

from pattern_catalog.domain.base.exceptions import DomainException, UnknownVariantError
from pattern_catalog.domain.vehicle.products import Car, Truck, Vehicle
from pattern_catalog.domain.vehicle.value_objects import VehicleKind
from pattern_catalog.patterns.creational.factory import (
    LandVehicleFactory,
    WaterVehicleFactory,
    create_vehicle,
    demonstrate,
)


@pytest.mark.unit
class TestVehicleFactory:
    """Test cases for key-based vehicle creation."""

    def setup_method(self):
        self.factory = LandVehicleFactory()

    @pytest.mark.parametrize(
        "key,expected_type,expected_class",
        [("car", "Car", Car), ("truck", "Truck", Truck)],
    )
    def test_resolve_valid_keys(self, key, expected_type, expected_class):
        vehicle = self.factory.resolve(key)

        assert isinstance(vehicle, expected_class)
        assert vehicle.type == expected_type
        assert vehicle.describe() == f"This is a {expected_type}"

    def test_create_vehicle_uses_land_factory(self):
        assert create_vehicle("car").type == "Car"
        assert create_vehicle("truck").type == "Truck"

    def test_resolve_returns_equal_but_distinct_instances(self):
        first = create_vehicle("car")
        second = create_vehicle("car")

        assert first == second
        assert first is not second

    def test_resolve_accepts_enum_member(self):
        assert self.factory.resolve(VehicleKind.TRUCK).type == "Truck"

    @pytest.mark.parametrize("key", ["bike", "", "Car", "CAR", " car", "car ", None, 1])
    def test_unknown_key_raises_unknown_variant(self, key):
        with pytest.raises(UnknownVariantError) as exc_info:
            self.factory.resolve(key)

        assert exc_info.value.key == key
        assert exc_info.value.supported == ["car", "truck"]

    def test_unknown_variant_is_domain_exception(self):
        with pytest.raises(DomainException, match="Unknown variant 'plane'"):
            create_vehicle("plane")

    def test_kind_from_other_family_is_unknown_variant(self):
        with pytest.raises(UnknownVariantError):
            self.factory.resolve("boat")
        with pytest.raises(UnknownVariantError):
            WaterVehicleFactory().resolve("car")

    def test_supported_keys(self):
        assert self.factory.supported_keys() == ["car", "truck"]
        assert WaterVehicleFactory().supported_keys() == ["boat", "ship"]
        assert self.factory.supports("car")
        assert not self.factory.supports("ship")

    def test_products_are_immutable(self):
        vehicle = create_vehicle("car")

        with pytest.raises(Exception):
            vehicle.type = "Truck"

    def test_discriminated_union_parses_by_type(self):
        vehicle = TypeAdapter(Vehicle).validate_python({"type": "Truck"})

        assert isinstance(vehicle, Truck)
        assert vehicle == create_vehicle("truck")

    def test_demonstrate(self):
        assert demonstrate() == ["This is a Car", "This is a Truck"]
