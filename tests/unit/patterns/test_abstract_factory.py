"""Tests for the two-level (family, then variant) vehicle factory."""

import pytest

from pattern_catalog.domain.base.exceptions import UnknownFamilyError, UnknownVariantError
from pattern_catalog.patterns.creational import factory
from pattern_catalog.patterns.creational.abstract_factory import (
    FAMILY_FACTORIES,
    create_vehicle,
    demonstrate,
    resolve_family,
    supported_families,
)
from pattern_catalog.patterns.creational.factory import LandVehicleFactory, WaterVehicleFactory


@pytest.mark.unit
class TestAbstractFactory:
    """Test cases for family resolution."""

    def test_resolve_family_returns_family_factory(self):
        assert isinstance(resolve_family("land"), LandVehicleFactory)
        assert isinstance(resolve_family("water"), WaterVehicleFactory)

    @pytest.mark.parametrize("key", ["car", "truck"])
    def test_land_family_matches_single_level_factory(self, key):
        assert resolve_family("land").resolve(key) == factory.create_vehicle(key)

    @pytest.mark.parametrize("family,key,expected", [
        ("land", "car", "Car"),
        ("land", "truck", "Truck"),
        ("water", "boat", "Boat"),
        ("water", "ship", "Ship"),
    ])
    def test_create_vehicle(self, family, key, expected):
        assert create_vehicle(family, key).type == expected

    @pytest.mark.parametrize("family", ["air", "Land", "", None])
    def test_unknown_family_raises(self, family):
        with pytest.raises(UnknownFamilyError) as exc_info:
            resolve_family(family)

        assert exc_info.value.supported == ["land", "water"]

    def test_unknown_family_fails_before_variant_lookup(self):
        with pytest.raises(UnknownFamilyError):
            create_vehicle("space", "not-a-kind")

    def test_unknown_variant_in_known_family(self):
        with pytest.raises(UnknownVariantError, match="supported: boat, ship"):
            create_vehicle("water", "car")

    def test_every_family_has_a_factory(self):
        assert supported_families() == ["land", "water"]
        for family, factory_class in FAMILY_FACTORIES.items():
            assert factory_class.family == family

    def test_demonstrate(self):
        assert demonstrate() == ["This is a Car", "This is a Boat"]
