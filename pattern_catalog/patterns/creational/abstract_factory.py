"""Abstract Factory pattern - pick a family of factories, then a product.

A family key selects the ``VehicleFactory`` for that family; the chosen
factory then resolves the variant key. Unknown family keys fail with
``UnknownFamilyError`` before any product lookup happens.
"""
from types import MappingProxyType
from typing import Any, List, Mapping, Type

from pattern_catalog.domain.base.exceptions import UnknownFamilyError
from pattern_catalog.domain.vehicle.products import BaseVehicle
from pattern_catalog.domain.vehicle.value_objects import VehicleFamily
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.patterns.creational.factory import (
    LandVehicleFactory,
    VehicleFactory,
    WaterVehicleFactory,
)

logger = get_logger(__name__)

FAMILY_FACTORIES: Mapping[VehicleFamily, Type[VehicleFactory]] = MappingProxyType({
    VehicleFamily.LAND: LandVehicleFactory,
    VehicleFamily.WATER: WaterVehicleFactory,
})


def supported_families() -> List[str]:
    return [family.value for family in FAMILY_FACTORIES]


def resolve_family(key: Any) -> VehicleFactory:
    """
    Get the factory serving the family named by ``key``.

    Raises:
        UnknownFamilyError: If the key names no registered family
    """
    if not isinstance(key, str) or key not in supported_families():
        logger.warning("Unknown vehicle family", key=key)
        raise UnknownFamilyError(key, supported_families())
    return FAMILY_FACTORIES[VehicleFamily(key)]()


def create_vehicle(family: Any, kind: Any) -> BaseVehicle:
    """Resolve the family, then let its factory build ``kind``."""
    return resolve_family(family).resolve(kind)


def demonstrate() -> List[str]:
    """Build one vehicle per family and describe it."""
    return [
        create_vehicle("land", "car").describe(),
        create_vehicle("water", "boat").describe(),
    ]
