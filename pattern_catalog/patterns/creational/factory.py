"""Factory pattern - map a discriminant key to a new vehicle instance.

The set of products a factory can build is closed: every key resolves
through ``VehicleKind`` to a constructor, and keys outside the factory's
mapping fail with ``UnknownVariantError``. Matching is exact and
case-sensitive; there is no default variant.
"""
from types import MappingProxyType
from typing import Any, ClassVar, List, Mapping, Type

from pattern_catalog.domain.base.exceptions import UnknownVariantError
from pattern_catalog.domain.vehicle.products import BaseVehicle, Boat, Car, Ship, Truck
from pattern_catalog.domain.vehicle.value_objects import VehicleFamily, VehicleKind
from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class VehicleFactory:
    """
    Creates vehicles of one family from their discriminant key.

    Subclasses declare the family they serve and a total mapping from each
    of their ``VehicleKind`` members to the product constructor.
    """

    family: ClassVar[VehicleFamily]
    constructors: ClassVar[Mapping[VehicleKind, Type[BaseVehicle]]]

    def resolve(self, key: Any) -> BaseVehicle:
        """
        Create a new vehicle for ``key``.

        Args:
            key: Variant key, e.g. ``"car"``

        Returns:
            A fresh product instance

        Raises:
            UnknownVariantError: If the key names no variant of this factory
        """
        kind = self._kind_for(key)
        vehicle = self.constructors[kind]()
        logger.debug("Created vehicle", family=self.family.value, key=kind.value, type=vehicle.type)
        return vehicle

    def supported_keys(self) -> List[str]:
        """Keys this factory accepts, in declaration order."""
        return [kind.value for kind in self.constructors]

    def supports(self, key: Any) -> bool:
        return key in self.supported_keys()

    def _kind_for(self, key: Any) -> VehicleKind:
        if isinstance(key, str) and key in self.supported_keys():
            return VehicleKind(key)
        logger.warning("Unknown vehicle variant", family=self.family.value, key=key)
        raise UnknownVariantError(key, self.supported_keys())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(family='{self.family.value}')"


class LandVehicleFactory(VehicleFactory):
    """Factory for road vehicles."""

    family = VehicleFamily.LAND
    constructors = MappingProxyType({
        VehicleKind.CAR: Car,
        VehicleKind.TRUCK: Truck,
    })


class WaterVehicleFactory(VehicleFactory):
    """Factory for vessels."""

    family = VehicleFamily.WATER
    constructors = MappingProxyType({
        VehicleKind.BOAT: Boat,
        VehicleKind.SHIP: Ship,
    })


def create_vehicle(key: Any) -> BaseVehicle:
    """Create a road vehicle from its key (``"car"`` or ``"truck"``)."""
    return LandVehicleFactory().resolve(key)


def demonstrate() -> List[str]:
    """Build every road vehicle through the factory and describe it."""
    return [create_vehicle(key).describe() for key in LandVehicleFactory().supported_keys()]
