"""
Domain Layer

- base/: Shared kernel with base models and exceptions
- vehicle/: Vehicle products and the discriminants used to select them
"""

from .base import DomainException, UnknownFamilyError, UnknownVariantError
from .vehicle import BaseVehicle, Car, Truck, VehicleFamily, VehicleKind

__all__: list[str] = [
    "DomainException",
    "UnknownVariantError",
    "UnknownFamilyError",
    "BaseVehicle",
    "Car",
    "Truck",
    "VehicleKind",
    "VehicleFamily",
]
