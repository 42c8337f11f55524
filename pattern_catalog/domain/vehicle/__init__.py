"""Vehicle bounded context - products and discriminants shared by the factories."""

from .products import BaseVehicle, Boat, Car, Ship, Truck, Vehicle
from .value_objects import VehicleFamily, VehicleKind

__all__: list[str] = [
    "BaseVehicle",
    "Car",
    "Truck",
    "Boat",
    "Ship",
    "Vehicle",
    "VehicleKind",
    "VehicleFamily",
]
