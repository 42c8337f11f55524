# pattern_catalog/domain/vehicle/value_objects.py
from enum import Enum


class VehicleKind(str, Enum):
    """Closed set of vehicle variants the factories can construct."""
    CAR = "car"
    TRUCK = "truck"
    BOAT = "boat"
    SHIP = "ship"


class VehicleFamily(str, Enum):
    """Closed set of vehicle families served by the abstract factory."""
    LAND = "land"
    WATER = "water"
