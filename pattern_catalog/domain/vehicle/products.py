"""Vehicle products created by the factory examples.

Every product carries a literal ``type`` discriminant and exposes the same
``describe()`` capability, so callers never branch on the concrete class.
"""
from typing import Annotated, Literal, Union

from pydantic import Field

from pattern_catalog.domain.base.entity import ValueObject


class BaseVehicle(ValueObject):
    """Common shape of every vehicle product."""

    type: str
    wheels: int = 0

    def describe(self) -> str:
        return f"This is a {self.type}"


class Car(BaseVehicle):
    type: Literal["Car"] = "Car"
    wheels: int = 4


class Truck(BaseVehicle):
    type: Literal["Truck"] = "Truck"
    wheels: int = 6


class Boat(BaseVehicle):
    type: Literal["Boat"] = "Boat"


class Ship(BaseVehicle):
    type: Literal["Ship"] = "Ship"


Vehicle = Annotated[Union[Car, Truck, Boat, Ship], Field(discriminator="type")]
