"""Prototype pattern - create objects by copying a template."""
from typing import Any, List

from pydantic import Field

from pattern_catalog.domain.base.entity import MutableModel


class VehiclePrototype(MutableModel):
    """Template vehicle that produces independent copies of itself."""

    type: str = "Vehicle"
    features: List[str] = Field(default_factory=list)

    def clone(self, **overrides: Any) -> "VehiclePrototype":
        """
        Copy the template, then apply ``overrides``.

        The copy owns its own containers, so changing a clone never changes
        the template. Overrides may name fields the template lacks; they are
        added to the clone only.
        """
        duplicate = self.model_copy(deep=True)
        for name, value in overrides.items():
            setattr(duplicate, name, value)
        return duplicate


def demonstrate() -> List[str]:
    template = VehiclePrototype()
    car = template.clone()
    car.type = "Car"
    return [
        f"Clone type: {car.type}",
        f"Template type: {template.type}",
    ]
