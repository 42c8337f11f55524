"""Builder pattern - assemble a car one part at a time.

Parts are optional: anything not added before ``build()`` stays ``None``.
"""
from typing import Any, Dict, List, Optional

from pydantic import Field
from pydantic import ValidationError as ModelValidationError

from pattern_catalog.domain.base.entity import ValueObject
from pattern_catalog.domain.base.exceptions import ValidationError


class BuiltCar(ValueObject):
    """Car produced by ``CarBuilder``; immutable once built."""

    engine: Optional[str] = None
    wheels: Optional[int] = Field(None, ge=0)
    color: Optional[str] = None

    def describe(self) -> str:
        parts = [f"{name}={value}" for name, value in self.model_dump().items() if value is not None]
        return f"Car({', '.join(parts)})"


class CarBuilder:
    """Chainable builder for ``BuiltCar``."""

    def __init__(self) -> None:
        self._fields: Dict[str, Any] = {}

    def add_engine(self, engine: str) -> "CarBuilder":
        self._fields["engine"] = engine
        return self

    def add_wheels(self, wheels: int) -> "CarBuilder":
        self._fields["wheels"] = wheels
        return self

    def add_color(self, color: str) -> "CarBuilder":
        self._fields["color"] = color
        return self

    def build(self) -> BuiltCar:
        """Terminal step: create the car from the parts added so far.

        The builder keeps its parts, so ``build()`` can be called again to
        produce further equal cars.

        Raises:
            ValidationError: If a part has an illegal value, e.g. negative wheels
        """
        try:
            return BuiltCar(**self._fields)
        except ModelValidationError as e:
            fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise ValidationError(f"Invalid car parts: {', '.join(fields)}", details=e.errors()) from e


def demonstrate() -> List[str]:
    car = CarBuilder().add_engine("V8").add_wheels(4).build()
    return [car.describe()]
