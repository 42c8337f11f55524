"""Base domain objects - foundation for the catalog's value shapes."""
from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for immutable value objects.

    Value objects are compared by their fields and cannot be changed once
    created. Use ``model_copy(update=...)`` to derive a modified copy.
    """
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )


class MutableModel(BaseModel):
    """Base class for models whose fields may be reassigned after creation."""
    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        extra="allow",
    )
