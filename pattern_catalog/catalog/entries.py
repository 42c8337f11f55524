"""Catalog entry model."""
from enum import Enum
from typing import Any, Callable, Dict, List

from pydantic import Field

from pattern_catalog.domain.base.entity import ValueObject


class PatternCategory(str, Enum):
    """Gang-of-Four pattern categories covered by the catalog."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"


class PatternEntry(ValueObject):
    """One pattern: what it is, its trade-offs and how to see it run."""

    slug: str
    name: str
    category: PatternCategory
    summary: str
    pros: List[str] = Field(default_factory=list)
    cons: List[str] = Field(default_factory=list)
    demonstrate: Callable[[], List[str]] = Field(exclude=True)

    def to_dict(self, include_details: bool = True) -> Dict[str, Any]:
        """Plain-data view used by the CLI formatters."""
        data = self.model_dump(mode="json")
        if not include_details:
            data.pop("pros", None)
            data.pop("cons", None)
        return data
