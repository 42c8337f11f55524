"""The pattern catalog: every pattern with its description and demonstration."""
from typing import Dict, Iterable, List, Optional, Union

from pattern_catalog.catalog.entries import PatternCategory, PatternEntry
from pattern_catalog.domain.base.exceptions import PatternNotFoundError, ValidationError
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.patterns.creational import (
    abstract_factory,
    builder,
    factory,
    prototype,
    singleton,
)
from pattern_catalog.patterns.structural import adapter, bridge

logger = get_logger(__name__)

DEFAULT_ENTRIES = (
    PatternEntry(
        slug="singleton",
        name="Singleton",
        category=PatternCategory.CREATIONAL,
        summary=(
            "Ensures a class has only one instance and provides a global point of "
            "access to it. The instance is created lazily on first request."
        ),
        pros=[
            "Guarantees a single instance of the class",
            "Provides one global access point to that instance",
            "The instance is only created when it is first requested",
        ],
        cons=[
            "Hides dependencies behind global state",
            "Needs care to stay correct when several threads initialise it",
            "Makes unit testing harder because state leaks between tests",
        ],
        demonstrate=singleton.demonstrate,
    ),
    PatternEntry(
        slug="factory",
        name="Factory",
        category=PatternCategory.CREATIONAL,
        summary=(
            "Creates objects without exposing the instantiation logic. Callers ask "
            "for a product by key and receive an object with a common interface."
        ),
        pros=[
            "Decouples callers from concrete product classes",
            "Keeps product creation in one place",
        ],
        cons=[
            "Adding a product means changing the factory",
            "Can grow into a large conditional over time",
        ],
        demonstrate=factory.demonstrate,
    ),
    PatternEntry(
        slug="abstract-factory",
        name="Abstract Factory",
        category=PatternCategory.CREATIONAL,
        summary=(
            "Provides an interface for creating families of related objects. A "
            "family is chosen first, then that family's factory builds the product."
        ),
        pros=[
            "Products from one factory are guaranteed to belong together",
            "Swapping a whole family of products is a one-line change",
        ],
        cons=[
            "Introduces many new classes and indirection",
            "Supporting a new kind of product touches every factory",
        ],
        demonstrate=abstract_factory.demonstrate,
    ),
    PatternEntry(
        slug="builder",
        name="Builder",
        category=PatternCategory.CREATIONAL,
        summary=(
            "Separates the construction of a complex object from its representation, "
            "assembling it step by step before a final build step."
        ),
        pros=[
            "Objects can be constructed step by step",
            "The same construction code can produce different representations",
            "Avoids constructors with long parameter lists",
        ],
        cons=[
            "Requires a separate builder class per product",
            "Nothing forces required parts to be set before building",
        ],
        demonstrate=builder.demonstrate,
    ),
    PatternEntry(
        slug="prototype",
        name="Prototype",
        category=PatternCategory.CREATIONAL,
        summary=(
            "Creates new objects by copying an existing template object instead "
            "of instantiating classes directly."
        ),
        pros=[
            "Clones objects without coupling to their concrete classes",
            "Avoids repeated initialisation of preconfigured objects",
        ],
        cons=[
            "Copying objects with nested or circular references is tricky",
        ],
        demonstrate=prototype.demonstrate,
    ),
    PatternEntry(
        slug="adapter",
        name="Adapter",
        category=PatternCategory.STRUCTURAL,
        summary=(
            "Allows objects with incompatible interfaces to work together by "
            "wrapping one of them behind the interface the other expects."
        ),
        pros=[
            "Reuses existing classes without modifying them",
            "Keeps interface conversion separate from business logic",
        ],
        cons=[
            "Adds a layer of indirection and extra classes",
        ],
        demonstrate=adapter.demonstrate,
    ),
    PatternEntry(
        slug="bridge",
        name="Bridge",
        category=PatternCategory.STRUCTURAL,
        summary=(
            "Splits an abstraction from its implementation so the two can vary "
            "independently. The abstraction delegates work to the implementation."
        ),
        pros=[
            "Abstractions and implementations can be extended independently",
            "Client code only deals with the high-level abstraction",
        ],
        cons=[
            "Can overcomplicate code with a single implementation",
        ],
        demonstrate=bridge.demonstrate,
    ),
)


class PatternCatalog:
    """Read-only, ordered collection of pattern entries."""

    def __init__(self, entries: Iterable[PatternEntry] = DEFAULT_ENTRIES):
        self._entries: Dict[str, PatternEntry] = {}
        for entry in entries:
            if entry.slug in self._entries:
                raise ValueError(f"Duplicate pattern slug '{entry.slug}'")
            self._entries[entry.slug] = entry

    def list_entries(
        self, category: Optional[Union[PatternCategory, str]] = None
    ) -> List[PatternEntry]:
        """
        List entries in catalog order, optionally filtered by category.

        Raises:
            ValidationError: If the category is not a known pattern category
        """
        if category is None:
            return list(self._entries.values())
        try:
            category = PatternCategory(category)
        except ValueError as e:
            supported = [c.value for c in PatternCategory]
            raise ValidationError(f"Unknown pattern category '{category}'", details=supported) from e
        return [entry for entry in self._entries.values() if entry.category == category]

    def slugs(self) -> List[str]:
        return list(self._entries)

    def get(self, slug: str) -> PatternEntry:
        """
        Get an entry by slug.

        Raises:
            PatternNotFoundError: If no entry has this slug
        """
        try:
            return self._entries[slug]
        except KeyError:
            raise PatternNotFoundError(slug) from None

    def run(self, slug: str) -> List[str]:
        """Run the demonstration of the named pattern and return its output lines."""
        entry = self.get(slug)
        logger.debug("Running demonstration", pattern=slug)
        return entry.demonstrate()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, slug: object) -> bool:
        return slug in self._entries


def get_catalog() -> PatternCatalog:
    """Catalog of every pattern shipped with the package."""
    return PatternCatalog()
