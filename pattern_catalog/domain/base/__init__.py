"""Shared kernel - base classes and exceptions used across the catalog."""

from .entity import MutableModel, ValueObject
from .exceptions import (
    ConfigurationError,
    DomainException,
    PatternNotFoundError,
    ResourceNotFoundError,
    UnknownFamilyError,
    UnknownKeyError,
    UnknownVariantError,
    ValidationError,
)

__all__: list[str] = [
    "ValueObject",
    "MutableModel",
    "DomainException",
    "ResourceNotFoundError",
    "ValidationError",
    "UnknownKeyError",
    "UnknownVariantError",
    "UnknownFamilyError",
    "PatternNotFoundError",
    "ConfigurationError",
]
