# pattern_catalog/domain/base/exceptions.py
from typing import Any, Iterable, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ResourceNotFoundError(DomainException):
    """Raised when a requested resource cannot be found."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} with ID {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class UnknownKeyError(DomainException):
    """Raised when a discriminant key has no registered constructor."""
    key_type = "key"

    def __init__(self, key: Any, supported: Optional[Iterable[str]] = None):
        self.key = key
        self.supported: List[str] = list(supported or [])
        message = f"Unknown {self.key_type} '{key}'"
        if self.supported:
            message += f" (supported: {', '.join(self.supported)})"
        super().__init__(message)


class UnknownVariantError(UnknownKeyError):
    """Raised when a product key does not name a variant of the dispatcher."""
    key_type = "variant"


class UnknownFamilyError(UnknownKeyError):
    """Raised when a family key does not name a registered product family."""
    key_type = "family"


class PatternNotFoundError(ResourceNotFoundError):
    """Raised when a catalog entry cannot be found."""
    def __init__(self, slug: str):
        super().__init__("Pattern", slug)
        self.slug = slug


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
