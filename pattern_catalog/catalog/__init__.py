"""Pattern catalog - descriptions, trade-offs and demonstrations."""

from .catalog import DEFAULT_ENTRIES, PatternCatalog, get_catalog
from .entries import PatternCategory, PatternEntry

__all__ = [
    "DEFAULT_ENTRIES",
    "PatternCatalog",
    "PatternCategory",
    "PatternEntry",
    "get_catalog",
]
