"""Version information for pattern-catalog."""

__version__ = "1.0.0"
