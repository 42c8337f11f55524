"""Configuration schemas."""

from .app_schema import OUTPUT_FORMATS, AppConfig, OutputConfig
from .logging_schema import LoggingConfig

__all__ = ["AppConfig", "LoggingConfig", "OutputConfig", "OUTPUT_FORMATS"]
