"""Configuration package."""

from .manager import ConfigurationManager, get_config_manager
from .schemas import OUTPUT_FORMATS, AppConfig, LoggingConfig, OutputConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "OutputConfig",
    "OUTPUT_FORMATS",
    "ConfigurationManager",
    "get_config_manager",
]
