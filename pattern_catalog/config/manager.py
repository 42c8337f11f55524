"""Configuration management for the application."""
from __future__ import annotations

import copy
import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from pattern_catalog.config.defaults import DEFAULT_CONFIG, ENV_PREFIX
from pattern_catalog.config.schemas import AppConfig
from pattern_catalog.config.utils.env_expansion import expand_env_vars
from pattern_catalog.domain.base.exceptions import ConfigurationError
from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

# Environment variables applied after the configuration file, keyed by dotted path
ENV_OVERRIDES = {
    f"{ENV_PREFIX}LOG_LEVEL": "logging.level",
    f"{ENV_PREFIX}LOG_DESTINATION": "logging.destination",
    f"{ENV_PREFIX}OUTPUT_FORMAT": "output.format",
}


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is assembled from, in order of precedence (lowest first):
    - built-in defaults
    - an optional YAML or JSON file
    - environment variable overrides

    Loading is lazy; the first access to ``config`` or ``get`` triggers it.
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        self._config_path = config_path
        self._lock = threading.RLock()
        self._raw_config: Optional[Dict[str, Any]] = None
        self._app_config: Optional[AppConfig] = None

    @property
    def config(self) -> AppConfig:
        """Get typed application configuration."""
        with self._lock:
            if self._app_config is None:
                self._app_config = self._create_app_config(self.get_raw_config())
        return self._app_config

    def get_raw_config(self) -> Dict[str, Any]:
        """Get the merged, expanded configuration dictionary."""
        with self._lock:
            if self._raw_config is None:
                self._raw_config = self._load()
            return copy.deepcopy(self._raw_config)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value: Any = self.get_raw_config()
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def reload(self) -> None:
        """Discard cached configuration so the next access reloads it."""
        with self._lock:
            self._raw_config = None
            self._app_config = None

    def _load(self) -> Dict[str, Any]:
        config = copy.deepcopy(DEFAULT_CONFIG)
        if self._config_path:
            _deep_merge(config, self._read_file(Path(self._config_path)))
        config = expand_env_vars(config)
        self._apply_env_overrides(config)
        logger.debug("Configuration loaded", config_path=self._config_path)
        return config

    @staticmethod
    def _read_file(path: Path) -> Dict[str, Any]:
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")
        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        return data

    @staticmethod
    def _apply_env_overrides(config: Dict[str, Any]) -> None:
        for env_name, dotted_key in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is None:
                continue
            section, field = dotted_key.split(".")
            config.setdefault(section, {})[field] = value

    @staticmethod
    def _create_app_config(raw_config: Dict[str, Any]) -> AppConfig:
        try:
            return AppConfig.model_validate(raw_config)
        except ValidationError as e:
            errors = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=errors) from e


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Merge ``override`` into ``base`` in place, descending into nested mappings."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def get_config_manager(config_path: Optional[str] = None) -> ConfigurationManager:
    """Create a configuration manager for the given (optional) file."""
    return ConfigurationManager(config_path)
