"""Shared test configuration."""

import os
from unittest.mock import patch

import pytest

from pattern_catalog.catalog import PatternCatalog
from pattern_catalog.infrastructure.patterns.singleton_registry import SingletonRegistry


@pytest.fixture(autouse=True)
def reset_singletons():
    """Start every test with no singleton instances."""
    SingletonRegistry.get_instance().reset()
    yield
    SingletonRegistry.get_instance().reset()


@pytest.fixture
def clean_env():
    """Environment without any PATTERN_CATALOG_* overrides."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("PATTERN_CATALOG_")}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def catalog():
    return PatternCatalog()


@pytest.fixture
def config_file(tmp_path):
    """Write a configuration file and return its path."""

    def _write(content: str, name: str = "config.yml") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
