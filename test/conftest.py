"""
Shared pytest configuration and fixtures for the appconfig tests.
"""

import pytest

from appconfig.config import ConfigurationRegistry, DictConfigurationSource


@pytest.fixture
def database_source():
    """Source holding flat and nested database settings."""
    return DictConfigurationSource({
        "db.host": "localhost",
        "db": {"name": "app", "pool": {"size": "10"}},
    })


@pytest.fixture
def registry(database_source):
    """Registry with the database source registered."""
    registry = ConfigurationRegistry()
    registry.add_source(database_source)
    return registry
