"""
Configuration management system.

This module provides:
- Core registry and source infrastructure for dotted-path lookups
- System-level settings for the package itself
"""

# Core infrastructure
from .core import (
    ConfigurationRegistry, ConfigurationSource, DictConfigurationSource, coerce
)

from .system import SystemConfig, LogLevel


# Convenience functions
def get_config_registry(*sources: ConfigurationSource) -> ConfigurationRegistry:
    """Create a configuration registry populated with the given sources, in order."""
    registry = ConfigurationRegistry()
    for source in sources:
        registry.add_source(source)
    return registry


def get_system_config() -> SystemConfig:
    """Get the package settings from the environment."""
    return SystemConfig.from_env()


__all__ = [
    # Core infrastructure
    'ConfigurationRegistry',
    'ConfigurationSource',
    'DictConfigurationSource',
    'coerce',

    # System domain
    'SystemConfig',
    'LogLevel',

    # Convenience functions
    'get_config_registry',
    'get_system_config'
]
