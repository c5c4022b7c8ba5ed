"""
Core configuration lookup components.

This module provides the foundational components for configuration lookups:
- ConfigurationSource: Abstract source interface and the in-memory implementation
- ConfigurationRegistry: Ordered, first-match-wins registry of sources
- coerce: Conversion of raw values into the supported value kinds
"""

from .coercion import coerce
from .source import ConfigurationSource, DictConfigurationSource
from .registry import ConfigurationRegistry

__all__ = [
    # Registry
    'ConfigurationRegistry',

    # Sources
    'ConfigurationSource',
    'DictConfigurationSource',

    # Coercion
    'coerce'
]
