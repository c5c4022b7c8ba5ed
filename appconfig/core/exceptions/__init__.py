"""
Core exceptions for the appconfig package.

This module provides all exception classes used throughout the package,
with a clear inheritance hierarchy rooted at AppConfigError.
"""

# Base exceptions
from .base import (
    AppConfigError,
    ValidationError,
    ConfigurationError,
    NotFoundError
)

# Configuration lookup exceptions
from .configuration import (
    ConfigurationNotInitializedError,
    MissingConfigurationValueError,
    ConfigurationTypeError
)

__all__ = [
    # Base exceptions
    'AppConfigError',
    'ValidationError',
    'ConfigurationError',
    'NotFoundError',

    # Configuration lookup exceptions
    'ConfigurationNotInitializedError',
    'MissingConfigurationValueError',
    'ConfigurationTypeError'
]
