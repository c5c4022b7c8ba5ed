"""
Configuration lookup exceptions.
"""

from .base import ConfigurationError, NotFoundError, ValidationError


class ConfigurationNotInitializedError(ConfigurationError):
    """Raised when a value is requested from a registry that holds no sources."""

    def __init__(self):
        super().__init__(reason="No configuration sources set")


class MissingConfigurationValueError(NotFoundError):
    """Raised when no registered source resolves the requested path."""

    def __init__(self, path: str):
        self.path = path
        super().__init__("Configuration value", path)


class ConfigurationTypeError(ValidationError):
    """Raised when a value exists at a path but cannot be read as the requested kind."""

    def __init__(self, path: str, value, expected):
        self.path = path
        self.expected = expected
        super().__init__(path, value, f"cannot be read as {expected.value}")
