"""
Configuration registry for querying an ordered list of configuration sources.

The registry is constructed explicitly by the application root and passed to
whatever needs configuration; there is no process-wide instance.
"""

from typing import Any, Callable, List, Optional, Tuple

from .source import ConfigurationSource
from appconfig.core.enums import ValueKind
from appconfig.core.exceptions import (
    ConfigurationNotInitializedError,
    MissingConfigurationValueError
)
from appconfig.logger import get_appconfig_logger


class ConfigurationRegistry:
    """
    Ordered registry of configuration sources.

    Sources are queried in registration order and the first one that
    resolves a path wins, so earlier sources shadow later ones. Results are
    never cached; every call scans the sources again.

    Every accessor raises ConfigurationNotInitializedError while the registry
    is empty. `get*` raises MissingConfigurationValueError when no source has
    the path, `try_get*` reports the same outcome as `(None, False)`.
    """

    def __init__(self):
        self.logger = get_appconfig_logger().bind(component="ConfigurationRegistry")
        self._sources: List[ConfigurationSource] = []

    def __len__(self) -> int:
        return len(self._sources)

    @property
    def sources(self) -> Tuple[ConfigurationSource, ...]:
        """Registered sources in priority order."""
        return tuple(self._sources)

    def add_source(self, source: ConfigurationSource) -> None:
        """Append a source; it is consulted after every source added before it."""
        self._sources.append(source)
        self.logger.debug("Configuration source added",
                          source_type=type(source).__name__,
                          position=len(self._sources))

    def reset(self) -> None:
        """Remove every registered source."""
        self._sources.clear()
        self.logger.info("Configuration sources reset")

    def try_get(self, path: str, kind: ValueKind,
                factory: Optional[Callable[[Any], Any]] = None) -> Tuple[Any, bool]:
        """
        Look up a value without raising for a missing path.

        Args:
            path: Delimited path to the value, forwarded verbatim to each source
            kind: Kind to read the value as
            factory: Construction function, only used for ValueKind.OBJECT

        Returns:
            (value, True) from the first source that resolves the path,
            otherwise (None, False)

        Raises:
            ConfigurationNotInitializedError: If no sources are registered
            ConfigurationTypeError: If the first source holding the path
                cannot read it as `kind`
        """
        self._validate_sources()

        for source in self._sources:
            value, found = source.try_get(path, kind, factory)
            if found:
                return value, True

        self.logger.debug("Configuration value missing", path=path, kind=kind.value)
        return None, False

    def get(self, path: str, kind: ValueKind,
            factory: Optional[Callable[[Any], Any]] = None) -> Any:
        """Look up a value, raising MissingConfigurationValueError if no source has it."""
        value, found = self.try_get(path, kind, factory)
        if not found:
            raise MissingConfigurationValueError(path)
        return value

    def get_array(self, path: str):
        return self.get(path, ValueKind.ARRAY)

    def get_bool(self, path: str) -> bool:
        return self.get(path, ValueKind.BOOL)

    def get_float(self, path: str) -> float:
        return self.get(path, ValueKind.FLOAT)

    def get_int(self, path: str) -> int:
        return self.get(path, ValueKind.INT)

    def get_string(self, path: str) -> str:
        return self.get(path, ValueKind.STRING)

    def get_object(self, path: str, factory: Callable[[Any], Any]) -> Any:
        """Build an object from the value at the path; the matching source calls `factory`."""
        return self.get(path, ValueKind.OBJECT, factory)

    def get_value(self, path: str) -> Any:
        return self.get(path, ValueKind.VALUE)

    def try_get_array(self, path: str) -> Tuple[Any, bool]:
        return self.try_get(path, ValueKind.ARRAY)

    def try_get_bool(self, path: str) -> Tuple[Optional[bool], bool]:
        return self.try_get(path, ValueKind.BOOL)

    def try_get_float(self, path: str) -> Tuple[Optional[float], bool]:
        return self.try_get(path, ValueKind.FLOAT)

    def try_get_int(self, path: str) -> Tuple[Optional[int], bool]:
        return self.try_get(path, ValueKind.INT)

    def try_get_string(self, path: str) -> Tuple[Optional[str], bool]:
        return self.try_get(path, ValueKind.STRING)

    def try_get_object(self, path: str, factory: Callable[[Any], Any]) -> Tuple[Any, bool]:
        return self.try_get(path, ValueKind.OBJECT, factory)

    def try_get_value(self, path: str) -> Tuple[Any, bool]:
        return self.try_get(path, ValueKind.VALUE)

    def _validate_sources(self):
        if not self._sources:
            raise ConfigurationNotInitializedError()
