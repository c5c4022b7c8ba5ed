"""
Configuration source base class and implementations.

A source resolves a delimited path inside its own backing store. The registry
only ever talks to sources through the try-get methods defined here.
"""

import copy
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Optional, Tuple

from appconfig.core.enums import ValueKind
from .coercion import coerce

_NOT_FOUND: Tuple[None, bool] = (None, False)


class ConfigurationSource(ABC):
    """
    Abstract base class for configuration sources.

    Subclasses implement `try_get_value`; the typed try-gets read the raw
    value through it and convert it with `coerce`. A subclass may override a
    typed method when its backing store can answer it more directly.

    Every try-get returns `(value, True)` when the path exists and
    `(None, False)` when it does not. A value that exists but cannot be read
    as the requested kind raises ConfigurationTypeError.
    """

    @abstractmethod
    def try_get_value(self, path: str) -> Tuple[Any, bool]:
        """Get the raw value at the path."""
        pass

    def try_get(self, path: str, kind: ValueKind, factory: Optional[Callable[[Any], Any]] = None) -> Tuple[Any, bool]:
        """Get the value at the path as the given kind."""
        if kind is ValueKind.VALUE:
            return self.try_get_value(path)
        if kind is ValueKind.OBJECT:
            return self.try_get_object(path, factory)
        return getattr(self, f"try_get_{kind.value}")(path)

    def try_get_array(self, path: str) -> Tuple[Any, bool]:
        return self._try_get_as(path, ValueKind.ARRAY)

    def try_get_bool(self, path: str) -> Tuple[Optional[bool], bool]:
        return self._try_get_as(path, ValueKind.BOOL)

    def try_get_float(self, path: str) -> Tuple[Optional[float], bool]:
        return self._try_get_as(path, ValueKind.FLOAT)

    def try_get_int(self, path: str) -> Tuple[Optional[int], bool]:
        return self._try_get_as(path, ValueKind.INT)

    def try_get_string(self, path: str) -> Tuple[Optional[str], bool]:
        return self._try_get_as(path, ValueKind.STRING)

    def try_get_object(self, path: str, factory: Callable[[Any], Any]) -> Tuple[Any, bool]:
        """Build an object from the raw value at the path using `factory`."""
        return self._try_get_as(path, ValueKind.OBJECT, factory)

    def _try_get_as(self, path: str, kind: ValueKind, factory=None) -> Tuple[Any, bool]:
        value, found = self.try_get_value(path)
        if not found:
            return _NOT_FOUND
        return coerce(value, kind, path, factory), True


class DictConfigurationSource(ConfigurationSource):
    """
    In-memory configuration source backed by a (possibly nested) mapping.

    Paths are split on `path_delimiter`. At every level a key equal to the
    whole remaining path is preferred, so flat keys such as ``"db.host"``
    and nested ``{"db": {"host": ...}}`` data resolve the same way. Lists and
    tuples are indexed with non-negative integer segments
    (``"servers.0.host"``).
    """

    def __init__(self, data: Optional[Mapping] = None, path_delimiter: str = "."):
        if not path_delimiter:
            raise ValueError("Path delimiter must be a non-empty string")
        self.path_delimiter = path_delimiter
        self._data = copy.deepcopy(dict(data or {}))

    def try_get_value(self, path: str) -> Tuple[Any, bool]:
        if not path:
            return _NOT_FOUND
        return self._resolve(self._data, path)

    def _resolve(self, node: Any, path: str) -> Tuple[Any, bool]:
        if isinstance(node, Mapping):
            if path in node:
                return node[path], True
            head, sep, rest = path.partition(self.path_delimiter)
            if not sep or head not in node:
                return _NOT_FOUND
            return self._resolve(node[head], rest)

        if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
            head, sep, rest = path.partition(self.path_delimiter)
            if not head.isdigit():
                return _NOT_FOUND
            try:
                child = node[int(head)]
            except (ValueError, IndexError):
                return _NOT_FOUND
            if not sep:
                return child, True
            return self._resolve(child, rest)

        return _NOT_FOUND

    def __repr__(self):
        return f"{type(self).__name__}(keys={list(self._data)!r})"
