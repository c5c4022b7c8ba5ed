"""
Conversion of raw configuration values into the requested value kinds.

Sources store whatever their backing format produced; this module decides
which of those raw values can be read as an array, bool, float, int or
string, and raises ConfigurationTypeError for the rest.
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional

from appconfig.core.enums import ValueKind
from appconfig.core.exceptions import ConfigurationTypeError

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off"}


def _to_array(value: Any):
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (list, tuple)):
        return list(value)
    raise TypeError


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise TypeError


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise TypeError
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return float(value.strip())
    raise TypeError


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        return int(value.strip())
    raise TypeError


def _to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise TypeError


_CONVERTERS = {
    ValueKind.ARRAY: _to_array,
    ValueKind.BOOL: _to_bool,
    ValueKind.FLOAT: _to_float,
    ValueKind.INT: _to_int,
    ValueKind.STRING: _to_string,
}


def coerce(value: Any, kind: ValueKind, path: str, factory: Optional[Callable[[Any], Any]] = None) -> Any:
    """
    Read a raw value as the requested kind.

    Args:
        value: Raw value stored by a source
        kind: Kind the caller asked for
        path: Path the value was found at, used for error reporting
        factory: Construction function, required for ValueKind.OBJECT

    Returns:
        The converted value

    Raises:
        ConfigurationTypeError: If the value cannot be read as `kind`
        TypeError: If an object is requested without a callable factory
    """
    if kind is ValueKind.VALUE:
        return value

    if kind is ValueKind.OBJECT:
        if not callable(factory):
            raise TypeError(f"An object factory is required to read '{path}'")
        return factory(value)

    try:
        return _CONVERTERS[kind](value)
    except (TypeError, ValueError, OverflowError):
        raise ConfigurationTypeError(path, value, kind) from None
