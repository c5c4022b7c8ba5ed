from enum import Enum


class ValueKind(Enum):
    """Target types a configuration value can be read as."""
    ARRAY = "array"
    BOOL = "bool"
    FLOAT = "float"
    INT = "int"
    STRING = "string"
    OBJECT = "object"
    VALUE = "value"
