"""
Core enums for the appconfig package.
"""

from .configuration import ValueKind

__all__ = [
    'ValueKind'
]
