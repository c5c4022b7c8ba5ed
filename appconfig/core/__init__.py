"""
Core module for the appconfig package.

This module provides the foundational components used throughout the package:
- Exception classes for configuration lookups
- Enum definitions for the supported value kinds
"""

# Import all exceptions and enums for easy access
from .exceptions import *
from .enums import *

__all__ = []

# Extend __all__ with imported items
from .exceptions import __all__ as exceptions_all
from .enums import __all__ as enums_all

__all__.extend(exceptions_all)
__all__.extend(enums_all)
