"""
System domain configuration.
"""

from .config import SystemConfig, LogLevel

__all__ = [
    'SystemConfig',
    'LogLevel'
]
