"""
System domain configuration classes.

This module defines the settings the appconfig package applies to itself,
currently the logging behaviour chosen at import time.
"""

import os
from dataclasses import dataclass
from enum import Enum


class LogLevel(Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass
class SystemConfig:
    """
    Package-level settings.

    All settings can be overridden via environment variables.

    Environment Variables:
    ----------------------
    APPCONFIG_DEBUG: Force DEBUG logging. Default: false
    APPCONFIG_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
    APPCONFIG_JSON_LOGS: Render logs as JSON instead of console output. Default: false
    """

    debug_mode: bool = False
    log_level: str = LogLevel.INFO.value
    json_logs: bool = False

    def __post_init__(self):
        level = str(self.log_level).upper()
        if level not in LogLevel.__members__:
            raise ValueError(f"Unknown log level '{self.log_level}'")
        self.log_level = level

    @classmethod
    def from_env(cls) -> "SystemConfig":
        """Build the settings from the APPCONFIG_* environment variables."""
        return cls(
            debug_mode=_env_flag("APPCONFIG_DEBUG", False),
            log_level=os.getenv("APPCONFIG_LOG_LEVEL", LogLevel.INFO.value),
            json_logs=_env_flag("APPCONFIG_JSON_LOGS", False),
        )
