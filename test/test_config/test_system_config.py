"""
Test suite for the package settings and logger initialisation.
"""

import logging

import pytest

from appconfig.config import SystemConfig, get_system_config
from appconfig.logger import get_appconfig_logger, init_logger, setup_logging

pytestmark = pytest.mark.unit



def test_defaults(monkeypatch):
    for name in ("APPCONFIG_DEBUG", "APPCONFIG_LOG_LEVEL", "APPCONFIG_JSON_LOGS"):
        monkeypatch.delenv(name, raising=False)

    config = get_system_config()

    assert config.debug_mode is False
    assert config.log_level == "INFO"
    assert config.json_logs is False


def test_from_env(monkeypatch):
    monkeypatch.setenv("APPCONFIG_DEBUG", "yes")
    monkeypatch.setenv("APPCONFIG_LOG_LEVEL", "warning")
    monkeypatch.setenv("APPCONFIG_JSON_LOGS", "1")

    config = SystemConfig.from_env()

    assert config.debug_mode is True
    assert config.log_level == "WARNING"
    assert config.json_logs is True


def test_unknown_log_level_rejected():
    with pytest.raises(ValueError) as exc:
        SystemConfig(log_level="LOUD")

    assert "LOUD" in str(exc.value)


def test_init_logger_returns_bindable_logger():
    logger = init_logger(SystemConfig())

    bound = logger.bind(component="test")
    bound.debug("bound logger works")
    assert get_appconfig_logger() is not None


def test_setup_logging_leaves_root_logger_alone():
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    root.setLevel(logging.WARNING)
    package_logger = logging.getLogger("appconfig.isolated")
    try:
        setup_logging(log_level="DEBUG", logger_name="appconfig.isolated")

        assert root.level == logging.WARNING
        assert root.handlers == previous_handlers
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1
        assert package_logger.propagate is False

        # A second call must not stack another handler
        setup_logging(log_level="INFO", logger_name="appconfig.isolated")
        assert len(package_logger.handlers) == 1
    finally:
        package_logger.handlers.clear()
        package_logger.propagate = True
        package_logger.setLevel(logging.NOTSET)
        root.setLevel(previous_level)
