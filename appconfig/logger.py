import logging

import structlog
from structlog.types import Processor


def setup_logging(json_logs: bool = False, log_level: str = "INFO", logger_name: str = "appconfig"):
    """
    Configure structlog for the appconfig package.

    The handler and level go on the package logger, so the root logger of the
    host application is never touched.
    """

    package_logger = logging.getLogger(logger_name)
    for handler in package_logger.handlers:
        if (isinstance(handler, logging.StreamHandler) and
                isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)):
            return

    timestamper = structlog.processors.TimeStamper(fmt="iso")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        # Format the exception only for JSON logs, as we want to pretty-print them when
        # using the ConsoleRenderer
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_renderer: structlog.types.Processor
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        # These run ONLY on `logging` entries that do NOT originate within
        # structlog.
        foreign_pre_chain=shared_processors,
        # These run on ALL entries after the pre_chain is done.
        processors=[
            # Remove _record & _from_structlog.
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    package_logger.addHandler(handler)
    package_logger.setLevel(log_level.upper())
    package_logger.propagate = False


def get_appconfig_logger(log_name: str = "appconfig") -> structlog.stdlib.BoundLogger:
    """Return the package logger; callers usually `.bind(component=...)` it."""
    return structlog.stdlib.get_logger(log_name)


def init_logger(config):
    """
    Initialize the structured logger for appconfig package.

    Args:
        config: SystemConfig with the logging settings

    Returns:
        structlog.stdlib.BoundLogger: Configured package logger
    """
    log_level = "DEBUG" if config.debug_mode else config.log_level

    setup_logging(json_logs=config.json_logs, log_level=log_level)

    return get_appconfig_logger("appconfig")
