"""
Logging configuration and utilities.

Parse progress and failures are logged under the ``cronometer_ledger``
logger hierarchy; the CLI echoes its summary on stdout, so log records go
to stderr and, optionally, to a file.
"""

import logging
import sys
from pathlib import Path

from cronometer_ledger.utils.parameters import LoggingConfig

LEDGER_LOGGER = "cronometer_ledger"


def _build_handlers(config: LoggingConfig) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []

    if config.console:
        handlers.append(logging.StreamHandler(sys.stderr))

    if config.file:
        log_file = Path(config.file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    return handlers


def setup_logging(config: LoggingConfig, logger_name: str | None = LEDGER_LOGGER) -> logging.Logger:
    """
    Set up logging for parse runs.

    Args:
        config: Validated logging configuration (level is an upper-case name).
        logger_name: Logger to configure. Defaults to the package logger;
            None configures the root logger.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(config.level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)
    for handler in _build_handlers(config):
        handler.setLevel(config.level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance by name."""
    return logging.getLogger(name)
