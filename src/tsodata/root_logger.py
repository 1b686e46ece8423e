# SPDX-License-Identifier: MIT

import logging
from logging import config as logging_config
from typing import Any

from rich.logging import RichHandler

LOGGER_NAME = "tsodata"


def _log_config(level: str) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {"format": "%(message)s", "datefmt": "[%X]"},
        },
        "handlers": {
            "rich": {
                "()": RichHandler,
                "formatter": "plain",
                "level": level,
                "show_path": False,
                "rich_tracebacks": True,
            },
        },
        "loggers": {
            LOGGER_NAME: {"handlers": ["rich"], "level": level},
        },
    }


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Configure the package logger and return it.

    Args:
        level: A standard logging level name such as ``DEBUG`` or ``WARNING``.

    Raises:
        ValueError: If the level name is not a known logging level.
    """
    level = level.upper()
    if level not in logging.getLevelNamesMapping():
        raise ValueError(f"Invalid log level: {level}")

    logging_config.dictConfig(config=_log_config(level))
    return get_logger()


def get_logger(module: str | None = None) -> logging.Logger:
    if module is None:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{module}")
