"""
log_helper.py

Responsibility: configure the package logger once and hand out child loggers.

Console output goes to stderr so that stdout carries only product output.
Set CREATIONAL_BUILDER_DEBUG=true to log builder steps.
"""

from __future__ import annotations

import logging
import logging.config
import os
from logging import CRITICAL, DEBUG, ERROR, INFO, WARNING

LOG_NAME = "creational_builder"
CONSOLE_HANDLER = "console_handler"
DEBUG_ENV = "CREATIONAL_BUILDER_DEBUG"
LOG_LEVEL = DEBUG if os.environ.get(DEBUG_ENV, "").lower() == "true" else INFO
LOG_FORMAT_FOR_CONSOLE = "[%(levelname)s] %(name)s: %(message)s"


class ConsoleLogFormatter(logging.Formatter):
    """Logging Formatter to add colors to console logs"""

    grey = "\x1b[0;37m"
    white = "\x1b[0;38m"
    yellow = "\x1b[0;33m"
    red = "\x1b[0;31m"
    reset = "\x1b[0m"

    FORMATS = {
        DEBUG: grey + LOG_FORMAT_FOR_CONSOLE + reset,
        INFO: white + LOG_FORMAT_FOR_CONSOLE + reset,
        WARNING: yellow + LOG_FORMAT_FOR_CONSOLE + reset,
        ERROR: red + LOG_FORMAT_FOR_CONSOLE + reset,
        CRITICAL: red + LOG_FORMAT_FOR_CONSOLE + reset,
    }

    def format(self, record: logging.LogRecord) -> str:
        console_formatter = logging.Formatter(self.FORMATS.get(record.levelno))
        return console_formatter.format(record)


logging_config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "console_formatter": {"()": ConsoleLogFormatter},
    },
    "handlers": {
        CONSOLE_HANDLER: {
            "class": "logging.StreamHandler",
            "formatter": "console_formatter",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        LOG_NAME: {
            "level": LOG_LEVEL,
            "handlers": [CONSOLE_HANDLER],
        },
    },
}

logging.config.dictConfig(logging_config)

package_logger = logging.getLogger(LOG_NAME)


def get_logger(log_name: str) -> logging.Logger:
    """
    Return a child of the package logger.

    `log_name` is usually `__name__`; a leading package prefix is stripped so
    the child is not nested twice.
    """
    prefix = LOG_NAME + "."
    if log_name.startswith(prefix):
        log_name = log_name[len(prefix):]
    return package_logger.getChild(log_name)
