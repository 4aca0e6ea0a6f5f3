"""
Logging configuration for SwipeReader (configs).

Library modules log through loguru; stdlib loggers under ``swipereader`` are
configured alongside so both end up on the same stream and file.
"""

import logging
import logging.config
import os
import sys
from typing import Any

from loguru import logger as loguru_logger

from swipereader.configs.config import config

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = (
    "%(asctime)s %(levelname)-8s %(name)s:%(funcName)s:%(lineno)d %(message)s"
)
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


def _handlers(level: str, log_path: str | None) -> dict[str, dict[str, Any]]:
    handlers: dict[str, dict[str, Any]] = {
        "stderr": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "console",
            "stream": "ext://sys.stderr",
        }
    }
    if log_path:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "file",
            "filename": log_path,
            "maxBytes": MAX_LOG_BYTES,
            "backupCount": LOG_BACKUPS,
        }
    return handlers


def setup_logging(
    log_level: str | None = None,
    log_format: str | None = None,
    enable_file_logging: bool = False,
    log_file: str | None = None,
    log_dir: str | None = None,
) -> None:
    """Configure stdlib logging and loguru sinks.

    File logging writes ``log_dir/log_file`` (defaults from ``LOG_DIR`` and
    ``LOG_FILE``) at DEBUG level regardless of ``log_level``.
    """
    level = (log_level or config.log_level).upper()

    log_path = None
    if enable_file_logging:
        directory = log_dir or config.log_dir
        os.makedirs(directory, exist_ok=True)
        filename = log_file or config.log_file or "swipereader.log"
        log_path = os.path.join(directory, filename)

    handlers = _handlers(level, log_path)
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": log_format or CONSOLE_FORMAT,
                    "datefmt": DATE_FORMAT,
                },
                "file": {"format": FILE_FORMAT, "datefmt": DATE_FORMAT},
            },
            "handlers": handlers,
            "loggers": {
                "swipereader": {
                    "level": level,
                    "handlers": list(handlers),
                    "propagate": False,
                }
            },
            "root": {"level": level, "handlers": list(handlers)},
        }
    )

    loguru_logger.remove()
    loguru_logger.add(sys.stderr, level=level)
    if log_path:
        loguru_logger.add(
            log_path,
            level="DEBUG",
            rotation=MAX_LOG_BYTES,
            retention=LOG_BACKUPS,
            backtrace=False,
            diagnose=False,
        )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"swipereader.{name}")


def set_log_level(level: str, logger_name: str | None = None) -> None:
    logging.getLogger(logger_name).setLevel(level.upper())
