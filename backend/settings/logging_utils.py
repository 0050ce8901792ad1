from __future__ import annotations

import logging
import logging.config
import time
from pathlib import Path
from typing import Any

from settings.types import AppSettings

# Top-level packages that log; everything below them inherits the level.
LOGGER_NAMES = ("selection", "settings", "render")
LOG_FILE_NAME = "quadkey-picker.log"


class UTCFormatter(logging.Formatter):
    """
    ISO-8601 timestamps in UTC, matching the trailing "Z".
    """

    converter = time.gmtime

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s.%(msecs)03dZ %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )


def logging_config(
    level: str,
    *,
    logs_dir: Path | None = None,
    to_console: bool = True,
) -> dict[str, Any]:
    """
    dictConfig for the package loggers: console and/or a daily-rotated file.
    """
    handlers: dict[str, dict[str, Any]] = {}
    if to_console:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "utc",
            "stream": "ext://sys.stdout",
        }
    if logs_dir is not None:
        handlers["file"] = {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "formatter": "utc",
            "filename": str(logs_dir / LOG_FILE_NAME),
            "when": "D",
            "backupCount": 7,
            "encoding": "utf-8",
            "utc": True,
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"utc": {"()": UTCFormatter}},
        "handlers": handlers,
        "loggers": {
            name: {"level": level.upper(), "handlers": list(handlers), "propagate": False}
            for name in LOGGER_NAMES
        },
    }


def configure_logging(
    settings: AppSettings,
    *,
    logs_dir: Path | None = None,
    to_console: bool = True,
) -> None:
    if logs_dir is not None:
        logs_dir.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(
        logging_config(settings.logLevel, logs_dir=logs_dir, to_console=to_console)
    )
