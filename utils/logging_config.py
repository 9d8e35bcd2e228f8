# utils/logging_config.py
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

from config import settings

# chatty third-party loggers: requests' pool, streamlit's file watcher
_NOISY_LOGGERS = ("urllib3", "watchdog")


class _ColoredFormatter(logging.Formatter):
    _COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    _RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self._COLORS.get(record.levelname, "")
        if color:
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{self._RESET}"
        return super().format(record)


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    if level is None:
        level = settings.log_level
    if isinstance(level, str):
        return getattr(logging, level.strip().upper(), logging.INFO)
    return level


def setup_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Console logging on stdout for the UI, the backend and the CLI.
    Defaults to LOG_LEVEL; an unknown level name falls back to INFO.
    Safe to call on every Streamlit rerun: the root handler is replaced, not stacked.
    """
    level = _resolve_level(level)

    log_format = "%(asctime)s [%(levelname)s] %(name)s %(funcName)s():%(lineno)d - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    formatter = (
        _ColoredFormatter(log_format, datefmt=date_format)
        if sys.stdout.isatty()
        else logging.Formatter(log_format, datefmt=date_format)
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
