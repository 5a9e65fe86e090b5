"""Logging for the ``fatal-notifier`` command.

The library itself only emits records; the command line tool routes them to
the terminal through rich and, optionally, to a rotating log file so the
fatal record survives the process.
"""
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

from rich.logging import RichHandler

from .config import LOG_FILE_ENV

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> None:
    """Send records to the terminal and, when possible, to ``log_file``.

    ``log_file`` falls back to ``FATAL_NOTIFIER_LOG_FILE``.  A log file that
    cannot be opened is skipped with a warning: logging must never keep the
    caller from reaching its fatal error report.  Rich markup is disabled so
    user supplied messages are printed verbatim.
    """
    if log_file is None:
        log_file = os.getenv(LOG_FILE_ENV)

    handlers: list[logging.Handler] = [
        RichHandler(rich_tracebacks=True, markup=False)
    ]

    file_error: OSError | None = None
    if log_file:
        try:
            file_handler = RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=5)
        except OSError as exc:
            file_error = exc
        else:
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        handlers=handlers,
        format="%(message)s",
        force=True,
    )

    if file_error is not None:
        logger.warning("Cannot open log file %s (%s); logging to the terminal only", log_file, file_error)


def flush_logging() -> None:
    """Flush every handler on the root logger before the process exits."""
    for handler in logging.getLogger().handlers:
        try:
            handler.flush()
        except Exception:
            pass


__all__ = ["LOG_FORMAT", "setup_logging", "flush_logging"]
