"""Command line entry point: show a fatal error from a shell script."""
from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, NoReturn, Sequence

from . import __version__
from .boundary import get_notifier
from .config import NotifierSettings
from .errors import DEFAULT_EXIT_CODE
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fatal-notifier",
        description="Show a fatal error dialog and exit with the given status",
    )
    parser.add_argument("message", help="Text shown in the dialog body")
    parser.add_argument("--title", default=None, help="Dialog title (default: localized 'Error')")
    parser.add_argument(
        "--exit-code",
        type=int,
        default=DEFAULT_EXIT_CODE,
        help="Process exit status (default: %(default)s)",
    )
    parser.add_argument("--headless", action="store_true", help="Report on the console only")
    parser.add_argument("--log-file", type=Path, default=None, help="Also log to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None, **notifier_kwargs: Any) -> NoReturn:
    """Parse ``argv``, configure logging and run the fatal path."""
    args = build_parser().parse_args(argv)

    settings = NotifierSettings.from_env()
    if args.headless:
        settings = replace(settings, headless=True)
    if args.log_file is not None:
        settings = replace(settings, log_file=args.log_file)

    level = logging.DEBUG if args.verbose else settings.log_level
    setup_logging(level, str(settings.log_file) if settings.log_file else None)
    logger.debug("Resolved settings: %s", settings)

    notifier = get_notifier(settings, **notifier_kwargs)
    notifier.show_error(args.title, args.message, exit_code=args.exit_code)


__all__ = ["build_parser", "main"]
