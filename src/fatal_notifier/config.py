"""Environment driven settings for the fatal error notifiers."""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

logger = logging.getLogger(__name__)

HEADLESS_ENV = "FATAL_NOTIFIER_HEADLESS"
LOG_FILE_ENV = "FATAL_NOTIFIER_LOG_FILE"
LOG_LEVEL_ENV = "FATAL_NOTIFIER_LOG_LEVEL"


def is_headless(env: Mapping[str, str] | None = None, platform: str | None = None) -> bool:
    """Return ``True`` when no graphical display can be expected.

    Tk imports fine on machines without a display and only fails once a
    window is created, so the check is made up front from the environment.
    ``FATAL_NOTIFIER_HEADLESS=1`` always wins; on Linux a missing ``DISPLAY``
    and ``WAYLAND_DISPLAY`` means headless.
    """
    env = os.environ if env is None else env
    platform = sys.platform if platform is None else platform
    if env.get(HEADLESS_ENV) == "1":
        return True
    if platform.startswith("linux"):
        return not (env.get("DISPLAY") or env.get("WAYLAND_DISPLAY"))
    return False


def _parse_level(value: str | None) -> int:
    if not value:
        return logging.INFO
    level = logging.getLevelName(value.strip().upper())
    if isinstance(level, int):
        return level
    logger.warning("Unknown log level %r in %s; using INFO", value, LOG_LEVEL_ENV)
    return logging.INFO


@dataclass(frozen=True)
class NotifierSettings:
    """Resolved runtime settings."""

    headless: bool = False
    log_file: Path | None = None
    log_level: int = logging.INFO

    @classmethod
    def from_env(
        cls, env: Mapping[str, str] | None = None, platform: str | None = None
    ) -> "NotifierSettings":
        """Build settings from ``FATAL_NOTIFIER_*`` variables."""

        env = os.environ if env is None else env
        log_file = env.get(LOG_FILE_ENV)
        return cls(
            headless=is_headless(env, platform),
            log_file=Path(log_file).expanduser() if log_file else None,
            log_level=_parse_level(env.get(LOG_LEVEL_ENV)),
        )


__all__ = [
    "HEADLESS_ENV",
    "LOG_FILE_ENV",
    "LOG_LEVEL_ENV",
    "NotifierSettings",
    "is_headless",
]
