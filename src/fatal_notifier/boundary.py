"""Notifier selection and the module-level fatal path."""
from __future__ import annotations

import contextlib
import logging
from typing import Any, Iterator, NoReturn

from .config import NotifierSettings
from .errors import DEFAULT_EXIT_CODE, FatalApplicationError
from .notifier import BasicNotifier, GUINotifier, UserNotifier

logger = logging.getLogger(__name__)


def get_notifier(settings: NotifierSettings | None = None, **kwargs: Any) -> UserNotifier:
    """Return the notifier suited to the current display.

    Extra keyword arguments are passed to the notifier constructor.
    """
    if settings is None:
        settings = NotifierSettings.from_env()
    if settings.headless:
        logger.debug("No display available; using console notifier")
        return BasicNotifier(**kwargs)
    return GUINotifier(**kwargs)


def fatal_error(
    message: str,
    title: str | None = None,
    cause: BaseException | None = None,
    exit_code: int = DEFAULT_EXIT_CODE,
) -> NoReturn:
    """Report ``message`` and terminate the process with ``exit_code``."""
    get_notifier().show_error(title, message, cause, exit_code)


@contextlib.contextmanager
def fatal_boundary(notifier: UserNotifier | None = None) -> Iterator[None]:
    """Route a :class:`FatalApplicationError` raised in the block to a notifier.

    Other exceptions propagate unchanged.
    """

    try:
        yield
    except FatalApplicationError as exc:
        if notifier is None:
            notifier = get_notifier()
        notifier.show_error(exc.title, exc.message, exc.cause, exc.exit_code)


__all__ = ["get_notifier", "fatal_error", "fatal_boundary"]
