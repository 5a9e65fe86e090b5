"""Fatal error notifiers.

A notifier is the last stop for an unrecoverable error: it tells the user
what went wrong, dumps the cause's traceback to stderr and terminates the
process.  :class:`GUINotifier` shows a modal Tk error dialog,
:class:`BasicNotifier` writes to the console for headless machines.
"""
from __future__ import annotations

import contextlib
import gettext
import logging
import os
import sys
import traceback
from abc import ABC, abstractmethod
from typing import IO, Callable, NoReturn

try:  # GUI is optional
    import tkinter as tk  # type: ignore
    from tkinter import messagebox  # type: ignore
except Exception:  # pragma: no cover - python built without tk
    tk = None  # type: ignore[assignment]
    messagebox = None  # type: ignore[assignment]

from .errors import DEFAULT_EXIT_CODE
from .logging_config import flush_logging

logger = logging.getLogger(__name__)

Translator = Callable[[str], str]
ExitFunc = Callable[[int], object]


class UserNotifier(ABC):
    """Report a fatal error and end the process.

    Parameters
    ----------
    translate:
        Localization lookup used for the default ``"Error"`` title.
        Defaults to :func:`gettext.gettext`.
    exit_func:
        Called with the exit status once the error has been reported.
        Defaults to :func:`os._exit`, which ends every thread immediately
        and cannot be caught.
    stream:
        Diagnostic stream for tracebacks.  ``None`` means whatever
        ``sys.stderr`` is at the time of the call.
    """

    def __init__(
        self,
        translate: Translator | None = None,
        exit_func: ExitFunc | None = None,
        stream: IO[str] | None = None,
    ) -> None:
        self.translate = translate or gettext.gettext
        self.exit_func = exit_func or os._exit
        self._stream = stream

    @property
    def stream(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stderr

    def show_error(
        self,
        title: str | None,
        message: str,
        cause: BaseException | None = None,
        exit_code: int = DEFAULT_EXIT_CODE,
    ) -> NoReturn:
        """Show ``message`` under ``title``, dump ``cause`` and exit.

        An empty or missing title is replaced by the localized ``"Error"``.
        Never returns: whatever happens while reporting, the process exits
        with ``exit_code``.
        """
        try:
            if not title:
                title = self.translate("Error")
            logger.critical("Fatal error: %s: %s", title, message)
            self.present(title, message)
            if cause is not None:
                self.print_cause(cause)
        finally:
            self.terminate(exit_code)

    @abstractmethod
    def present(self, title: str, message: str) -> None:
        """Show ``message`` to the user."""

    def write_console(self, title: str, message: str) -> None:
        """Write ``"<title>: <message>"``; write failures are ignored."""
        with contextlib.suppress(Exception):
            self.stream.write(f"{title}: {message}\n")

    def print_cause(self, cause: BaseException) -> None:
        """Write the traceback of ``cause``; write failures are ignored."""
        with contextlib.suppress(Exception):
            traceback.print_exception(
                type(cause), cause, cause.__traceback__, file=self.stream
            )

    def terminate(self, exit_code: int) -> NoReturn:
        flush_logging()
        for s in (self._stream, sys.stdout, sys.stderr):
            if s is None:
                continue
            with contextlib.suppress(Exception):
                s.flush()
        self.exit_func(exit_code)
        # exit_func must not return; make sure the caller never resumes
        raise SystemExit(exit_code)


class BasicNotifier(UserNotifier):
    """Console rendition: ``"<title>: <message>"`` on the diagnostic stream."""

    def present(self, title: str, message: str) -> None:
        self.write_console(title, message)


class GUINotifier(UserNotifier):
    """Modal Tk error dialog, falling back to the console without a display."""

    def present(self, title: str, message: str) -> None:
        if tk is None or messagebox is None:
            logger.warning("tkinter is unavailable; reporting on the console")
            self.write_console(title, message)
            return

        try:
            self._show_dialog(title, message)
        except tk.TclError as exc:
            logger.warning("Cannot show error dialog (%s); reporting on the console", exc)
            self.write_console(title, message)

    def _show_dialog(self, title: str, message: str) -> None:
        # Transient root purely to own the dialog
        root = tk.Tk()
        try:
            root.withdraw()
            messagebox.showerror(title, message, parent=root)
        finally:
            with contextlib.suppress(Exception):
                root.destroy()


__all__ = [
    "DEFAULT_EXIT_CODE",
    "UserNotifier",
    "BasicNotifier",
    "GUINotifier",
]
