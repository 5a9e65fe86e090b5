"""Error kinds that end the process through the fatal path."""
from __future__ import annotations

DEFAULT_EXIT_CODE = 1


class FatalApplicationError(RuntimeError):
    """Condition the caller has decided is unrecoverable.

    Raise it inside :func:`fatal_notifier.boundary.fatal_boundary` to have the
    message shown to the user and the process terminated with ``exit_code``.
    When ``cause`` is omitted the chained ``__cause__`` (``raise ... from``)
    is reported instead.
    """

    def __init__(
        self,
        message: str,
        *,
        title: str | None = None,
        exit_code: int = DEFAULT_EXIT_CODE,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.title = title
        self.exit_code = exit_code
        self._cause = cause

    @property
    def cause(self) -> BaseException | None:
        if self._cause is not None:
            return self._cause
        return self.__cause__


__all__ = ["DEFAULT_EXIT_CODE", "FatalApplicationError"]
