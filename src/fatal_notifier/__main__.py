"""``python -m fatal_notifier``: same as the ``fatal-notifier`` command."""
from __future__ import annotations

from .cli import main


def run() -> None:
    """Show the fatal error given on the command line; the process exits."""
    main()


if __name__ == "__main__":  # pragma: no cover - exercised via CLI
    run()
