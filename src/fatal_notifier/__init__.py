"""Public package interface for fatal-notifier."""

__version__ = "1.0.0"

import logging

from .boundary import fatal_boundary, fatal_error, get_notifier
from .config import NotifierSettings, is_headless
from .errors import FatalApplicationError
from .notifier import BasicNotifier, GUINotifier, UserNotifier

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BasicNotifier",
    "FatalApplicationError",
    "GUINotifier",
    "NotifierSettings",
    "UserNotifier",
    "fatal_boundary",
    "fatal_error",
    "get_notifier",
    "is_headless",
]
