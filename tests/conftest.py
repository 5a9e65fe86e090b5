import os

import pytest

# Tests never need a real display
os.environ["FATAL_NOTIFIER_HEADLESS"] = "1"


@pytest.fixture
def exit_codes():
    """Collects exit statuses instead of terminating the test run."""
    return []
