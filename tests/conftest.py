"""Shared test configuration."""
from __future__ import annotations

import pytest

from logbridge.events import Log

pytest_plugins = ["logbridge.testing.fixtures"]


@pytest.fixture(autouse=True)
def _reset_default_logger():
    yield
    Log.reset()
