"""Shared test configuration and fixtures."""

import os

# Must be set before config.settings is first imported
os.environ.setdefault("PREDICT_RATE_LIMIT", "1000/minute")
os.environ.setdefault("RESULT_DELAY_MS", "0")

import pytest

from services.scoring.registry import clear as clear_registry


@pytest.fixture(autouse=True)
def _reset_registry():
    """Start every test without cached model services."""
    clear_registry()
    yield
    clear_registry()
