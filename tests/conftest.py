"""Shared fixtures for unit tests."""

from __future__ import annotations

import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Force test-safe settings before any module reads Settings()
os.environ["RANGEGEN_LOG_LEVEL"] = "WARNING"
os.environ["RANGEGEN_PROGRESS_EVERY"] = "0"

from rangegen.models import Configuration  # noqa: E402
from rangegen.settings import Settings  # noqa: E402


@pytest.fixture(scope="session")
def settings():
    return Settings()


@pytest.fixture
def small_config() -> Configuration:
    """The 3-row, seed-42 configuration used by the end-to-end checks."""
    return Configuration(
        row_count=3, handle_count=5, lowest=0, highest=100,
        mean_width=10, width_stddev=0, seed=42,
    )


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """The CLI reconfigures root logging onto the runner's stderr; undo that after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
