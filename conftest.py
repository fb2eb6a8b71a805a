"""Pytest configuration for the clean_big_targets repository."""

# pylint: disable=wrong-import-position

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep the developer's own CLEAN_BIG_TARGETS_* settings out of the tests."""
    for name in ("CLEAN_BIG_TARGETS_DIR", "CLEAN_BIG_TARGETS_WORKERS", "CLEAN_BIG_TARGETS_ENV_FILE"):
        monkeypatch.delenv(name, raising=False)
