"""Shared pytest fixtures for the big_targets tests."""

from __future__ import annotations

import pytest

from tests.fs_test_utils import make_target


@pytest.fixture(name="workspace")
def fixture_workspace(tmp_path):
    """Workspace with proj1/target (5 bytes), proj2/target (3 bytes) and proj3 without one."""
    base = tmp_path / "ws"
    make_target(base / "proj1", 5)
    make_target(base / "proj2", 3)
    (base / "proj3" / "src").mkdir(parents=True)
    return base
