"""Tests for big_targets/config.py module."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from big_targets import config
from big_targets.config import ConfigurationError
from tests.assertions import assert_equal


def test_default_target_dir_is_current_directory():
    """Without the environment variable the current directory is scanned."""
    assert_equal(config.determine_default_target_dir(), Path("."))


def test_default_target_dir_from_env(tmp_path, monkeypatch):
    """CLEAN_BIG_TARGETS_DIR overrides the default."""
    monkeypatch.setenv("CLEAN_BIG_TARGETS_DIR", str(tmp_path))
    assert_equal(config.determine_default_target_dir(), tmp_path)


def test_default_workers_without_env():
    """The pool size falls back to the CPU-based default, capped at 32."""
    workers = config.determine_default_workers()
    assert 1 <= workers <= config.MAX_DEFAULT_WORKERS


def test_default_workers_from_env(monkeypatch):
    """CLEAN_BIG_TARGETS_WORKERS sets the pool size."""
    monkeypatch.setenv("CLEAN_BIG_TARGETS_WORKERS", "6")
    assert_equal(config.determine_default_workers(), 6)


@pytest.mark.parametrize("value", ["zero", "0", "-2"])
def test_default_workers_rejects_invalid(monkeypatch, value):
    """Non-numeric or non-positive worker counts are configuration errors."""
    monkeypatch.setenv("CLEAN_BIG_TARGETS_WORKERS", value)
    with pytest.raises(ConfigurationError) as exc_info:
        config.determine_default_workers()
    assert "CLEAN_BIG_TARGETS_WORKERS" in str(exc_info.value)


def test_load_env_file_sets_missing_variables(tmp_path):
    """Values from the .env file become defaults."""
    env_file = tmp_path / "custom.env"
    env_file.write_text(f"CLEAN_BIG_TARGETS_DIR={tmp_path}\n")

    with patch.dict(os.environ):
        assert config.load_env_file(str(env_file))
        assert_equal(os.environ["CLEAN_BIG_TARGETS_DIR"], str(tmp_path))


def test_load_env_file_does_not_override(tmp_path, monkeypatch):
    """Variables already in the environment win over the .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("CLEAN_BIG_TARGETS_WORKERS=9\n")
    monkeypatch.setenv("CLEAN_BIG_TARGETS_WORKERS", "2")

    config.load_env_file(str(env_file))

    assert_equal(os.environ["CLEAN_BIG_TARGETS_WORKERS"], "2")


def test_load_env_file_uses_env_var_then_cwd(tmp_path, monkeypatch):
    """CLEAN_BIG_TARGETS_ENV_FILE is consulted before ./.env."""
    pointed = tmp_path / "pointed.env"
    pointed.write_text("CLEAN_BIG_TARGETS_WORKERS=4\n")
    monkeypatch.setenv("CLEAN_BIG_TARGETS_ENV_FILE", str(pointed))
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("CLEAN_BIG_TARGETS_WORKERS=8\n")

    with patch.dict(os.environ):
        config.load_env_file()
        assert_equal(os.environ["CLEAN_BIG_TARGETS_WORKERS"], "4")


def test_load_env_file_missing_file(tmp_path, monkeypatch):
    """A missing .env file is not an error."""
    monkeypatch.chdir(tmp_path)
    assert not config.load_env_file()
