"""
Configuration and default resolution for clean_big_targets.

Handles the fixed target name, environment-variable defaults and optional .env loading.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

TARGET_DIR_NAME = "target"

ENV_TARGET_DIR = "CLEAN_BIG_TARGETS_DIR"
ENV_WORKERS = "CLEAN_BIG_TARGETS_WORKERS"
ENV_FILE_VAR = "CLEAN_BIG_TARGETS_ENV_FILE"

# Same ceiling ThreadPoolExecutor uses for its own default.
MAX_DEFAULT_WORKERS = 32


class ConfigurationError(RuntimeError):
    """Raised when required configuration is missing or invalid."""


def _resolve_env_path(env_path: str | None = None) -> Path:
    """
    Determine which .env file should be loaded.

    Priority order:
      1. Explicit parameter
      2. CLEAN_BIG_TARGETS_ENV_FILE environment variable
      3. ./.env
    """
    if env_path:
        return Path(env_path).expanduser()
    env_file = os.environ.get(ENV_FILE_VAR)
    if env_file:
        return Path(env_file).expanduser()
    return Path.cwd() / ".env"


def load_env_file(env_path: str | None = None) -> bool:
    """Load defaults from a .env file without overriding variables already set.

    Returns True when a file was found and loaded.
    """
    resolved = _resolve_env_path(env_path)
    if not resolved.is_file():
        return False
    return load_dotenv(resolved, override=False)


def determine_default_target_dir() -> Path:
    """Return the directory to scan when none is given on the command line."""
    env_val = os.environ.get(ENV_TARGET_DIR)
    if env_val:
        return Path(env_val).expanduser()
    return Path(".")


def determine_default_workers() -> int:
    """Return the size of the sizing worker pool.

    Raises:
        ConfigurationError: If CLEAN_BIG_TARGETS_WORKERS is not a positive integer.
    """
    env_val = os.environ.get(ENV_WORKERS)
    if not env_val:
        return min(MAX_DEFAULT_WORKERS, (os.cpu_count() or 1) + 4)
    try:
        workers = int(env_val)
    except ValueError as exc:
        raise ConfigurationError(f"{ENV_WORKERS} must be an integer, got {env_val!r}") from exc
    if workers < 1:
        raise ConfigurationError(f"{ENV_WORKERS} must be at least 1, got {workers}")
    return workers
