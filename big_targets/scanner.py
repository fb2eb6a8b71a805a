"""
Directory discovery for clean_big_targets.

Looks one level below the base directory for projects carrying a build-artifact directory.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .config import TARGET_DIR_NAME


class ScanError(OSError):
    """Raised when the base directory cannot be resolved or listed."""


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _has_target_dir(path: Path) -> bool:
    """True when path holds a target directory we can see; unreadable projects count as no match."""
    try:
        return path.is_dir()
    except OSError:
        return False


def find_target_dirs(base_dir: Path, debug: bool = False) -> list[Path]:
    """Return the target directories found directly under the children of base_dir.

    A child of base_dir that is itself named ``target`` ends the scan at once and is
    returned on its own; any siblings already collected are dropped. Callers rely on
    this to treat a single project directory as the whole workspace.

    Raises:
        ScanError: If base_dir cannot be canonicalized or read.
    """
    try:
        canonical = Path(base_dir).expanduser().resolve(strict=True)
    except OSError as exc:
        raise ScanError(f"Cannot resolve {base_dir}: {exc}") from exc

    try:
        with os.scandir(canonical) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        raise ScanError(f"Cannot read {canonical}: {exc}") from exc

    target_dirs: list[Path] = []
    for entry in entries:
        if not _is_dir(entry):
            continue
        path = Path(entry.path)
        if entry.name == TARGET_DIR_NAME:
            if debug:
                logging.debug("Found target directory: %s", path)
            return [path]

        target_path = path / TARGET_DIR_NAME
        if _has_target_dir(target_path):
            if debug:
                logging.debug("Found target directory: %s", target_path)
            target_dirs.append(target_path)

    return target_dirs
