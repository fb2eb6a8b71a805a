#!/usr/bin/env python3
"""
Report the size of build 'target' directories under a workspace and optionally delete them.

This is a thin wrapper around the big_targets package.
"""
from __future__ import annotations

from big_targets.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
