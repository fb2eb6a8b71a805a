"""
Byte size formatting and parsing for clean_big_targets output.

Sizes are shown in decimal (SI) units, so 1 kB is 1000 bytes.
"""

from __future__ import annotations

import argparse

BYTES_PER_KB = 1000
BYTES_PER_MB = BYTES_PER_KB**2
BYTES_PER_GB = BYTES_PER_KB**3
BYTES_PER_TB = BYTES_PER_KB**4

_UNITS = ["B", "kB", "MB", "GB", "TB", "PB", "EB"]


def format_size(num_bytes: int | None, decimal_places: int = 2) -> str:
    """
    Format a byte count as a human-readable decimal size.

    Examples:
        >>> format_size(5)
        '5 B'
        >>> format_size(1500)
        '1.50 kB'
        >>> format_size(12_340_000)
        '12.34 MB'
        >>> format_size(None)
        'n/a'
    """
    if num_bytes is None:
        return "n/a"
    if num_bytes < BYTES_PER_KB:
        return f"{num_bytes} B"

    value = float(num_bytes)
    for unit in _UNITS:
        if value < BYTES_PER_KB or unit == _UNITS[-1]:
            return f"{value:.{decimal_places}f} {unit}"
        value /= BYTES_PER_KB
    return f"{value:.{decimal_places}f} {_UNITS[-1]}"


def parse_size(value: str, *, for_argparse: bool = False) -> int:
    """
    Parse sizes such as 500M, 2G or 1.5T (decimal multiples) into bytes.

    Raises:
        ValueError: If the size string is invalid (when for_argparse=False)
        argparse.ArgumentTypeError: If invalid and for_argparse=True
    """
    raw = value.strip()
    multipliers = {
        "k": BYTES_PER_KB,
        "m": BYTES_PER_MB,
        "g": BYTES_PER_GB,
        "t": BYTES_PER_TB,
    }
    try:
        if not raw:
            raise ValueError("Size cannot be empty")
        lowered = raw.lower()
        if lowered.endswith("b") and len(lowered) > 1 and lowered[-2] in multipliers:
            lowered = lowered[:-1]
        suffix = lowered[-1]
        if suffix in multipliers:
            result = int(float(lowered[:-1]) * multipliers[suffix])
        else:
            result = int(lowered)
        if result < 0:
            raise ValueError("Size cannot be negative")
    except (ValueError, OverflowError) as exc:
        error_msg = f"Invalid size value: {value}"
        if for_argparse:
            raise argparse.ArgumentTypeError(error_msg) from exc
        raise ValueError(error_msg) from exc
    return result


def size_argument(value: str) -> int:
    """argparse ``type=`` adapter for parse_size."""
    return parse_size(value, for_argparse=True)
