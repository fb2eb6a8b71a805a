"""
Report generation and output functions for clean_big_targets.

Handles the size table printed in report mode and the optional JSON/CSV report files.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

from .formatting import format_size

if TYPE_CHECKING:
    from .sizing import TargetDirInfo

RULE_WIDTH = 80
REPORT_FIELDS = ["path", "size_bytes", "size_human"]


def filter_by_min_size(infos: Sequence[TargetDirInfo], min_size: int | None) -> list[TargetDirInfo]:
    """Drop entries smaller than min_size bytes, keeping the incoming order."""
    if min_size is None:
        return list(infos)
    return [info for info in infos if info.size >= min_size]


def total_size(infos: Sequence[TargetDirInfo]) -> int:
    return sum(info.size for info in infos)


def print_report(infos: Sequence[TargetDirInfo]) -> None:
    """Print the size table followed by a totals row."""
    print("\nTarget directories (sorted by size):")
    print(f"{'SIZE':>10}  PATH")
    print("-" * RULE_WIDTH)
    for info in infos:
        print(f"{format_size(info.size):>10}  {info.path}")
    print("-" * RULE_WIDTH)
    print(f"{format_size(total_size(infos)):>10}  Total")


def _report_rows(infos: Sequence[TargetDirInfo]) -> list[dict]:
    return [
        {
            "path": str(info.path),
            "size_bytes": info.size,
            "size_human": format_size(info.size),
        }
        for info in infos
    ]


def write_reports(
    infos: Sequence[TargetDirInfo],
    *,
    json_path: Path | None = None,
    csv_path: Path | None = None,
) -> None:
    """Write the measured directories to JSON and/or CSV report files."""
    rows = _report_rows(infos)
    if json_path:
        json_path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"total_bytes": total_size(infos), "directories": rows}
        json_path.write_text(json.dumps(payload, indent=2))
    if csv_path:
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        with csv_path.open("w", newline="") as handle:
            writer = csv.DictWriter(handle, fieldnames=REPORT_FIELDS)
            writer.writeheader()
            writer.writerows(rows)
