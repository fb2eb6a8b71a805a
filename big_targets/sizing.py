"""
Disk usage accounting for clean_big_targets.

Sizes each discovered target directory, fanning the candidates out over a thread pool.
"""

from __future__ import annotations

import logging
import os
import stat
from concurrent.futures import CancelledError, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .cancellation import CancellationToken, OperationCancelled
from .config import determine_default_workers
from .progress import ProgressTracker


class SizeError(OSError):
    """Raised when a read fails while measuring a directory."""


@dataclass(frozen=True)
class TargetDirInfo:
    """A discovered target directory and the bytes it holds."""

    path: Path
    size: int


@dataclass
class MeasureResult:
    """Outcome of sizing a batch of target directories."""

    infos: list[TargetDirInfo]
    failures: list[tuple[Path, Exception]] = field(default_factory=list)
    cancelled: bool = False

    @property
    def total_size(self) -> int:
        return sum(info.size for info in self.infos)


def _sum_tree(path: Path, cancel: CancellationToken | None) -> int:
    total = 0
    try:
        with os.scandir(path) as it:
            entries = list(it)
    except FileNotFoundError:
        return 0
    except OSError as exc:
        raise SizeError(f"Cannot read directory {path}: {exc}") from exc

    for entry in entries:
        if cancel is not None:
            cancel.raise_if_cancelled()
        try:
            st = entry.stat(follow_symlinks=False)
        except FileNotFoundError:
            continue
        except OSError as exc:
            raise SizeError(f"Cannot stat {entry.path}: {exc}") from exc

        # Symlinks fail both checks below, so they are neither followed nor counted.
        if stat.S_ISREG(st.st_mode):
            total += st.st_size
        elif stat.S_ISDIR(st.st_mode):
            total += _sum_tree(Path(entry.path), cancel)
    return total


def calculate_dir_size(path: Path, cancel: CancellationToken | None = None) -> int:
    """Return the total size in bytes of the regular files under path.

    Symbolic links are never followed and contribute nothing. Entries that vanish while
    the walk is running count as zero.

    Raises:
        SizeError: If a directory listing or stat call fails for any other reason.
        OperationCancelled: If cancel is triggered during the walk.
    """
    path = Path(path)
    try:
        st = path.lstat()
    except FileNotFoundError:
        return 0
    except OSError as exc:
        raise SizeError(f"Cannot stat {path}: {exc}") from exc

    if stat.S_ISREG(st.st_mode):
        return st.st_size
    if stat.S_ISDIR(st.st_mode):
        return _sum_tree(path, cancel)
    return 0


def order_by_size(infos: Iterable[TargetDirInfo]) -> list[TargetDirInfo]:
    """Sort largest first, breaking ties by path so output is stable."""
    return sorted(infos, key=lambda info: (-info.size, str(info.path)))


def measure_target_dirs(
    paths: Iterable[Path],
    *,
    workers: int | None = None,
    cancel: CancellationToken | None = None,
    progress: ProgressTracker | None = None,
) -> MeasureResult:
    """Size every path concurrently and return the results sorted largest first.

    A path whose size cannot be read is logged and left out. On cancellation the
    directories finished so far are returned with ``cancelled`` set.
    """
    paths = list(paths)
    if workers is None:
        workers = determine_default_workers()
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    result = MeasureResult(infos=[])
    if not paths:
        return result

    infos: list[TargetDirInfo] = []
    with ThreadPoolExecutor(max_workers=min(workers, len(paths))) as executor:
        futures = {executor.submit(calculate_dir_size, path, cancel): path for path in paths}
        for done, future in enumerate(as_completed(futures), start=1):
            path = futures[future]
            try:
                size = future.result()
            except OperationCancelled:
                result.cancelled = True
                for pending in futures:
                    pending.cancel()
                continue
            except CancelledError:
                continue
            except SizeError as exc:
                logging.error("Error calculating size for %s: %s", path, exc)
                result.failures.append((path, exc))
                continue
            finally:
                if progress is not None:
                    progress.update(done)
            infos.append(TargetDirInfo(path=path, size=size))

    if progress is not None:
        progress.finish()
    if cancel is not None and cancel.interrupted:
        result.cancelled = True
    result.infos = order_by_size(infos)
    return result
