"""
Deletion of target directories, either forced or after the user picks from a checklist.

Any failed removal stops the batch. Directories already removed stay removed.
"""

from __future__ import annotations

import logging
import re
import shutil
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence, TextIO

from .cancellation import CancellationToken
from .formatting import format_size
from .sizing import TargetDirInfo

Selector = Callable[[Sequence[str]], Sequence[int]]

PROMPT = "Select target directories to delete (numbers or ranges like '1 3-5', 'all', Enter for none)"
MAX_PROMPT_ATTEMPTS = 3

_RANGE_RE = re.compile(r"^(\d+)-(\d+)$")


class DeletionError(OSError):
    """Raised when removing a target directory fails."""


class InteractionError(OSError):
    """Raised when the selection prompt cannot be completed."""


def stdio_is_interactive() -> bool:
    """Return True when both stdin and stderr are attached to a terminal."""
    return sys.stdin.isatty() and sys.stderr.isatty()


def remove_target_dir(path: Path) -> None:
    """Remove a target directory tree. A symlinked target loses only the link, never what it points to."""
    if path.is_symlink():
        path.unlink()
    else:
        shutil.rmtree(path)


def format_choice(info: TargetDirInfo) -> str:
    return f"{format_size(info.size):>10}  {info.path}"


def parse_selection(text: str, count: int) -> list[int]:
    """Turn checklist input into sorted zero-based indices.

    Accepts 1-based numbers and ranges separated by spaces or commas, ``all``/``a``,
    or an empty string/``none`` for no selection.

    Raises:
        ValueError: On anything that is not a valid selection for count items.
    """
    text = text.strip().lower()
    if text in {"", "none", "n"}:
        return []
    if text in {"all", "a"}:
        return list(range(count))

    selected: set[int] = set()
    for token in re.split(r"[\s,]+", text):
        if not token:
            continue
        match = _RANGE_RE.match(token)
        if match:
            start, end = int(match.group(1)), int(match.group(2))
            if start > end:
                raise ValueError(f"Invalid range: {token}")
            numbers = range(start, end + 1)
        elif token.isdigit():
            numbers = range(int(token), int(token) + 1)
        else:
            raise ValueError(f"Not a number: {token}")
        for number in numbers:
            if not 1 <= number <= count:
                raise ValueError(f"Selection {number} is out of range 1-{count}")
            selected.add(number - 1)
    return sorted(selected)


class TerminalChecklist:
    """Line-based checklist prompt: lists numbered rows, reads the chosen numbers from stdin."""

    def __init__(
        self,
        prompt: str = PROMPT,
        *,
        input_func: Optional[Callable[[str], str]] = None,
        stream: Optional[TextIO] = None,
        max_attempts: int = MAX_PROMPT_ATTEMPTS,
    ):
        self.prompt = prompt
        self.input_func = input_func if input_func is not None else input
        self.stream = stream if stream is not None else sys.stderr
        self.max_attempts = max_attempts

    def __call__(self, items: Sequence[str]) -> list[int]:
        for idx, item in enumerate(items, start=1):
            print(f"[{idx:>3}] {item}", file=self.stream)
        for _ in range(self.max_attempts):
            try:
                response = self.input_func(f"{self.prompt}: ")
            except EOFError as exc:
                raise InteractionError("Selection not received (end of input)") from exc
            try:
                return parse_selection(response, len(items))
            except ValueError as exc:
                print(f"{exc}. Try again.", file=self.stream)
        raise InteractionError(f"No valid selection after {self.max_attempts} attempts")


def _remove_all(
    targets: Sequence[TargetDirInfo],
    *,
    cancel: Optional[CancellationToken],
    remover: Callable[[Path], None],
) -> list[TargetDirInfo]:
    deleted: list[TargetDirInfo] = []
    for info in targets:
        if cancel is not None and cancel.interrupted:
            logging.warning("Deletion cancelled after %d of %d directories", len(deleted), len(targets))
            cancel.raise_if_cancelled()
        try:
            remover(info.path)
        except OSError as exc:
            print(f"Failed to delete: '{info.path}' - giving up now! ({exc})", file=sys.stderr)
            raise DeletionError(f"Failed to delete {info.path}: {exc}") from exc
        print(f"Deleted '{info.path}' successfully, ({format_size(info.size)})")
        deleted.append(info)
    return deleted


def _select(target_info: Sequence[TargetDirInfo], selector: Selector) -> list[int]:
    items = [format_choice(info) for info in target_info]
    try:
        chosen = selector(items)
    except InteractionError:
        raise
    except (OSError, EOFError) as exc:
        raise InteractionError(f"Selection prompt failed: {exc}") from exc

    indices = sorted(set(chosen))
    for idx in indices:
        if not 0 <= idx < len(target_info):
            raise InteractionError(f"Selection index {idx} is out of range")
    return indices


def handle_deletion(
    target_info: Sequence[TargetDirInfo],
    force: bool,
    *,
    selector: Optional[Selector] = None,
    is_interactive: Optional[Callable[[], bool]] = None,
    cancel: Optional[CancellationToken] = None,
    remover: Callable[[Path], None] = remove_target_dir,
) -> list[TargetDirInfo]:
    """Delete target directories and return the ones that were removed.

    With force, everything in target_info is removed in the given order. Otherwise the
    user picks entries from a checklist; without a terminal nothing is deleted.

    Raises:
        DeletionError: On the first removal that fails; later entries are left alone.
        InteractionError: If the checklist cannot be shown or answered.
        OperationCancelled: If cancel is triggered between deletions.
    """
    if force:
        return _remove_all(target_info, cancel=cancel, remover=remover)

    if is_interactive is None:
        is_interactive = stdio_is_interactive
    if not is_interactive():
        logging.info("Cannot prompt for deletion: not running in interactive terminal")
        return []

    indices = _select(target_info, selector or TerminalChecklist())
    if not indices:
        print("No directories selected for deletion")
        return []

    chosen = [target_info[idx] for idx in indices]
    return _remove_all(chosen, cancel=cancel, remover=remover)
