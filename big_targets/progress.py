"""Progress line shown on stderr while candidate sizes are measured."""

from __future__ import annotations

import sys
import time
from typing import TextIO


class ProgressTracker:
    """Prints a single updating ``label: current/total`` line at most every update_interval seconds."""

    def __init__(
        self,
        total: int,
        label: str,
        update_interval: float = 0.5,
        stream: TextIO | None = None,
    ):
        self.total = total
        self.label = label
        self.update_interval = update_interval
        self.stream = stream if stream is not None else sys.stderr
        self.last_update = 0.0
        self._printed = False

    def update(self, current: int) -> None:
        """Redraw the progress line if the interval elapsed or the work is complete."""
        now = time.time()
        if current == self.total or now - self.last_update >= self.update_interval:
            if self.total:
                pct = (current / self.total) * 100
                status = f"{current:,}/{self.total:,} ({pct:5.1f}%)"
            else:
                status = f"{current:,}"
            print(f"\r{self.label}: {status}", end="", flush=True, file=self.stream)
            self.last_update = now
            self._printed = True

    def finish(self) -> None:
        """Terminate the progress line."""
        if self._printed:
            print(file=self.stream)
