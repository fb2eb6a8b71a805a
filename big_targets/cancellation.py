"""Cooperative cancellation shared by the sizing workers and the deletion loop."""

from __future__ import annotations

import logging
import signal
import threading


class OperationCancelled(RuntimeError):
    """Raised when work stops because cancellation was requested."""


class CancellationToken:
    """Thread-safe flag checked between directory entries and between deletions."""

    def __init__(self) -> None:
        self._event = threading.Event()
        self._previous_handler = None
        self._installed = False

    @property
    def interrupted(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise OperationCancelled("Operation cancelled by user")

    def _signal_handler(self, _signum, _frame):
        """Handle the first Ctrl+C by flagging cancellation; a second one interrupts hard."""
        if self._event.is_set():
            raise KeyboardInterrupt
        logging.warning("Interrupt received, finishing up (press Ctrl+C again to abort)")
        self.cancel()

    def install_sigint_handler(self) -> None:
        """Route SIGINT to this token. Only possible from the main thread."""
        if threading.current_thread() is not threading.main_thread():
            return
        self._previous_handler = signal.signal(signal.SIGINT, self._signal_handler)
        self._installed = True

    def restore(self) -> None:
        """Put back whatever SIGINT handler was active before install_sigint_handler()."""
        if not self._installed:
            return
        signal.signal(signal.SIGINT, self._previous_handler)
        self._installed = False
        self._previous_handler = None
