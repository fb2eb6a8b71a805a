"""Tests for big_targets/cancellation.py module."""

from __future__ import annotations

import signal
import threading

import pytest

from big_targets.cancellation import CancellationToken, OperationCancelled


def test_token_starts_clear():
    token = CancellationToken()
    assert not token.interrupted
    token.raise_if_cancelled()


def test_cancel_sets_flag_and_raises():
    token = CancellationToken()
    token.cancel()
    assert token.interrupted
    with pytest.raises(OperationCancelled):
        token.raise_if_cancelled()


def test_sigint_handler_flags_then_interrupts():
    """First Ctrl+C requests cancellation, the second one interrupts immediately."""
    previous = signal.getsignal(signal.SIGINT)
    token = CancellationToken()
    token.install_sigint_handler()
    try:
        signal.raise_signal(signal.SIGINT)
        assert token.interrupted
        with pytest.raises(KeyboardInterrupt):
            signal.raise_signal(signal.SIGINT)
    finally:
        token.restore()
    assert signal.getsignal(signal.SIGINT) is previous


def test_install_outside_main_thread_is_noop():
    """Signal handlers can only be installed from the main thread."""
    previous = signal.getsignal(signal.SIGINT)
    token = CancellationToken()
    worker = threading.Thread(target=token.install_sigint_handler)
    worker.start()
    worker.join()

    assert signal.getsignal(signal.SIGINT) is previous
    token.restore()
    assert signal.getsignal(signal.SIGINT) is previous
