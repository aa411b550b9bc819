"""Cooperative cancellation for batch runs.

This module provides the token polled by the batch runner between entries
and the OS signal listener that trips it.
"""

from __future__ import annotations

from contextlib import contextmanager
import signal
import threading
from types import FrameType
from typing import Any, Callable, Iterator

from core.logging_config import get_logger

_LOGGER = get_logger(__name__)
_CANCEL_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class CancellationToken:
    """One-shot stop flag shared by a signal listener and the batch runner.

    Once cancelled the token stays cancelled.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request that the batch stop at its next checkpoint."""
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        """Return whether cancellation has been requested."""
        return self._event.is_set()


@contextmanager
def cancel_on_signals(
    token: CancellationToken,
    notify: Callable[[str], Any] = print,
) -> Iterator[CancellationToken]:
    """Trip a token on SIGINT or SIGTERM for the duration of the block.

    Previous handlers are restored on exit. Must be entered from the main
    thread, as required by ``signal.signal``.

    Args:
        token: Token to cancel when a signal arrives.
        notify: Callback receiving the operator-facing shutdown notice.

    Yields:
        The same token, for ``with ... as token`` usage.
    """

    def _handle_signal(signal_number: int, frame: FrameType | None) -> None:
        notify("\nReceived interrupt signal. Shutting down...")
        _LOGGER.warning("cancellation_requested", signal=signal.Signals(signal_number).name)
        token.cancel()

    previous_handlers = {
        signal_number: signal.signal(signal_number, _handle_signal)
        for signal_number in _CANCEL_SIGNALS
    }
    try:
        yield token
    finally:
        for signal_number, handler in previous_handlers.items():
            signal.signal(signal_number, handler)
