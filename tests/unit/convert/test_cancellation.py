"""Unit tests for cooperative cancellation helpers."""

from __future__ import annotations

import signal

from convert.cancellation import CancellationToken, cancel_on_signals


def test_token_starts_uncancelled_and_stays_cancelled() -> None:
    """Token should flip once and never reset."""
    token = CancellationToken()
    initial = token.is_cancelled

    token.cancel()
    token.cancel()

    assert initial is False and token.is_cancelled is True


def test_cancel_on_signals_trips_token_on_sigterm() -> None:
    """SIGTERM inside the block should cancel the token."""
    notices: list[str] = []

    with cancel_on_signals(CancellationToken(), notify=notices.append) as token:
        signal.raise_signal(signal.SIGTERM)

    assert token.is_cancelled and "Shutting down" in notices[0]


def test_cancel_on_signals_restores_previous_handlers() -> None:
    """Leaving the block should reinstate the original SIGINT handler."""
    original_handler = signal.getsignal(signal.SIGINT)

    with cancel_on_signals(CancellationToken(), notify=lambda message: None):
        installed_handler = signal.getsignal(signal.SIGINT)

    assert installed_handler is not original_handler
    assert signal.getsignal(signal.SIGINT) is original_handler
