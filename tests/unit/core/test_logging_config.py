"""Unit tests for structured logging configuration."""

from __future__ import annotations

import json

from core.logging_config import get_logger


def test_get_logger_writes_json_events_to_stderr(capsys) -> None:
    """Logger should render one JSON object per event on stderr."""
    logger = get_logger("tests.logging")

    logger.info("entry_converted", entry="a.hex")
    captured = capsys.readouterr()

    payload = json.loads(captured.err.strip().splitlines()[-1])
    assert payload["event"] == "entry_converted" and payload["entry"] == "a.hex"
    assert captured.out == ""
