"""Unit tests for shared typed models."""

from __future__ import annotations

from pathlib import Path

from core.errors import MalformedHexError
from core.types import BatchReport, EntryOutcome, LocalTarget


def test_batch_report_counts_statuses(tmp_path: Path) -> None:
    """Report counters should tally each outcome status."""
    target = LocalTarget(path=tmp_path / "a.txt")
    report = BatchReport(
        source_dir=tmp_path,
        outcomes=(
            EntryOutcome.converted("a.hex", target),
            EntryOutcome.skipped("b.hex", target, "already converted"),
            EntryOutcome.failed("c.hex", MalformedHexError("bad", position=1)),
            EntryOutcome.converted("d.hex", target),
        ),
    )

    assert (report.converted_count, report.skipped_count, report.failed_count) == (2, 1, 1)


def test_failed_outcome_carries_error_message() -> None:
    """Failed outcomes should expose the error text as their reason."""
    error = MalformedHexError("odd length", position=3)

    outcome = EntryOutcome.failed("c.hex", error)

    assert outcome.reason == "odd length" and outcome.error is error
