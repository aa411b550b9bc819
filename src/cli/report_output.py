"""Console rendering of batch outcomes for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator

from convert.batch_runner import BatchConverter
from convert.cancellation import CancellationToken, cancel_on_signals
from convert.converter_client import resolve_source_dir
from core.constants import CANCELLED_EXIT_CODE
from core.errors import HexConvError
from core.types import BatchReport, EntryOutcome


def run_reported_batch(
    source_dir: str | Path,
    build_converter: Callable[[CancellationToken], BatchConverter],
) -> int:
    """Run a batch under signal-driven cancellation, printing as it goes.

    Each outcome line is printed as soon as its entry finishes; the summary
    follows once the batch stops.

    Args:
        source_dir: Source folder argument.
        build_converter: Callable setting up the sink and returning a
            converter polling the given token.

    Returns:
        Exit code: 0 when nothing failed, 1 on failures or setup errors,
        130 when interrupted.
    """
    with cancel_on_signals(CancellationToken()) as token:
        try:
            converter = build_converter(token)
            source_path = resolve_source_dir(source_dir)
            report = converter.summarize(
                source_path,
                _print_outcomes(converter.iter_outcomes(source_path)),
            )
        except HexConvError as error:
            print(f"error={error}")
            return 1
    for line in render_summary(report):
        print(line)
    if report.cancelled:
        return CANCELLED_EXIT_CODE
    return 0 if report.failed_count == 0 else 1


def render_batch_report(report: BatchReport) -> list[str]:
    """Render per-entry lines followed by the summary lines."""
    return [render_outcome(outcome) for outcome in report.outcomes] + render_summary(report)


def render_summary(report: BatchReport) -> list[str]:
    """Render the interruption notice and counts for a finished batch."""
    lines = ["Processing interrupted."] if report.cancelled else []
    lines.append(
        f"converted={report.converted_count} "
        f"skipped={report.skipped_count} "
        f"failed={report.failed_count}"
    )
    return lines


def render_outcome(outcome: EntryOutcome) -> str:
    """Render one outcome as an operator-facing line."""
    if outcome.status == "converted":
        return f"Processed {outcome.entry_name} successfully"
    if outcome.status == "skipped":
        return f"Skipping {outcome.entry_name}: Already converted"
    return f"Error converting {outcome.entry_name}: {outcome.reason}"


def print_created_spreadsheet(spreadsheet_id: str) -> None:
    """Tell the operator which spreadsheet was created for reuse."""
    print(f"Created new spreadsheet with ID: {spreadsheet_id}", flush=True)


def _print_outcomes(outcomes: Iterator[EntryOutcome]) -> Iterator[EntryOutcome]:
    for outcome in outcomes:
        print(render_outcome(outcome), flush=True)
        yield outcome
