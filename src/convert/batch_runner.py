"""Batch conversion orchestration.

This module walks a source directory one entry at a time, decodes each
hex file, and hands the payload to the configured output sink. Entry
failures are recorded and never stop the batch.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from convert.cancellation import CancellationToken
from convert.hex_decoder import decode_hex
from convert.source_listing import list_source_files, read_source_entry
from core.constants import ALREADY_CONVERTED_REASON
from core.errors import MalformedHexError, SinkError, SourceReadError
from core.logging_config import get_logger
from core.types import BatchReport, EntryOutcome
from sinks.base import OutputSink

_LOGGER = get_logger(__name__)


class BatchConverter:
    """Sequential converter for one source directory per run."""

    def __init__(self, sink: OutputSink, cancellation: CancellationToken | None = None) -> None:
        self._sink = sink
        self._cancellation = cancellation or CancellationToken()
        self._cancelled = False

    def run(self, source_dir: Path) -> BatchReport:
        """Convert every file in ``source_dir`` and collect outcomes.

        Args:
            source_dir: Directory holding hex files.

        Returns:
            Report with ordered per-entry outcomes.

        Raises:
            SourceListingError: If the directory cannot be listed.
        """
        return self.summarize(source_dir, self.iter_outcomes(source_dir))

    def summarize(self, source_dir: Path, outcomes: Iterable[EntryOutcome]) -> BatchReport:
        """Build and log the report for outcomes produced by this converter.

        Args:
            source_dir: Directory the outcomes came from.
            outcomes: Outcomes from ``iter_outcomes``, consumed fully.

        Returns:
            Report carrying the cancellation state of the last run.
        """
        collected = tuple(outcomes)
        report = BatchReport(source_dir=source_dir, outcomes=collected, cancelled=self._cancelled)
        _LOGGER.info(
            "batch_cancelled" if report.cancelled else "batch_completed",
            source_dir=str(source_dir),
            converted=report.converted_count,
            skipped=report.skipped_count,
            failed=report.failed_count,
        )
        return report

    def iter_outcomes(self, source_dir: Path) -> Iterator[EntryOutcome]:
        """Yield outcomes as entries are processed.

        The listing happens before the first entry, so a listing failure
        is raised before any outcome is produced.
        """
        self._cancelled = False
        for file_path in list_source_files(source_dir):
            if self._cancellation.is_cancelled:
                self._cancelled = True
                _LOGGER.warning("batch_interrupted", next_entry=file_path.name)
                return
            outcome = self._process_file(file_path)
            _log_outcome(outcome)
            yield outcome

    def _process_file(self, file_path: Path) -> EntryOutcome:
        entry_name = file_path.name
        try:
            existing_target = self._sink.find_existing(entry_name)
            if existing_target is not None:
                return EntryOutcome.skipped(entry_name, existing_target, ALREADY_CONVERTED_REASON)
            entry = read_source_entry(file_path)
            payload = decode_hex(entry.content)
            target = self._sink.write(entry_name, payload)
        except (SourceReadError, MalformedHexError, SinkError) as error:
            return EntryOutcome.failed(entry_name, error)
        return EntryOutcome.converted(entry_name, target)


def run_batch(
    source_dir: Path,
    sink: OutputSink,
    cancellation: CancellationToken | None = None,
) -> BatchReport:
    """Convert a source directory into the given sink.

    Args:
        source_dir: Directory holding hex files.
        sink: Local or remote output sink.
        cancellation: Optional token polled between entries.

    Returns:
        Report with ordered per-entry outcomes.

    Raises:
        SourceListingError: If the directory cannot be listed.
    """
    return BatchConverter(sink, cancellation).run(source_dir)


def _log_outcome(outcome: EntryOutcome) -> None:
    """Emit one structured event per processed entry."""
    if outcome.status == "converted":
        _LOGGER.info("entry_converted", entry=outcome.entry_name)
    elif outcome.status == "skipped":
        _LOGGER.info("entry_skipped", entry=outcome.entry_name, reason=outcome.reason)
    else:
        _LOGGER.error(
            "entry_failed",
            entry=outcome.entry_name,
            error_type=type(outcome.error).__name__,
            reason=outcome.reason,
        )
