"""Shared typed models.

This module defines immutable data models used by the decoder, sinks,
batch orchestrator, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Union

from core.errors import HexConvError

OutcomeStatus = Literal["converted", "skipped", "failed"]


@dataclass(frozen=True)
class SourceEntry:
    """Raw source file read from the source directory.

    Attributes:
        name: File name inside the source directory.
        path: Full path the content was read from.
        content: Raw hex text bytes.
    """

    name: str
    path: Path
    content: bytes


@dataclass(frozen=True)
class LocalTarget:
    """Destination file for a locally written payload."""

    path: Path


@dataclass(frozen=True)
class RemoteTarget:
    """Spreadsheet row destination for an appended payload.

    Attributes:
        spreadsheet_id: Spreadsheet the row was appended to.
        row_key: Entry name stored in the row's first column.
    """

    spreadsheet_id: str
    row_key: str


SinkTarget = Union[LocalTarget, RemoteTarget]


@dataclass(frozen=True)
class UnboundSpreadsheet:
    """Remote sink state before a spreadsheet id is known."""


@dataclass(frozen=True)
class BoundSpreadsheet:
    """Remote sink state once a spreadsheet id has been adopted."""

    spreadsheet_id: str


SpreadsheetBinding = Union[UnboundSpreadsheet, BoundSpreadsheet]


@dataclass(frozen=True)
class EntryOutcome:
    """Per-entry batch result used only for reporting.

    Attributes:
        entry_name: Source file name.
        status: Converted, skipped, or failed.
        target: Destination written or found, when known.
        reason: Human-readable skip or failure reason.
        error: Domain error for failed entries.
    """

    entry_name: str
    status: OutcomeStatus
    target: SinkTarget | None = None
    reason: str | None = None
    error: HexConvError | None = None

    @classmethod
    def converted(cls, entry_name: str, target: SinkTarget) -> "EntryOutcome":
        """Build a converted outcome."""
        return cls(entry_name=entry_name, status="converted", target=target)

    @classmethod
    def skipped(cls, entry_name: str, target: SinkTarget, reason: str) -> "EntryOutcome":
        """Build a skipped outcome."""
        return cls(entry_name=entry_name, status="skipped", target=target, reason=reason)

    @classmethod
    def failed(cls, entry_name: str, error: HexConvError) -> "EntryOutcome":
        """Build a failed outcome carrying its error."""
        return cls(entry_name=entry_name, status="failed", reason=str(error), error=error)


@dataclass(frozen=True)
class BatchReport:
    """Ordered outcomes of one batch run.

    Attributes:
        source_dir: Directory the batch enumerated.
        outcomes: Outcomes in processing order.
        cancelled: Whether cancellation stopped the batch early.
    """

    source_dir: Path
    outcomes: tuple[EntryOutcome, ...]
    cancelled: bool = False

    @property
    def converted_count(self) -> int:
        """Count converted entries in this report."""
        return sum(1 for outcome in self.outcomes if outcome.status == "converted")

    @property
    def skipped_count(self) -> int:
        """Count skipped entries in this report."""
        return sum(1 for outcome in self.outcomes if outcome.status == "skipped")

    @property
    def failed_count(self) -> int:
        """Count failed entries in this report."""
        return sum(1 for outcome in self.outcomes if outcome.status == "failed")
