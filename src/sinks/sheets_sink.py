"""Google Sheets sink.

This module appends each decoded payload as a base64 row to a spreadsheet,
creating the spreadsheet on first write when no id was supplied.
"""

from __future__ import annotations

import base64
from typing import Any, Callable, Protocol, Sequence

from core.constants import DEFAULT_SHEET_RANGE, DEFAULT_SPREADSHEET_TITLE
from core.errors import InsufficientAuthError
from core.logging_config import get_logger
from core.types import (
    BoundSpreadsheet,
    RemoteTarget,
    SpreadsheetBinding,
    UnboundSpreadsheet,
)

_LOGGER = get_logger(__name__)


class SpreadsheetGateway(Protocol):
    """Remote tabular operations required by the sheets sink."""

    def create_spreadsheet(self, title: str) -> str: ...

    def append_row(self, spreadsheet_id: str, sheet_range: str, values: Sequence[str]) -> None: ...


class SheetsSink:
    """Append-only spreadsheet sink.

    Rows are ``[entry_name, base64(payload)]``. Appends are not idempotent,
    so ``find_existing`` never reports a previous conversion.
    """

    def __init__(
        self,
        gateway: SpreadsheetGateway,
        can_create: bool,
        spreadsheet_id: str | None = None,
        sheet_range: str = DEFAULT_SHEET_RANGE,
        spreadsheet_title: str = DEFAULT_SPREADSHEET_TITLE,
        on_spreadsheet_created: Callable[[str], Any] | None = None,
    ) -> None:
        """Create a sheets sink.

        Args:
            gateway: Spreadsheet API adapter.
            can_create: Whether the credentials may create spreadsheets.
            spreadsheet_id: Existing spreadsheet id; blank means create on
                first write.
            sheet_range: A1 range rows are appended to.
            spreadsheet_title: Title for a created spreadsheet.
            on_spreadsheet_created: Callback receiving a newly created id.
        """
        self._gateway = gateway
        self._on_spreadsheet_created = on_spreadsheet_created
        self._can_create = can_create
        self._sheet_range = sheet_range
        self._spreadsheet_title = spreadsheet_title
        self._binding: SpreadsheetBinding = (
            BoundSpreadsheet(spreadsheet_id) if spreadsheet_id else UnboundSpreadsheet()
        )

    @property
    def binding(self) -> SpreadsheetBinding:
        """Return the current spreadsheet binding state."""
        return self._binding

    def find_existing(self, entry_name: str) -> RemoteTarget | None:
        return None

    def write(self, entry_name: str, payload: bytes) -> RemoteTarget:
        """Append one row for the payload, creating the spreadsheet if needed.

        Raises:
            InsufficientAuthError: If no spreadsheet is bound and the
                credentials cannot create one.
            RemoteSinkError: If the spreadsheet API call fails.
        """
        spreadsheet_id = self._bind_spreadsheet()
        encoded_payload = base64.b64encode(payload).decode("ascii")
        self._gateway.append_row(spreadsheet_id, self._sheet_range, [entry_name, encoded_payload])
        return RemoteTarget(spreadsheet_id=spreadsheet_id, row_key=entry_name)

    def _bind_spreadsheet(self) -> str:
        if isinstance(self._binding, BoundSpreadsheet):
            return self._binding.spreadsheet_id
        if not self._can_create:
            raise InsufficientAuthError(
                "Cannot create new spreadsheet with API key authentication. "
                "Please provide an existing spreadsheet ID."
            )
        spreadsheet_id = self._gateway.create_spreadsheet(self._spreadsheet_title)
        self._binding = BoundSpreadsheet(spreadsheet_id)
        _LOGGER.info(
            "spreadsheet_created",
            spreadsheet_id=spreadsheet_id,
            title=self._spreadsheet_title,
        )
        if self._on_spreadsheet_created is not None:
            self._on_spreadsheet_created(spreadsheet_id)
        return spreadsheet_id
