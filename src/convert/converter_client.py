"""Python SDK for batch conversions.

This module exposes high-level APIs that pick a sink once, then run
the batch converter against a source directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

from convert.batch_runner import BatchConverter
from convert.cancellation import CancellationToken
from core.config import HexConvConfig
from core.errors import DestinationSetupError, SourceListingError
from core.types import BatchReport
from sinks.local_sink import LocalFileSink
from sinks.sheets_client import SheetsCredentials, create_sheets_gateway
from sinks.sheets_sink import SheetsSink, SpreadsheetGateway


class HexConvClient:
    """Primary SDK entry point for hex conversion workflows."""

    def __init__(self, config: HexConvConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or HexConvConfig.from_env()

    def convert_to_directory(
        self,
        source_dir: str | Path,
        output_dir: str | Path,
        cancellation: CancellationToken | None = None,
    ) -> BatchReport:
        """Decode every hex file into a local output directory.

        Args:
            source_dir: Directory holding hex files.
            output_dir: Destination directory, created if missing.
            cancellation: Optional token polled between entries.

        Returns:
            Batch report.

        Raises:
            DestinationSetupError: If the output directory is blank or
                cannot be created.
            SourceListingError: If the source directory is blank or cannot
                be listed.
        """
        converter = self.local_converter(output_dir, cancellation)
        return converter.run(resolve_source_dir(source_dir))

    def export_to_sheets(
        self,
        source_dir: str | Path,
        credentials: SheetsCredentials,
        spreadsheet_id: str | None = None,
        cancellation: CancellationToken | None = None,
        gateway: SpreadsheetGateway | None = None,
    ) -> BatchReport:
        """Append every decoded hex file as a row in a spreadsheet.

        Args:
            source_dir: Directory holding hex files.
            credentials: API key or service account credentials.
            spreadsheet_id: Existing spreadsheet id; a new spreadsheet is
                created on first write when omitted.
            cancellation: Optional token polled between entries.
            gateway: Optional prebuilt gateway, used instead of building one
                from ``credentials``.

        Returns:
            Batch report.

        Raises:
            CredentialSetupError: If credentials cannot be loaded.
            HexConvDependencyError: If Google client libraries are missing.
            SourceListingError: If the source directory is blank or cannot
                be listed.
        """
        converter = self.sheets_converter(
            credentials,
            spreadsheet_id=spreadsheet_id,
            cancellation=cancellation,
            gateway=gateway,
        )
        return converter.run(resolve_source_dir(source_dir))

    def local_converter(
        self,
        output_dir: str | Path,
        cancellation: CancellationToken | None = None,
    ) -> BatchConverter:
        """Set up the local destination and return a converter writing to it.

        Raises:
            DestinationSetupError: If the output directory is blank or
                cannot be created.
        """
        if not str(output_dir).strip():
            raise DestinationSetupError(
                "Error creating destination folder: no path given. "
                "Provide a destination folder path."
            )
        sink = LocalFileSink.create(_as_path(output_dir), self._config.output_extension)
        return BatchConverter(sink, cancellation)

    def sheets_converter(
        self,
        credentials: SheetsCredentials,
        spreadsheet_id: str | None = None,
        cancellation: CancellationToken | None = None,
        gateway: SpreadsheetGateway | None = None,
        on_spreadsheet_created: Callable[[str], Any] | None = None,
    ) -> BatchConverter:
        """Build a converter appending rows through an authorized gateway.

        Args:
            credentials: API key or service account credentials.
            spreadsheet_id: Existing spreadsheet id, blank to create one.
            cancellation: Optional token polled between entries.
            gateway: Optional prebuilt gateway.
            on_spreadsheet_created: Callback receiving a newly created id.

        Returns:
            Converter bound to a sheets sink.

        Raises:
            CredentialSetupError: If credentials cannot be loaded.
            HexConvDependencyError: If Google client libraries are missing.
        """
        sheets_gateway = gateway or create_sheets_gateway(credentials, self._config)
        sink = SheetsSink(
            sheets_gateway,
            can_create=credentials.can_create,
            spreadsheet_id=(spreadsheet_id or "").strip() or None,
            sheet_range=self._config.sheet_range,
            spreadsheet_title=self._config.spreadsheet_title,
            on_spreadsheet_created=on_spreadsheet_created,
        )
        return BatchConverter(sink, cancellation)


def resolve_source_dir(source_dir: str | Path) -> Path:
    """Resolve a source directory argument.

    Raises:
        SourceListingError: If the path is blank.
    """
    if not str(source_dir).strip():
        raise SourceListingError(
            "Error reading source folder: no path given. "
            "Provide a source folder path containing hex files."
        )
    return _as_path(source_dir)


def _as_path(value: str | Path) -> Path:
    return Path(value).expanduser()
