"""Public SDK surface for hexconv.

This module provides a stable import path for library users.
It re-exports the primary client and typed models.
"""

from __future__ import annotations

from convert.batch_runner import BatchConverter, run_batch
from convert.cancellation import CancellationToken, cancel_on_signals
from convert.converter_client import HexConvClient
from convert.hex_decoder import decode_hex
from core.config import HexConvConfig
from core.types import BatchReport, EntryOutcome
from sinks.local_sink import LocalFileSink
from sinks.sheets_client import SheetsCredentials
from sinks.sheets_sink import SheetsSink

__all__ = [
    "BatchConverter",
    "BatchReport",
    "CancellationToken",
    "EntryOutcome",
    "HexConvClient",
    "HexConvConfig",
    "LocalFileSink",
    "SheetsCredentials",
    "SheetsSink",
    "cancel_on_signals",
    "decode_hex",
    "run_batch",
]
