"""Runtime configuration model for hexconv.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import os

from core.constants import (
    DEFAULT_OUTPUT_EXTENSION,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_SHEET_RANGE,
    DEFAULT_SPREADSHEET_TITLE,
)
from core.errors import HexConvConfigError


@dataclass(frozen=True)
class HexConvConfig:
    """Validated runtime configuration.

    Attributes:
        output_extension: Extension given to local destination files.
        sheet_range: A1 range that spreadsheet rows are appended to.
        spreadsheet_title: Title used when a new spreadsheet is created.
        request_timeout_seconds: Socket timeout for spreadsheet API calls.
    """

    output_extension: str
    sheet_range: str
    spreadsheet_title: str
    request_timeout_seconds: float

    @classmethod
    def from_env(cls) -> "HexConvConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            HexConvConfigError: If environment values are invalid.
        """
        output_extension = os.getenv("HEXCONV_OUTPUT_EXTENSION", DEFAULT_OUTPUT_EXTENSION)
        sheet_range = os.getenv("HEXCONV_SHEET_RANGE", DEFAULT_SHEET_RANGE)
        spreadsheet_title = os.getenv("HEXCONV_SPREADSHEET_TITLE", DEFAULT_SPREADSHEET_TITLE)
        timeout_value = os.getenv("HEXCONV_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT_SECONDS))
        return cls(
            output_extension=_parse_output_extension(output_extension),
            sheet_range=_require_non_empty("HEXCONV_SHEET_RANGE", sheet_range),
            spreadsheet_title=_require_non_empty("HEXCONV_SPREADSHEET_TITLE", spreadsheet_title),
            request_timeout_seconds=_parse_request_timeout(timeout_value),
        )


def _parse_output_extension(raw_value: str) -> str:
    """Validate the local output extension.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Extension including its leading dot.

    Raises:
        HexConvConfigError: If the value is not a dotted extension.
    """
    if len(raw_value) < 2 or not raw_value.startswith(".") or "/" in raw_value:
        raise HexConvConfigError(
            "Invalid HEXCONV_OUTPUT_EXTENSION value: "
            f"expected an extension like '.txt', got '{raw_value}'. "
            "Set HEXCONV_OUTPUT_EXTENSION to a dotted file extension."
        )
    return raw_value


def _require_non_empty(variable_name: str, raw_value: str) -> str:
    """Reject blank string settings."""
    if not raw_value.strip():
        raise HexConvConfigError(
            f"Invalid {variable_name} value: expected a non-empty string. "
            f"Unset {variable_name} to use the default."
        )
    return raw_value


def _parse_request_timeout(raw_value: str) -> float:
    """Parse the spreadsheet request timeout.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Positive timeout in seconds.

    Raises:
        HexConvConfigError: If value is not a positive finite number.
    """
    try:
        timeout_seconds = float(raw_value)
    except ValueError as error:
        raise HexConvConfigError(
            "Invalid HEXCONV_REQUEST_TIMEOUT value: "
            f"expected number of seconds, got '{raw_value}'. "
            "Set HEXCONV_REQUEST_TIMEOUT to a numeric value."
        ) from error
    if not math.isfinite(timeout_seconds) or timeout_seconds <= 0:
        raise HexConvConfigError(
            "Invalid HEXCONV_REQUEST_TIMEOUT value: "
            f"expected a positive number, got '{raw_value}'."
        )
    return timeout_seconds
