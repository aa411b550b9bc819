"""Core constants used across hexconv modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_OUTPUT_EXTENSION = ".txt"
DEFAULT_SHEET_RANGE = "Sheet1!A1"
DEFAULT_SPREADSHEET_TITLE = "Hex to ASCII Conversion"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0
SHEETS_API_NAME = "sheets"
SHEETS_API_VERSION = "v4"
SHEETS_SCOPE = "https://www.googleapis.com/auth/spreadsheets"
SHEETS_VALUE_INPUT_OPTION = "RAW"
HEX_WHITESPACE_CHARACTERS = " \n\r"
ALREADY_CONVERTED_REASON = "already converted"
CANCELLED_EXIT_CODE = 130
