"""Hex text decoding transform.

This module turns whitespace-interleaved hex text into raw bytes.
It is pure and deterministic, so the batch runner can call it per entry.
"""

from __future__ import annotations

import re

from core.constants import HEX_WHITESPACE_CHARACTERS
from core.errors import MalformedHexError

_WHITESPACE_TABLE = str.maketrans("", "", HEX_WHITESPACE_CHARACTERS)
_NON_HEX_PATTERN = re.compile(r"[^0-9a-fA-F]")


def decode_hex(text: str | bytes) -> bytes:
    """Decode hex digit pairs into bytes.

    Spaces, newlines, and carriage returns are removed first. Every other
    character must be a hex digit, and the remainder must have even length.

    Args:
        text: Hex text, or raw file bytes read one character per byte.

    Returns:
        Decoded payload, high nibble first per byte.

    Raises:
        MalformedHexError: If the stripped text holds a non-hex character
            or has odd length.
    """
    stripped = strip_hex_whitespace(text)
    invalid_match = _NON_HEX_PATTERN.search(stripped)
    if invalid_match is not None:
        position = invalid_match.start()
        raise MalformedHexError(
            f"Invalid hex character {invalid_match.group()!r} at position {position}. "
            "Source files may only contain hex digits and whitespace.",
            position=position,
        )
    if len(stripped) % 2 == 1:
        raise MalformedHexError(
            f"Odd-length hex input: {len(stripped)} digits remain after removing whitespace. "
            "Each byte needs two hex digits.",
            position=len(stripped),
        )
    return bytes.fromhex(stripped)


def strip_hex_whitespace(text: str | bytes) -> str:
    """Remove spaces, newlines, and carriage returns from hex text.

    Args:
        text: Hex text or raw bytes.

    Returns:
        Text with separator characters removed.
    """
    if isinstance(text, bytes):
        text = text.decode("latin-1")
    return text.translate(_WHITESPACE_TABLE)
