"""Unit tests for the hex decoding transform."""

from __future__ import annotations

import pytest

from convert.hex_decoder import decode_hex, strip_hex_whitespace
from core.errors import MalformedHexError


def test_decode_hex_decodes_lowercase_pairs() -> None:
    """Decoder should map digit pairs onto bytes, high nibble first."""
    assert decode_hex("48656c6c6f") == b"Hello"


def test_decode_hex_accepts_mixed_case() -> None:
    """Decoder should accept upper and lower hex digits alike."""
    assert decode_hex("4A6b") == b"Jk"


def test_decode_hex_strips_spaces_and_line_breaks() -> None:
    """Decoder should drop spaces, newlines, and carriage returns first."""
    assert decode_hex("48 65\r\n6c 6c\n6f\n") == b"Hello"


def test_decode_hex_accepts_raw_bytes() -> None:
    """Decoder should accept file bytes as well as text."""
    assert decode_hex(b"00ff\n") == b"\x00\xff"


def test_decode_hex_returns_empty_payload_for_empty_input() -> None:
    """Empty and whitespace-only input should decode to zero bytes."""
    assert decode_hex("") == b"" and decode_hex(" \r\n") == b""


@pytest.mark.parametrize(
    "text",
    ["de ad be ef", "DEADBEEF", "0 0 0 1\r\n", "7f\n80\nff"],
)
def test_decode_hex_reencodes_to_stripped_input(text: str) -> None:
    """Decoding then hex-encoding should reproduce the stripped text."""
    decoded = decode_hex(text)

    assert decoded.hex() == strip_hex_whitespace(text).lower()


def test_decode_hex_rejects_odd_length() -> None:
    """Odd digit counts should fail with the stripped length as position."""
    with pytest.raises(MalformedHexError) as error_info:
        decode_hex("48656c6c6")

    assert error_info.value.position == 9


def test_decode_hex_reports_invalid_character_position() -> None:
    """Non-hex characters should fail at their stripped-text index."""
    with pytest.raises(MalformedHexError) as error_info:
        decode_hex("48 6g")

    assert error_info.value.position == 3


def test_decode_hex_treats_tab_as_invalid() -> None:
    """Only spaces and line breaks are separators; tabs are malformed."""
    with pytest.raises(MalformedHexError):
        decode_hex("48\t65")


def test_decode_hex_reports_invalid_character_before_odd_length() -> None:
    """An invalid character should win over an odd-length input."""
    with pytest.raises(MalformedHexError) as error_info:
        decode_hex("4z6")

    assert error_info.value.position == 1


def test_decode_hex_rejects_non_ascii_bytes() -> None:
    """Non-ASCII bytes should be reported as invalid characters."""
    with pytest.raises(MalformedHexError) as error_info:
        decode_hex(b"48\xe965")

    assert error_info.value.position == 2


def test_decode_hex_errors_are_repeatable() -> None:
    """Decoding the same malformed input twice should fail the same way."""
    messages = []
    for _ in range(2):
        with pytest.raises(MalformedHexError) as error_info:
            decode_hex("abc")
        messages.append((str(error_info.value), error_info.value.position))

    assert messages[0] == messages[1]
