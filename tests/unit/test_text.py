"""Unit tests for the string-level helpers in scalarcodec.text."""

import io
import logging

import pytest

from scalarcodec.adapters import MemoryInputStream, open_input
from scalarcodec.interfaces.codec import Encoding
from scalarcodec.interfaces.errors import (
    MalformedSequenceError,
    OutOfRangeError,
    TruncatedSequenceError,
)
from scalarcodec.text import (
    REPLACEMENT_CHARACTER,
    decode_bytes,
    decode_units,
    encode_bytes,
    encode_text,
    iter_codepoints,
)

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    ("encoding", "units"),
    [
        ("utf-8", [0x41, 0xE2, 0x82, 0xAC, 0xF0, 0x9F, 0x98, 0x80]),
        ("utf-16", [0x0041, 0x20AC, 0xD83D, 0xDE00]),
        (Encoding.UTF16LE, [0x0041, 0x20AC, 0xD83D, 0xDE00]),
        ("ascii", [0x41, 0x2C, 0x00]),
    ],
)
def test_encode_text(encoding, units):
    """Each character contributes its code units in order."""
    assert encode_text("A€😀", encoding) == units


def test_encode_bytes_uses_label_byte_order():
    """LE and BE differ only in byte layout."""
    assert encode_bytes("A", "utf-16-le") == b"A\x00"
    assert encode_bytes("A", "utf-16-be") == b"\x00A"
    assert encode_bytes("A", "utf-16") == b"\x00A"
    assert encode_bytes("é", "utf-8") == b"\xc3\xa9"


def test_decode_units_strict_raises():
    """The strict policy surfaces the codec error."""
    with pytest.raises(MalformedSequenceError):
        decode_units([0x41, 0xC2, 0x00], "utf-8")


def test_decode_units_replace():
    """The replace policy substitutes U+FFFD and carries on."""
    assert decode_units([0x41, 0xFF, 0x42], "utf-8", errors="replace") == "A\ufffdB"


@pytest.mark.parametrize(
    ("units", "encoding", "expected"),
    [
        ([0xC2, 0x41], "utf-8", "\ufffdA"),
        ([0x41, 0xC2, 0x00, 0x42], "utf-8", "A\ufffd\x00B"),
        ([0xE2, 0x82, 0xC3, 0xA9], "utf-8", "\ufffd\u00e9"),
        ([0xD800, 0x0041], "utf-16", "\ufffdA"),
        ([0xD800, 0xD800, 0xDC00], "utf-16", "\ufffd\U00010000"),
    ],
)
def test_replace_keeps_unit_that_broke_a_sequence(units, encoding, expected):
    """A unit that cut a sequence short is decoded as the next value."""
    assert decode_units(units, encoding, errors="replace") == expected


def test_decode_bytes_replace_keeps_unit_that_broke_a_sequence():
    """Resynchronization works over binary streams too."""
    assert decode_bytes(b"\xc2A", "utf-8", errors="replace") == "\ufffdA"
    assert decode_bytes(b"\xd8\x00\x00A", "utf-16-be", errors="replace") == "\ufffdA"


def test_replace_does_not_retry_continuation_units():
    """Overlong forms are one replacement, not one per byte."""
    assert decode_units([0xC0, 0x80, 0x41], "utf-8", errors="replace") == "\ufffdA"


def test_replace_covers_out_of_range_values():
    """Four-byte patterns above U+10FFFF are replaced too."""
    assert decode_units([0xF4, 0x90, 0x80, 0x80], "utf-8", errors="replace") == "�"
    with pytest.raises(OutOfRangeError):
        decode_units([0xF4, 0x90, 0x80, 0x80], "utf-8")


def test_truncated_tail():
    """A cut-off final sequence is an error, or one final replacement."""
    with pytest.raises(TruncatedSequenceError):
        decode_units([0x41, 0xE2, 0x82], "utf-8")
    assert decode_units([0x41, 0xE2, 0x82], "utf-8", errors="replace") == "A�"


def test_replacement_is_logged(caplog):
    """Each replacement leaves a DEBUG breadcrumb."""
    with caplog.at_level(logging.DEBUG, logger="scalarcodec.text"):
        decode_units([0xDC00], "utf-16", errors="replace")
    assert "Replacing undecodable sequence" in caplog.text


def test_decode_units_u_ffff_round_trips():
    """U+FFFF is data, never mistaken for a failure marker."""
    assert decode_units([0xEF, 0xBF, 0xBF], "utf-8") == "￿"


def test_decode_bytes_utf16le():
    """Bytes are split into units using the label's byte order."""
    assert decode_bytes("€😀".encode("utf-16-le"), "utf-16-le") == "€😀"


def test_decode_bytes_odd_length():
    """An odd number of UTF-16 bytes ends in a truncated unit."""
    with pytest.raises(TruncatedSequenceError):
        decode_bytes(b"\x00A\x00", "utf-16-be")
    assert decode_bytes(b"\x00A\x00", "utf-16-be", errors="replace") == "A�"


def test_iter_codepoints_is_lazy():
    """Values are produced one at a time from the stream."""
    stream = open_input(io.BytesIO(b"ab"), "ascii")
    iterator = iter_codepoints(stream, "ascii")
    assert next(iterator) == 0x61
    assert stream.position == 1
    assert list(iterator) == [0x62]


def test_iter_codepoints_replacement_constant():
    """The replacement value is U+FFFD."""
    stream = MemoryInputStream([0x80])
    assert list(iter_codepoints(stream, "utf-8", errors="replace")) == [
        REPLACEMENT_CHARACTER
    ]


def test_unknown_error_policy():
    """Only strict and replace are understood."""
    with pytest.raises(ValueError, match="errors must be one of"):
        decode_units([0x41], "utf-8", errors="ignore")  # type: ignore[arg-type]
