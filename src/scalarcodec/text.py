"""Compose codecs with streams to convert whole strings.

These helpers cover the common "I have a ``str`` / I have some bytes" cases
on top of the single-code-point codec operations. Each call uses exactly one
encoding; transcoding is left to the caller (decode with one, encode with
another).

Error policies for decoding
---------------------------
- ``"strict"`` (default): any `CodecError` propagates.
- ``"replace"``: a malformed or out-of-range sequence becomes U+FFFD and
  decoding resumes with the unit after the offending one. When the
  offending unit broke a sequence but can itself start one (a lead byte
  after a truncated UTF-8 sequence, a BMP unit after a high surrogate), it
  is decoded again as the start of the next value. A sequence cut short by
  the end of the input becomes a final U+FFFD.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator, Sequence
from typing import Literal, TypeAlias

from scalarcodec.adapters import MemoryInputStream, MemoryOutputStream, open_input
from scalarcodec.codecs import get_codec
from scalarcodec.interfaces.codec import Codec, CodePoint, Encoding
from scalarcodec.interfaces.errors import (
    MalformedSequenceError,
    OutOfRangeError,
    TruncatedSequenceError,
)
from scalarcodec.interfaces.stream import ExhaustibleInputStream

__all__ = [
    "REPLACEMENT_CHARACTER",
    "decode_bytes",
    "decode_units",
    "encode_bytes",
    "encode_text",
    "iter_codepoints",
]

logger = logging.getLogger(__name__)

ErrorPolicy: TypeAlias = Literal["strict", "replace"]

REPLACEMENT_CHARACTER = 0xFFFD
ERROR_POLICIES = ("strict", "replace")


def _check_policy(errors: str) -> None:
    if errors not in ERROR_POLICIES:
        raise ValueError(f"errors must be one of {ERROR_POLICIES}, got {errors!r}")


class _ResyncStream:
    """Input stream that hands back one pushed unit before reading on."""

    def __init__(self, source: ExhaustibleInputStream):
        self._source = source
        self._pushed: int | None = None

    @property
    def exhausted(self) -> bool:
        return self._pushed is None and self._source.exhausted

    def push(self, unit: int) -> None:
        self._pushed = unit

    def take(self) -> int:
        if self._pushed is None:
            return self._source.take()
        unit, self._pushed = self._pushed, None
        return unit


def _encode(text: str, codec: type[Codec]) -> MemoryOutputStream:
    output = MemoryOutputStream(unit_bits=codec.unit_bits)
    for char in text:
        codec.encode(output, ord(char))
    return output


def encode_text(text: str, encoding: Encoding | str) -> list[int]:
    """Encode every character of ``text`` and return the code units.

    Raises:
        UnknownEncodingError: If ``encoding`` is an unknown label.
    """
    return _encode(text, get_codec(encoding)).units


def encode_bytes(text: str, encoding: Encoding | str) -> bytes:
    """Encode ``text`` and serialize the units in the encoding's byte order."""
    codec = get_codec(encoding)
    return _encode(text, codec).to_bytes(codec.byteorder)


def iter_codepoints(
    stream: ExhaustibleInputStream,
    encoding: Encoding | str,
    errors: ErrorPolicy = "strict",
) -> Iterator[CodePoint]:
    """Yield code points decoded from ``stream`` until it is exhausted.

    Args:
        stream: Source of code units of the encoding's width.
        encoding: Encoding tag or label.
        errors: ``"strict"`` or ``"replace"`` (see module docstring).

    Yields:
        CodePoint: One value per decoded scalar value.

    Raises:
        CodecError: Under the ``"strict"`` policy.
        ValueError: If ``errors`` is not a known policy.
    """
    _check_policy(errors)
    codec = get_codec(encoding)
    source = _ResyncStream(stream)
    while not source.exhausted:
        try:
            yield codec.decode(source)
        except MalformedSequenceError as exc:
            if errors == "strict":
                raise
            logger.debug("Replacing undecodable sequence: %s", exc)
            yield REPLACEMENT_CHARACTER
            if len(exc.units) > 1 and codec.can_start_sequence(exc.units[-1]):
                source.push(exc.units[-1])
        except OutOfRangeError as exc:
            if errors == "strict":
                raise
            logger.debug("Replacing undecodable sequence: %s", exc)
            yield REPLACEMENT_CHARACTER
        except TruncatedSequenceError as exc:
            if errors == "strict":
                raise
            logger.debug("Replacing truncated trailing sequence: %s", exc)
            yield REPLACEMENT_CHARACTER
            return


def decode_units(
    units: Sequence[int],
    encoding: Encoding | str,
    errors: ErrorPolicy = "strict",
) -> str:
    """Decode a sequence of code units into a string."""
    codec = get_codec(encoding)
    stream = MemoryInputStream(units, unit_bits=codec.unit_bits)
    return "".join(chr(cp) for cp in iter_codepoints(stream, codec.encoding, errors))


def decode_bytes(
    data: bytes,
    encoding: Encoding | str,
    errors: ErrorPolicy = "strict",
) -> str:
    """Decode serialized bytes (in the encoding's byte order) into a string."""
    stream = open_input(io.BytesIO(data), encoding)
    return "".join(chr(cp) for cp in iter_codepoints(stream, encoding, errors))
