"""UTF-16 codecs (RFC 2781).

All three variants work on 16-bit code units and share one algorithm:
BMP code points are a single unit, supplementary code points become a
surrogate pair

    v  = cp - 0x10000
    W1 = 0xD800 | v >> 10       (high surrogate, 0xD800..0xDBFF)
    W2 = 0xDC00 | v & 0x3FF     (low surrogate,  0xDC00..0xDFFF)

and decoding is the exact inverse. The variants differ only in the byte
order applied when units are serialized to bytes: `UTF16LE` little-endian,
`UTF16BE` and the unlabelled `UTF16` big-endian. The codecs themselves
never see bytes.

Surrogate code points (U+D800..U+DFFF) are encoded as the single unit of
the same value, as every other BMP value is. Decoding such a lone unit is
still malformed, so those values do not round-trip.
"""

from typing import ClassVar

from scalarcodec.interfaces.codec import (
    MAX_CODEPOINT,
    ByteOrder,
    Codec,
    CodePoint,
    Encoding,
)
from scalarcodec.interfaces.errors import MalformedSequenceError, OutOfRangeError
from scalarcodec.interfaces.stream import InputStream, OutputStream

HIGH_SURROGATE_MIN = 0xD800
HIGH_SURROGATE_MAX = 0xDBFF
LOW_SURROGATE_MIN = 0xDC00
LOW_SURROGATE_MAX = 0xDFFF
SUPPLEMENTARY_OFFSET = 0x10000
SURROGATE_PAYLOAD_MASK = 0x3FF


def is_high_surrogate(unit: int) -> bool:
    """Return True if ``unit`` is in 0xD800..0xDBFF."""
    return HIGH_SURROGATE_MIN <= unit <= HIGH_SURROGATE_MAX


def is_low_surrogate(unit: int) -> bool:
    """Return True if ``unit`` is in 0xDC00..0xDFFF."""
    return LOW_SURROGATE_MIN <= unit <= LOW_SURROGATE_MAX


class UTF16(Codec):
    """Surrogate-aware UTF-16 codec, big-endian when serialized."""

    encoding: ClassVar[Encoding] = Encoding.UTF16
    unit_bits = 16
    byteorder: ClassVar[ByteOrder] = "big"
    max_units = 2

    @classmethod
    def encode(cls, output: OutputStream, codepoint: CodePoint) -> None:  # type: ignore[override]
        if codepoint < 0 or codepoint > MAX_CODEPOINT:
            raise OutOfRangeError(codepoint, encoding=cls.encoding.value)

        if codepoint < SUPPLEMENTARY_OFFSET:
            output.put(codepoint)
            return

        shifted = codepoint - SUPPLEMENTARY_OFFSET
        output.put(HIGH_SURROGATE_MIN | shifted >> 10)
        output.put(LOW_SURROGATE_MIN | shifted & SURROGATE_PAYLOAD_MASK)

    @staticmethod
    def can_start_sequence(unit: int) -> bool:
        """Return True unless ``unit`` is a low surrogate."""
        return not is_low_surrogate(unit)

    @classmethod
    def decode(cls, input_: InputStream) -> CodePoint:  # type: ignore[override]
        w1 = input_.take()
        if not HIGH_SURROGATE_MIN <= w1 <= LOW_SURROGATE_MAX:
            return w1

        if not is_high_surrogate(w1):
            raise MalformedSequenceError(
                [w1], "unpaired low surrogate", encoding=cls.encoding.value
            )

        w2 = input_.take()
        if not is_low_surrogate(w2):
            raise MalformedSequenceError(
                [w1, w2],
                "high surrogate not followed by a low surrogate",
                encoding=cls.encoding.value,
            )

        return SUPPLEMENTARY_OFFSET + (
            (w1 & SURROGATE_PAYLOAD_MASK) << 10 | w2 & SURROGATE_PAYLOAD_MASK
        )


class UTF16LE(UTF16):
    """UTF-16 serialized little-endian."""

    encoding = Encoding.UTF16LE
    byteorder = "little"


class UTF16BE(UTF16):
    """UTF-16 serialized big-endian."""

    encoding = Encoding.UTF16BE
    byteorder = "big"
