"""UTF-8 codec (RFC 3629).

Code points map to one to four bytes:

    U+0000..U+007F      0xxxxxxx
    U+0080..U+07FF      110xxxxx 10xxxxxx
    U+0800..U+FFFF      1110xxxx 10xxxxxx 10xxxxxx
    U+10000..U+10FFFF   11110xxx 10xxxxxx 10xxxxxx 10xxxxxx

Decoding rejects overlong forms and stops at the first continuation byte
that does not match ``10xxxxxx``; that byte is consumed, nothing after it is.
Surrogate code points are encoded and decoded like any other 3-byte value.
"""

from scalarcodec.interfaces.codec import MAX_CODEPOINT, Codec, CodePoint, Encoding
from scalarcodec.interfaces.errors import MalformedSequenceError, OutOfRangeError
from scalarcodec.interfaces.stream import InputStream, OutputStream

CONTINUATION_MASK = 0xC0
CONTINUATION_TAG = 0x80
PAYLOAD_MASK = 0x3F

# (lead mask, lead tag, payload mask, smallest code point for this length)
_LEADS = (
    (0x80, 0x00, 0x7F, 0x0),
    (0xE0, 0xC0, 0x1F, 0x80),
    (0xF0, 0xE0, 0x0F, 0x800),
    (0xF8, 0xF0, 0x07, 0x10000),
)

_LABEL = Encoding.UTF8.value


class UTF8(Codec):
    """Byte-oriented UTF-8 codec."""

    encoding = Encoding.UTF8
    unit_bits = 8
    max_units = 4

    @staticmethod
    def encode(output: OutputStream, codepoint: CodePoint) -> None:
        if codepoint < 0 or codepoint > MAX_CODEPOINT:
            raise OutOfRangeError(codepoint, encoding=_LABEL)

        if codepoint > 0xFFFF:
            output.put(0xF0 | codepoint >> 18)
            output.put(CONTINUATION_TAG | (codepoint >> 12) & PAYLOAD_MASK)
            output.put(CONTINUATION_TAG | (codepoint >> 6) & PAYLOAD_MASK)
            output.put(CONTINUATION_TAG | codepoint & PAYLOAD_MASK)
        elif codepoint > 0x7FF:
            output.put(0xE0 | codepoint >> 12)
            output.put(CONTINUATION_TAG | (codepoint >> 6) & PAYLOAD_MASK)
            output.put(CONTINUATION_TAG | codepoint & PAYLOAD_MASK)
        elif codepoint > 0x7F:
            output.put(0xC0 | codepoint >> 6)
            output.put(CONTINUATION_TAG | codepoint & PAYLOAD_MASK)
        else:
            output.put(codepoint)

    @staticmethod
    def can_start_sequence(unit: int) -> bool:
        """Return True unless ``unit`` is a continuation byte."""
        return unit & CONTINUATION_MASK != CONTINUATION_TAG

    @staticmethod
    def sequence_length(lead: int) -> int:
        """Return the number of bytes announced by a leading byte.

        Args:
            lead: The first byte of a sequence.

        Returns:
            int: 1 to 4.

        Raises:
            MalformedSequenceError: If ``lead`` is a continuation byte or one
                of ``0xF8..0xFF``, none of which may start a sequence.
        """
        for length, (mask, tag, _, _) in enumerate(_LEADS, start=1):
            if lead & mask == tag:
                return length
        reason = (
            "unexpected continuation byte"
            if lead & CONTINUATION_MASK == CONTINUATION_TAG
            else "invalid leading byte"
        )
        raise MalformedSequenceError([lead], reason, encoding=_LABEL)

    @staticmethod
    def decode(input_: InputStream) -> CodePoint:
        lead = input_.take()
        length = UTF8.sequence_length(lead)
        _, _, payload_mask, minimum = _LEADS[length - 1]

        consumed = [lead]
        codepoint = lead & payload_mask
        for _ in range(length - 1):
            unit = input_.take()
            consumed.append(unit)
            if unit & CONTINUATION_MASK != CONTINUATION_TAG:
                raise MalformedSequenceError(
                    consumed, "expected continuation byte 10xxxxxx", encoding=_LABEL
                )
            codepoint = codepoint << 6 | unit & PAYLOAD_MASK

        if codepoint < minimum:
            raise MalformedSequenceError(
                consumed, f"overlong encoding of U+{codepoint:04X}", encoding=_LABEL
            )
        if codepoint > MAX_CODEPOINT:
            raise OutOfRangeError(codepoint, encoding=_LABEL)
        return codepoint
