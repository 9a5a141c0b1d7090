"""7-bit ASCII codec.

Values are masked to their low seven bits in both directions; nothing is
ever rejected. ``encode(200)`` writes ``0x48`` (``"H"``).
"""

from scalarcodec.interfaces.codec import Codec, CodePoint, Encoding
from scalarcodec.interfaces.stream import InputStream, OutputStream

ASCII_MASK = 0x7F


class ASCII(Codec):
    """Masking 7-bit ASCII codec."""

    encoding = Encoding.ASCII
    unit_bits = 8

    @staticmethod
    def encode(output: OutputStream, codepoint: CodePoint) -> None:
        output.put(codepoint & ASCII_MASK)

    @staticmethod
    def decode(input_: InputStream) -> CodePoint:
        return input_.take() & ASCII_MASK
