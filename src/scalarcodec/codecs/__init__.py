"""Codec variants and the encoding → codec registry.

Typical usage
-------------
    codec = get_codec("utf-8")
    out = MemoryOutputStream()
    codec.encode(out, 0x20AC)          # out.units == [0xE2, 0x82, 0xAC]
"""

from scalarcodec.interfaces.codec import Codec, Encoding

from .ascii import ASCII
from .utf8 import UTF8
from .utf16 import UTF16, UTF16BE, UTF16LE

__all__ = [
    "ASCII",
    "CODECS",
    "UTF16",
    "UTF16BE",
    "UTF16LE",
    "UTF8",
    "get_codec",
]

CODECS: dict[Encoding, type[Codec]] = {
    Encoding.UTF8: UTF8,
    Encoding.UTF16LE: UTF16LE,
    Encoding.UTF16BE: UTF16BE,
    Encoding.UTF16: UTF16,
    Encoding.ASCII: ASCII,
}


def get_codec(encoding: Encoding | str) -> type[Codec]:
    """Return the codec class for an encoding tag or label.

    Args:
        encoding: An `Encoding` member or a label such as ``"utf-16-le"``.

    Returns:
        type[Codec]: The (never instantiated) codec class.

    Raises:
        UnknownEncodingError: If a label names no supported encoding.
    """
    return CODECS[Encoding.parse(encoding)]
