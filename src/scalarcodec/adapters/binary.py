"""Unit streams over binary file-like objects.

`BinaryInputStream` and `BinaryOutputStream` move one code unit per call
between a codec and a ``BinaryIO`` (open file, socket ``makefile("rb")``,
``io.BytesIO``...). Units wider than a byte are (de)serialized in the
stream's byte order, which is where the UTF-16 variants' labels take
effect.

The streams neither buffer nor close the underlying object; the caller owns
it. Reads start at the object's *current position*.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from scalarcodec.codecs import get_codec
from scalarcodec.interfaces.codec import ByteOrder, Encoding
from scalarcodec.interfaces.errors import TruncatedSequenceError

from .memory import check_unit, check_unit_bits

__all__ = ["BinaryInputStream", "BinaryOutputStream", "open_input", "open_output"]

logger = logging.getLogger(__name__)


class BinaryInputStream:
    """Reads fixed-width code units from a binary file-like object.

    Args:
        fileobj: Source opened in binary mode.
        unit_bits: Width of one unit (8 or 16).
        byteorder: Byte order of multi-byte units.
    """

    def __init__(
        self, fileobj: BinaryIO, unit_bits: int = 8, byteorder: ByteOrder = "big"
    ) -> None:
        self._fileobj = fileobj
        self._width = check_unit_bits(unit_bits) // 8
        self._byteorder: ByteOrder = byteorder
        self._position = 0
        self._pending = b""

    @property
    def position(self) -> int:
        """Number of units consumed so far."""
        return self._position

    @property
    def exhausted(self) -> bool:
        """True when the underlying object has no further bytes.

        Peeks one byte ahead and keeps it for the next `take()`.
        """
        if not self._pending:
            self._pending = self._fileobj.read(1)
        return not self._pending

    def take(self) -> int:
        raw = self._pending + self._fileobj.read(self._width - len(self._pending))
        self._pending = b""
        if len(raw) < self._width:
            if raw:
                logger.debug(
                    "Dangling %d byte(s) at unit %d: %r", len(raw), self._position, raw
                )
            raise TruncatedSequenceError(self._position)
        self._position += 1
        return int.from_bytes(raw, self._byteorder)


class BinaryOutputStream:
    """Writes fixed-width code units to a binary file-like object."""

    def __init__(
        self, fileobj: BinaryIO, unit_bits: int = 8, byteorder: ByteOrder = "big"
    ) -> None:
        self._fileobj = fileobj
        self._unit_bits = check_unit_bits(unit_bits)
        self._byteorder: ByteOrder = byteorder

    def put(self, unit: int) -> None:
        check_unit(unit, self._unit_bits)
        self._fileobj.write(unit.to_bytes(self._unit_bits // 8, self._byteorder))


def open_input(fileobj: BinaryIO, encoding: Encoding | str) -> BinaryInputStream:
    """Wrap ``fileobj`` in an input stream shaped for ``encoding``.

    Raises:
        UnknownEncodingError: If ``encoding`` is an unknown label.
    """
    codec = get_codec(encoding)
    return BinaryInputStream(fileobj, codec.unit_bits, codec.byteorder)


def open_output(fileobj: BinaryIO, encoding: Encoding | str) -> BinaryOutputStream:
    """Wrap ``fileobj`` in an output stream shaped for ``encoding``.

    Raises:
        UnknownEncodingError: If ``encoding`` is an unknown label.
    """
    codec = get_codec(encoding)
    return BinaryOutputStream(fileobj, codec.unit_bits, codec.byteorder)
