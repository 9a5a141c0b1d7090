"""In-memory unit streams.

Exports
-------
- MemoryInputStream: reads units from any sequence (``bytes``, ``list[int]``).
- MemoryOutputStream: collects units into a list.

Both streams know their unit width and refuse values that do not fit it, so
a codec bug that would emit a 17-bit "unit" fails loudly instead of being
silently truncated. Neither stream is thread-safe; use one per caller.

Typical usage
-------------
    out = MemoryOutputStream(unit_bits=16)
    UTF16.encode(out, 0x1F600)          # out.units == [0xD83D, 0xDE00]
    UTF16.decode(MemoryInputStream(out.units, unit_bits=16))  # 0x1F600
"""

from __future__ import annotations

from collections.abc import Sequence

from scalarcodec.interfaces.codec import ByteOrder
from scalarcodec.interfaces.errors import TruncatedSequenceError

__all__ = ["MemoryInputStream", "MemoryOutputStream"]

SUPPORTED_UNIT_BITS = (8, 16)


def check_unit_bits(unit_bits: int) -> int:
    """Validate a unit width and return it unchanged."""
    if unit_bits not in SUPPORTED_UNIT_BITS:
        raise ValueError(f"unit_bits must be one of {SUPPORTED_UNIT_BITS}, got {unit_bits}")
    return unit_bits


def check_unit(unit: int, unit_bits: int) -> int:
    """Return ``unit`` if it fits in ``unit_bits`` bits, else raise ValueError."""
    if not 0 <= unit < 1 << unit_bits:
        raise ValueError(f"{unit:#x} does not fit in a {unit_bits}-bit code unit")
    return unit


class MemoryInputStream:
    """Sequential reader over an in-memory sequence of code units.

    Args:
        units: The units to read. Not copied; do not mutate while reading.
        unit_bits: Width of one unit (8 or 16).

    Raises:
        TruncatedSequenceError: From `take()` once every unit has been read.
        ValueError: From `take()` if a unit does not fit the declared width.
    """

    def __init__(self, units: Sequence[int], unit_bits: int = 8) -> None:
        self._units = units
        self._unit_bits = check_unit_bits(unit_bits)
        self._position = 0

    @property
    def position(self) -> int:
        """Number of units consumed so far."""
        return self._position

    @property
    def exhausted(self) -> bool:
        """True once every unit has been consumed."""
        return self._position >= len(self._units)

    def take(self) -> int:
        if self.exhausted:
            raise TruncatedSequenceError(self._position)
        unit = check_unit(self._units[self._position], self._unit_bits)
        self._position += 1
        return unit


class MemoryOutputStream:
    """Collects code units written by a codec."""

    def __init__(self, unit_bits: int = 8) -> None:
        self._unit_bits = check_unit_bits(unit_bits)
        self.units: list[int] = []

    def put(self, unit: int) -> None:
        self.units.append(check_unit(unit, self._unit_bits))

    def to_bytes(self, byteorder: ByteOrder = "big") -> bytes:
        """Serialize the collected units, each in ``byteorder``."""
        if self._unit_bits == 8:
            return bytes(self.units)
        width = self._unit_bits // 8
        return b"".join(unit.to_bytes(width, byteorder) for unit in self.units)

    def clear(self) -> None:
        """Drop every collected unit."""
        self.units.clear()

    def __len__(self) -> int:
        return len(self.units)
