"""Fixtures for stream adapter contract tests.

Provided fixtures
-----------------
- **stream_factory**: Parametrized over every adapter kind and unit width.
  Returns a `StreamFactory` whose `writer()` gives a fresh output stream and
  whose `reader()` gives an input stream over everything written so far.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field

import pytest

from scalarcodec.adapters import (
    BinaryInputStream,
    BinaryOutputStream,
    MemoryInputStream,
    MemoryOutputStream,
)


@dataclass
class StreamFactory:
    """Pairs an output stream with readers over what it wrote."""

    kind: str
    unit_bits: int
    byteorder: str = "big"
    _buffer: io.BytesIO = field(default_factory=io.BytesIO)
    _memory: MemoryOutputStream | None = None

    def writer(self):
        """Return the output stream (memory or binary)."""
        match self.kind:
            case "memory":
                self._memory = MemoryOutputStream(unit_bits=self.unit_bits)
                return self._memory
            case "binary":
                return BinaryOutputStream(self._buffer, self.unit_bits, self.byteorder)
            case _:
                raise ValueError(f"unknown stream kind: {self.kind}")

    def reader(self):
        """Return an input stream over the units written so far."""
        match self.kind:
            case "memory":
                units = self._memory.units if self._memory else []
                return MemoryInputStream(list(units), unit_bits=self.unit_bits)
            case "binary":
                return BinaryInputStream(
                    io.BytesIO(self._buffer.getvalue()), self.unit_bits, self.byteorder
                )
            case _:
                raise ValueError(f"unknown stream kind: {self.kind}")


@pytest.fixture(
    params=[
        ("memory", 8, "big"),
        ("memory", 16, "big"),
        ("binary", 8, "big"),
        ("binary", 16, "big"),
        ("binary", 16, "little"),
    ],
    ids=lambda p: f"{p[0]}-{p[1]}bit-{p[2]}",
)
def stream_factory(request: pytest.FixtureRequest) -> StreamFactory:
    """Return a fresh factory for the requested adapter kind."""
    kind, unit_bits, byteorder = request.param
    return StreamFactory(kind=kind, unit_bits=unit_bits, byteorder=byteorder)
