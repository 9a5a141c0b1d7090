"""Concrete streams satisfying `scalarcodec.interfaces.stream`."""

from .binary import BinaryInputStream, BinaryOutputStream, open_input, open_output
from .memory import MemoryInputStream, MemoryOutputStream

__all__ = [
    "BinaryInputStream",
    "BinaryOutputStream",
    "MemoryInputStream",
    "MemoryOutputStream",
    "open_input",
    "open_output",
]
