"""Codec contract and encoding tag."""

from __future__ import annotations

import abc
import re
from enum import Enum
from typing import ClassVar, Literal, TypeAlias

from .errors import UnknownEncodingError
from .stream import InputStream, OutputStream

CodePoint: TypeAlias = int
ByteOrder: TypeAlias = Literal["little", "big"]

MAX_CODEPOINT = 0x10FFFF

_LABEL_NOISE = re.compile(r"[-_\s]")


class Encoding(Enum):
    """Tag selecting one codec variant for the lifetime of a stream."""

    UTF8 = "utf-8"
    UTF16LE = "utf-16-le"
    UTF16BE = "utf-16-be"
    UTF16 = "utf-16"
    ASCII = "ascii"

    @classmethod
    def parse(cls, label: Encoding | str) -> Encoding:
        """Resolve an encoding from a tag or a conventional label.

        Labels are matched case-insensitively; dashes, underscores and
        whitespace are ignored, so ``"UTF_16LE"`` and ``"utf-16-le"`` are
        the same encoding.

        Args:
            label: An `Encoding` member (returned as-is) or a label string.

        Returns:
            Encoding: The matching tag.

        Raises:
            UnknownEncodingError: If the label names no supported encoding.
        """
        if isinstance(label, Encoding):
            return label
        wanted = _LABEL_NOISE.sub("", str(label)).lower()
        for member in cls:
            if wanted in (_LABEL_NOISE.sub("", member.value), member.name.lower()):
                return member
        raise UnknownEncodingError(str(label))

    def __str__(self) -> str:
        return self.value


class Codec(abc.ABC):
    """Stateless strategy converting code points to and from code units.

    Subclasses are used as classes, never instantiated: operations are static
    or class methods and per-variant data lives in class attributes.

    Attributes:
        encoding: The tag this codec implements.
        unit_bits: Width of one code unit (8 or 16).
        byteorder: Order used when a multi-byte unit is serialized to bytes.
        max_units: Upper bound of units produced or consumed per code point.
    """

    encoding: ClassVar[Encoding]
    unit_bits: ClassVar[int]
    byteorder: ClassVar[ByteOrder] = "big"
    max_units: ClassVar[int] = 1

    @staticmethod
    @abc.abstractmethod
    def encode(output: OutputStream, codepoint: CodePoint) -> None:
        """Append the code units of one code point to ``output``.

        Raises:
            OutOfRangeError: If the code point cannot be represented.
        """

    @staticmethod
    @abc.abstractmethod
    def decode(input_: InputStream) -> CodePoint:
        """Consume the code units of exactly one code point from ``input_``.

        Raises:
            MalformedSequenceError: If the units do not form a valid sequence.
            TruncatedSequenceError: Propagated from the stream when it runs dry.
        """

    @classmethod
    def unit_bytes(cls) -> int:
        """Return the number of bytes one code unit occupies."""
        return cls.unit_bits // 8

    @staticmethod
    def can_start_sequence(unit: int) -> bool:  # pylint: disable=unused-argument
        """Return True if ``unit`` may be the first unit of a sequence.

        Used to resynchronize after a malformed sequence: a unit that broke
        the previous sequence is retried as the start of the next one.
        """
        return True
