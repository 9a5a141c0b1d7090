"""Exceptions raised by codecs and streams."""

from collections.abc import Sequence
from enum import Enum


class ErrorKind(Enum):
    """Coarse classification of codec failures."""

    MALFORMED = "malformed"
    TRUNCATED = "truncated"
    OUT_OF_RANGE = "out-of-range"
    UNKNOWN_ENCODING = "unknown-encoding"


class CodecError(Exception):
    """Base class for all codec errors.

    Attributes:
        encoding (str | None): Label of the encoding involved, when known.
    """

    kind: ErrorKind

    def __init__(self, message: str, encoding: str | None = None) -> None:
        super().__init__(message)
        self.encoding = encoding


class MalformedSequenceError(CodecError):
    """A code unit sequence breaks the encoding's bit patterns.

    Attributes:
        units (tuple[int, ...]): The units consumed for this sequence, the
            offending unit last.
        reason (str): What was wrong with the sequence.
    """

    kind = ErrorKind.MALFORMED

    def __init__(
        self, units: Sequence[int], reason: str, encoding: str | None = None
    ) -> None:
        rendered = " ".join(f"{u:#06x}" if u > 0xFF else f"{u:#04x}" for u in units)
        label = f"{encoding} " if encoding else ""
        super().__init__(
            f"Malformed {label}sequence [{rendered}]: {reason}", encoding=encoding
        )
        self.units = tuple(units)
        self.reason = reason


class TruncatedSequenceError(CodecError):
    """The stream ended before a required code unit could be read.

    Attributes:
        position (int | None): Unit offset at which the read was attempted.
    """

    kind = ErrorKind.TRUNCATED

    def __init__(self, position: int | None = None, encoding: str | None = None):
        where = f" at unit {position}" if position is not None else ""
        super().__init__(f"Stream exhausted{where}", encoding=encoding)
        self.position = position


class OutOfRangeError(CodecError):
    """A code point lies outside the range the encoding can represent.

    Attributes:
        codepoint (int): The rejected value.
    """

    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, codepoint: int, encoding: str | None = None) -> None:
        label = f" in {encoding}" if encoding else ""
        super().__init__(
            f"Code point {codepoint:#x} is not encodable{label}", encoding=encoding
        )
        self.codepoint = codepoint


class UnknownEncodingError(CodecError, ValueError):
    """Raised when an encoding label matches no supported codec."""

    kind = ErrorKind.UNKNOWN_ENCODING

    def __init__(self, label: str) -> None:
        super().__init__(f"Unknown encoding '{label}'", encoding=label)
        self.label = label
