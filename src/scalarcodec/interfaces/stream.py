"""Stream contract consumed by the codecs.

A codec never touches buffers directly. It pulls one code unit at a time from
an `InputStream` and pushes one code unit at a time to an `OutputStream`.
Both are structural protocols: any object exposing the method qualifies,
no subclassing required.

What happens at end-of-stream is the stream's business. The adapters in
`scalarcodec.adapters` raise `TruncatedSequenceError`; codecs let it
propagate untouched.
"""

from typing import Protocol, runtime_checkable

# pylint: disable=too-few-public-methods


@runtime_checkable
class InputStream(Protocol):
    """Sequential source of code units."""

    def take(self) -> int:
        """Return the next code unit and advance by exactly one unit."""


@runtime_checkable
class OutputStream(Protocol):
    """Sequential sink of code units."""

    def put(self, unit: int) -> None:
        """Append one code unit."""


@runtime_checkable
class ExhaustibleInputStream(InputStream, Protocol):
    """Input stream that can tell whether another unit is available.

    Needed only by callers that decode "until the end"; the codecs themselves
    never ask.
    """

    @property
    def exhausted(self) -> bool:
        """True when no further unit can be taken."""
