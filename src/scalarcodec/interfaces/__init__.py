"""Interfaces (codec boundary) for SCALARCODEC.

Defines framework-free contracts: the stream protocols every codec reads
from and writes to, the codec contract and its `Encoding` tag, and the error
taxonomy shared by codecs, adapters and callers.

Dependency rule: this package is independent—do not import from any other
`scalarcodec.*` modules. It may be imported by `scalarcodec.codecs`,
`scalarcodec.adapters`, `scalarcodec.text` and the entrypoints.
"""

from .codec import Codec, CodePoint, Encoding
from .errors import (
    CodecError,
    ErrorKind,
    MalformedSequenceError,
    OutOfRangeError,
    TruncatedSequenceError,
    UnknownEncodingError,
)
from .stream import ExhaustibleInputStream, InputStream, OutputStream

__all__ = [
    "Codec",
    "CodePoint",
    "CodecError",
    "Encoding",
    "ErrorKind",
    "ExhaustibleInputStream",
    "InputStream",
    "MalformedSequenceError",
    "OutOfRangeError",
    "OutputStream",
    "TruncatedSequenceError",
    "UnknownEncodingError",
]
