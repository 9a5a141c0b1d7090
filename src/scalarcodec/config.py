"""Configuration utilities for SCALARCODEC.

This module centralizes small helpers and constants related to configuration.
"""

import os

from scalarcodec.interfaces.codec import Encoding
from scalarcodec.interfaces.errors import UnknownEncodingError

ENV_PREFIX = "SCALARCODEC"  # pragma: no mutate
DEFAULT_ENCODING_ENVVAR = f"{ENV_PREFIX}_DEFAULT_ENCODING"  # pragma: no mutate
FALLBACK_ENCODING = Encoding.UTF8


class InvalidDefaultEncodingError(Exception):
    """Raised when SCALARCODEC_DEFAULT_ENCODING names no supported encoding."""

    def __init__(self, label: str) -> None:
        super().__init__(
            f"{DEFAULT_ENCODING_ENVVAR}='{label}' is not a supported encoding; "
            f"choose one of: {', '.join(e.value for e in Encoding)}"
        )
        self.label = label


def get_default_encoding() -> Encoding:
    """Get the default encoding from the environment.

    Returns:
        The encoding named by `SCALARCODEC_DEFAULT_ENCODING`, or UTF-8 when
        the variable is unset or empty.

    Raises:
        InvalidDefaultEncodingError: If the variable names an unknown encoding.
    """
    if not (label := os.environ.get(DEFAULT_ENCODING_ENVVAR)):
        return FALLBACK_ENCODING
    try:
        return Encoding.parse(label)
    except UnknownEncodingError as exc:
        raise InvalidDefaultEncodingError(label) from exc
