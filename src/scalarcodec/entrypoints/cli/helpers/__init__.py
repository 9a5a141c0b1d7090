"""Helpers shared by the CLI commands."""

from .log_level_parser import parse_log_level
from .messages import error
from .options import parse_encoding, parse_units

__all__ = [
    "error",
    "parse_encoding",
    "parse_log_level",
    "parse_units",
]
