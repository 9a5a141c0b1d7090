"""Styled one-line notices for the CLI.

Notices go to stderr so decoded text and encoded bytes on stdout stay clean
for pipes. Glyphs fall back to ASCII when stderr cannot encode them.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if stderr's encoding can represent ``character``."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _supports_character(emoji) else fallback


def error_glyph() -> str:
    """Return "❌" or "[X]"."""
    return _glyph("❌", "[X]")


def error(msg: str) -> None:
    """Print a bold red error line to stderr."""
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
