"""``scalarcodec encode|decode|inspect`` commands.

Machine-readable results (units, decoded text, raw bytes) go to stdout;
failures are reported on stderr and exit with status 1.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

import click

from scalarcodec.adapters import open_input
from scalarcodec.codecs import get_codec
from scalarcodec.interfaces.codec import Encoding
from scalarcodec.interfaces.errors import CodecError
from scalarcodec.text import (
    ERROR_POLICIES,
    ErrorPolicy,
    decode_units,
    encode_bytes,
    encode_text,
    iter_codepoints,
)

from .helpers import error, parse_encoding, parse_units

logger = logging.getLogger(__name__)

encoding_option = click.option(
    "-e",
    "--encoding",
    callback=parse_encoding,
    default=None,
    metavar="ENCODING",
    help=(
        "utf-8, utf-16, utf-16-le, utf-16-be or ascii. "
        "Defaults to SCALARCODEC_DEFAULT_ENCODING, else utf-8."
    ),
)


def format_units(units: list[int], encoding: Encoding) -> str:
    """Render units as upper-case hex, zero-padded to the unit width."""
    digits = get_codec(encoding).unit_bits // 4
    return " ".join(f"{unit:0{digits}X}" for unit in units)


def printable(text: str) -> str:
    """Escape lone surrogates as ``\\udXXX``; no text stream can encode them."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


class CodecFailure(click.ClickException):
    """A codec error, shown as a styled error line (exit status 1)."""

    def show(self, file=None) -> None:
        error(self.format_message())


def _fail(exc: CodecError) -> CodecFailure:
    logger.debug("Codec failure details", exc_info=exc)
    logger.warning("Stopped on %s input", exc.kind.value)
    return CodecFailure(str(exc))


@click.command()
@click.argument("text")
@encoding_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["hex", "bytes"], case_sensitive=False),
    default="hex",
    show_default=True,
    help="hex: code units as text. bytes: raw serialized bytes.",
)
def encode(text: str, encoding: Encoding, output_format: str) -> None:
    """Encode TEXT and print its code units."""
    logger.info("Encoding %d character(s) as %s", len(text), encoding)
    if output_format == "bytes":
        click.get_binary_stream("stdout").write(encode_bytes(text, encoding))
    else:
        click.echo(format_units(encode_text(text, encoding), encoding))


@click.command()
@click.argument("units", nargs=-1, callback=parse_units)
@encoding_option
@click.option(
    "-i",
    "--input",
    "input_file",
    type=click.File("rb"),
    default=None,
    help="Decode the serialized bytes of this file instead of UNITS.",
)
@click.option(
    "--errors",
    type=click.Choice(ERROR_POLICIES),
    default="strict",
    show_default=True,
    help="strict: stop at the first bad sequence. replace: substitute U+FFFD.",
)
def decode(
    units: list[int],
    encoding: Encoding,
    input_file: BinaryIO | None,
    errors: ErrorPolicy,
) -> None:
    """Decode hexadecimal code UNITS (or --input) and print the text."""
    if input_file is not None and units:
        raise click.UsageError("Give either UNITS or --input, not both.")
    if input_file is None and not units:
        raise click.UsageError("Nothing to decode: give UNITS or --input.")

    limit = 1 << get_codec(encoding).unit_bits
    if too_wide := [u for u in units if u >= limit]:
        raise click.BadParameter(
            f"{too_wide[0]:#x} does not fit a {encoding} code unit",
            param_hint="UNITS",
        )

    try:
        if input_file is not None:
            stream = open_input(input_file, encoding)
            text = "".join(map(chr, iter_codepoints(stream, encoding, errors)))
        else:
            text = decode_units(units, encoding, errors)
    except CodecError as exc:
        raise _fail(exc) from exc
    click.echo(printable(text))


@click.command()
@click.argument("text")
@encoding_option
def inspect(text: str, encoding: Encoding) -> None:
    """Print each code point of TEXT with its code units."""
    for char in text:
        units = encode_text(char, encoding)
        click.echo(f"U+{ord(char):04X}\t{format_units(units, encoding)}")
