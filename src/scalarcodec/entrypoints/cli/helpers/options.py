"""Click callbacks for codec-related options and arguments."""

import re

import click

from scalarcodec import config
from scalarcodec.interfaces.codec import Encoding
from scalarcodec.interfaces.errors import UnknownEncodingError

_SEPARATORS = re.compile(r"[,\s]+")
_HEX_UNIT = re.compile(r"(?:0x|U\+)?([0-9a-f]+)", re.IGNORECASE)


def parse_encoding(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | None,
) -> Encoding:
    """Resolve an ``--encoding`` value, falling back to the configured default.

    Raises:
        click.BadParameter: If the label (or the configured default) is unknown.
    """
    if value is None:
        try:
            return config.get_default_encoding()
        except config.InvalidDefaultEncodingError as exc:
            raise click.BadParameter(str(exc)) from exc
    try:
        return Encoding.parse(value)
    except UnknownEncodingError as exc:
        raise click.BadParameter(str(exc)) from exc


def parse_units(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> list[int]:
    """Parse hexadecimal code units such as ``"E2 82 AC"`` or ``0xD83D,0xDE00``.

    Raises:
        click.BadParameter: If an item is not a hexadecimal number.
    """
    chunks = [value] if isinstance(value, str) else list(value)
    units: list[int] = []
    for chunk in chunks:
        for item in _SEPARATORS.split(chunk):
            if not item:
                continue
            if (match := _HEX_UNIT.fullmatch(item)) is None:
                raise click.BadParameter(f"Not a hexadecimal code unit: {item!r}")
            units.append(int(match.group(1), 16))
    return units
