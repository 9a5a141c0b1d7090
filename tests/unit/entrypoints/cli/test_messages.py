"""Unit tests for the CLI notice helpers."""

import io

import click
import pytest

from scalarcodec.entrypoints.cli.helpers import messages


class FakeStderr(io.StringIO):
    """Text stream with a controllable encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        """Declared encoding."""
        return self._encoding


@pytest.mark.parametrize(
    ("encoding", "glyph"),
    [("utf-8", "❌"), ("ascii", "[X]")],
)
def test_glyph_follows_stderr_encoding(monkeypatch, encoding, glyph):
    """Emoji when stderr can encode it, ASCII otherwise."""
    fake = FakeStderr(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: fake)
    assert messages.error_glyph() == glyph


def test_error_goes_to_stderr(capsys):
    """Notices never pollute stdout."""
    messages.error("Malformed input")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Malformed input" in captured.err
