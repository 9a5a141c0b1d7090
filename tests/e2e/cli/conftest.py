"""Fixtures for end-to-end tests of the ``scalarcodec`` command."""

import logging

import pytest
from click.testing import CliRunner

from scalarcodec import config

# pylint: disable=redefined-outer-name

TOUCHED_LOGGERS = ("scalarcodec", "click_extra")


@pytest.fixture
def runner(monkeypatch):
    """Return a CliRunner, restoring the logging setup each invocation replaces.

    The command installs its own root handlers and per-logger levels; they
    are put back afterwards so later tests see the original configuration.
    No default encoding leaks in from the host environment.
    """
    monkeypatch.delenv(config.DEFAULT_ENCODING_ENVVAR, raising=False)
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    saved_levels = {name: logging.getLogger(name).level for name in TOUCHED_LOGGERS}
    yield CliRunner()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    for name, level in saved_levels.items():
        logging.getLogger(name).setLevel(level)


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield
