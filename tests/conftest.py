"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from postnl.cli import cli


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with optional binary input.

    Usage:
        result = invoke(b"abc")
        assert result.stdout_bytes == b"abc\\n"
    """

    def _invoke(input_data=b"", args=None):
        return cli_runner.invoke(cli, args or [], input=input_data)

    return _invoke


@pytest.fixture
def all_bytes():
    """Every byte value 0x00-0xFF, in order."""
    return bytes(range(256))
