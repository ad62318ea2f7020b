"""Tests for CLI main app."""

from typer.testing import CliRunner
from jasssearch import __version__
from jasssearch.cli.main import app

runner = CliRunner()


def test_cli_help():
    """Test that CLI help works."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Fuzzy search tool" in result.stdout


def test_cli_version():
    """Test the version flag."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout
