"""Tests for CLI main app."""

from typer.testing import CliRunner

from symsearch import __version__
from symsearch.cli.main import app

runner = CliRunner()


def test_cli_help():
    """Test that CLI help works."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Fuzzy symbol search" in result.output


def test_cli_version():
    """Test version flag."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"symsearch version {__version__}" in result.output


def test_commands_registered():
    """Test all subcommands are listed in help."""
    result = runner.invoke(app, ["--help"])
    for command in ["search", "interactive", "config-show", "config-init"]:
        assert command in result.output


def test_search_help():
    result = runner.invoke(app, ["search", "--help"])
    assert result.exit_code == 0
    assert "--package" in result.output
