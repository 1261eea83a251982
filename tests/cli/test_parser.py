"""Tests for CLI argument parsing."""

import pytest

from desktop_entry.cli.parser import CLIParser
from desktop_entry.config import Settings


@pytest.fixture
def parser() -> CLIParser:
    """Return a parser with default settings."""
    return CLIParser(Settings())


def test_validate_takes_several_files(parser: CLIParser) -> None:
    args = parser.parse_args(["validate", "a.desktop", "b.desktop"])

    assert args.command == "validate"
    assert args.files == ["a.desktop", "b.desktop"]
    assert args.strict is False


def test_validate_requires_a_file(parser: CLIParser) -> None:
    with pytest.raises(SystemExit):
        parser.parse_args(["validate"])


def test_show_locale(parser: CLIParser) -> None:
    args = parser.parse_args(["show", "app.desktop", "--locale", "de_DE"])

    assert args.file == "app.desktop"
    assert args.locale == "de_DE"


def test_show_without_locale(parser: CLIParser) -> None:
    assert parser.parse_args(["show", "app.desktop"]).locale is None


def test_format_write_flag(parser: CLIParser) -> None:
    assert parser.parse_args(["format", "a.desktop"]).write is False
    assert parser.parse_args(["format", "a.desktop", "--write"]).write


def test_global_strict(parser: CLIParser) -> None:
    args = parser.parse_args(["--strict", "dump", "a.desktop"])

    assert args.strict is True
    assert args.command == "dump"


def test_strict_default_from_settings() -> None:
    args = CLIParser(Settings(strict=True)).parse_args(["dump", "a.desktop"])

    assert args.strict is True


def test_version_without_command(parser: CLIParser) -> None:
    args = parser.parse_args(["--version"])

    assert args.version is True
    assert args.command is None


def test_config_requires_an_action(parser: CLIParser) -> None:
    with pytest.raises(SystemExit):
        parser.parse_args(["config"])
    with pytest.raises(SystemExit):
        parser.parse_args(["config", "--show", "--init"])


def test_config_init_force(parser: CLIParser) -> None:
    args = parser.parse_args(["config", "--init", "--force"])

    assert args.init is True
    assert args.force is True
    assert args.show is False
