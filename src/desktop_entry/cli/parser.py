"""CLI argument parser for desktop-entry.

Handles parsing of command-line arguments and provides a clean
interface for defining CLI commands and their options.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence

from desktop_entry.config import Settings


class CLIParser:
    """Command-line argument parser for desktop-entry."""

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the CLI parser.

        Args:
            settings: Loaded settings, used for option defaults.

        """
        self.settings = settings or Settings()

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments without the program name; sys.argv when None.

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self.build_parser()
        return parser.parse_args(argv)

    def build_parser(self) -> argparse.ArgumentParser:
        """Create the main parser with global options and subcommands."""
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser

    def _create_main_parser(self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog="desktop-entry",
            description="Parse, check and format .desktop files",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Check one or more files
  %(prog)s validate firefox.desktop org.gnome.Nautilus.desktop

  # Show resolved values for a locale
  %(prog)s show firefox.desktop --locale de_DE

  # JSON form of the parsed file
  %(prog)s dump firefox.desktop

  # Rewrite a file in canonical key order
  %(prog)s format firefox.desktop --write

  # Settings
  %(prog)s config --show
  %(prog)s config --init
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        """Add --version and --strict to the main parser.

        Args:
            parser (argparse.ArgumentParser): The main parser to add
                options to.

        """
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show desktop-entry version and exit",
        )
        parser.add_argument(
            "--strict",
            action="store_true",
            default=self.settings.strict,
            help=(
                "Reject duplicate keys and keys that belong to another "
                "entry type (default from settings: %(default)s)"
            ),
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )

        self._add_validate_command(subparsers)
        self._add_show_command(subparsers)
        self._add_dump_command(subparsers)
        self._add_format_command(subparsers)
        self._add_config_command(subparsers)

    def _add_validate_command(self, subparsers) -> None:
        validate_parser = subparsers.add_parser(
            "validate", help="Check desktop files and report every error"
        )
        validate_parser.add_argument(
            "files", nargs="+", help="Desktop files to check"
        )

    def _add_show_command(self, subparsers) -> None:
        show_parser = subparsers.add_parser(
            "show", help="Show resolved values of a desktop file"
        )
        show_parser.add_argument("file", help="Desktop file to show")
        show_parser.add_argument(
            "--locale",
            help=(
                "Locale used to resolve localized values, e.g. de_DE@euro "
                "(default: settings, then $LANGUAGE/$LC_ALL/$LANG)"
            ),
        )

    def _add_dump_command(self, subparsers) -> None:
        dump_parser = subparsers.add_parser(
            "dump", help="Print the parsed file as JSON"
        )
        dump_parser.add_argument("file", help="Desktop file to dump")

    def _add_format_command(self, subparsers) -> None:
        format_parser = subparsers.add_parser(
            "format", help="Rewrite a desktop file in canonical form"
        )
        format_parser.add_argument("file", help="Desktop file to format")
        format_parser.add_argument(
            "--write",
            action="store_true",
            help="Overwrite the file instead of printing to stdout",
        )

    def _add_config_command(self, subparsers) -> None:
        config_parser = subparsers.add_parser(
            "config", help="Show or create the settings file"
        )
        group = config_parser.add_mutually_exclusive_group(required=True)
        group.add_argument(
            "--show", action="store_true", help="Show current settings"
        )
        group.add_argument(
            "--init",
            action="store_true",
            help="Write a default settings file",
        )
        config_parser.add_argument(
            "--force",
            action="store_true",
            help="With --init, replace an existing settings file",
        )
