"""CLI runner for desktop-entry.

Orchestrates the execution of CLI commands by routing parsed
arguments to the appropriate command handlers.
"""

import sys
from argparse import Namespace
from collections.abc import Sequence

from desktop_entry import __version__
from desktop_entry.cli.parser import CLIParser
from desktop_entry.commands.base import BaseCommandHandler
from desktop_entry.commands.config import ConfigHandler
from desktop_entry.commands.dump import DumpHandler
from desktop_entry.commands.format import FormatHandler
from desktop_entry.commands.show import ShowHandler
from desktop_entry.commands.validate import ValidateHandler
from desktop_entry.config import Settings, SettingsManager
from desktop_entry.exceptions import DesktopEntryError
from desktop_entry.logger import (
    get_logger,
    setup_logging,
    temporary_console_level,
    update_logger_from_config,
)

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(
        self, settings_manager: SettingsManager | None = None
    ) -> None:
        """Initialize CLI runner.

        Args:
            settings_manager: Settings manager (default location when None)

        """
        self.settings_manager = settings_manager or SettingsManager()

    def _load_settings(self) -> Settings:
        settings = self.settings_manager.load()
        update_logger_from_config(settings)
        return settings

    def _create_handler(
        self, command: str, settings: Settings
    ) -> BaseCommandHandler | None:
        handlers: dict[str, type[BaseCommandHandler]] = {
            "validate": ValidateHandler,
            "show": ShowHandler,
            "dump": DumpHandler,
            "format": FormatHandler,
            "config": ConfigHandler,
        }
        handler_class = handlers.get(command)
        if handler_class is None:
            return None
        return handler_class(settings, self.settings_manager)

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the CLI application.

        Parses arguments, handles global flags, validates commands,
        and routes to the appropriate handler.

        Args:
            argv: Arguments without the program name; sys.argv when None.

        Returns:
            Process exit code.

        """
        setup_logging()
        try:
            settings = self._load_settings()
        except DesktopEntryError as e:
            with temporary_console_level("INFO"):
                logger.error("❌ %s", e)
            return EXIT_FAILURE

        args = CLIParser(settings).parse_args(argv)

        if getattr(args, "version", False):
            sys.stdout.write(f"{__version__}\n")
            return EXIT_OK

        if not args.command:
            with temporary_console_level("INFO"):
                logger.error("❌ No command specified. Use --help.")
            return EXIT_FAILURE

        return self._execute_command(args, settings)

    def _execute_command(self, args: Namespace, settings: Settings) -> int:
        """Execute the specified command with the appropriate handler.

        Args:
            args: Parsed command-line arguments namespace.
            settings: Loaded settings.

        Returns:
            Process exit code.

        """
        handler = self._create_handler(args.command, settings)
        if handler is None:
            with temporary_console_level("INFO"):
                logger.error("❌ Unknown command: %s", args.command)
            return EXIT_FAILURE

        try:
            return handler.execute(args)
        except (DesktopEntryError, OSError) as e:
            with temporary_console_level("INFO"):
                logger.error("❌ %s", e)
            return EXIT_FAILURE
