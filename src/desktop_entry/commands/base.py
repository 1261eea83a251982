"""Base command handler for desktop-entry CLI commands.

This module provides the abstract base class that all command handlers
inherit from, ensuring consistent interface and shared functionality
across commands.
"""

from abc import ABC, abstractmethod
from argparse import Namespace
from pathlib import Path

from desktop_entry import parse_file
from desktop_entry.config import ParserOptions, Settings, SettingsManager
from desktop_entry.models import DesktopFile


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    CLIRunner creates the settings and injects them into handlers, so tests
    can construct a handler with any Settings instance.
    """

    def __init__(
        self,
        settings: Settings,
        settings_manager: SettingsManager | None = None,
    ) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            settings: Loaded settings
            settings_manager: Settings manager, needed by the config command

        """
        self.settings = settings
        self.settings_manager = settings_manager or SettingsManager()

    @abstractmethod
    def execute(self, args: Namespace) -> int:
        """Execute the command with the given arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            Process exit code

        """

    def _options(self, args: Namespace) -> ParserOptions:
        """Return parser options, with --strict overriding settings."""
        strict = True if getattr(args, "strict", False) else None
        return self.settings.to_options(strict=strict)

    def _parse(self, path: str, args: Namespace) -> DesktopFile:
        return parse_file(Path(path), options=self._options(args))
