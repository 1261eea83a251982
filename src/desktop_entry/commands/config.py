"""Config command handler for desktop-entry CLI.

Displays the current settings or writes a commented default settings
file.
"""

from argparse import Namespace

from desktop_entry.logger import get_logger, temporary_console_level

from .base import BaseCommandHandler

logger = get_logger(__name__)


class ConfigHandler(BaseCommandHandler):
    """Handler for config command operations."""

    def execute(self, args: Namespace) -> int:
        """Execute the config command."""
        with temporary_console_level("INFO"):
            if args.init:
                self._init_config(overwrite=args.force)
            else:
                self._show_config()
        return 0

    def _show_config(self) -> None:
        """Display current settings."""
        settings_file = self.settings_manager.settings_file
        exists = settings_file.exists()
        logger.info("📋 Current Settings:")
        logger.info(
            "  Settings File: %s%s",
            settings_file,
            "" if exists else " (not found, using defaults)",
        )
        logger.info("  Strict: %s", self.settings.strict)
        logger.info(
            "  Preferred Locales: %s",
            ", ".join(self.settings.preferred_locales) or "(environment)",
        )
        logger.info("  Console Log Level: %s", self.settings.console_log_level)
        logger.info("  Log Level: %s", self.settings.log_level)

    def _init_config(self, *, overwrite: bool) -> None:
        """Write the default settings file."""
        path = self.settings_manager.write_defaults(overwrite=overwrite)
        logger.info("✅ Default settings written to %s", path)
