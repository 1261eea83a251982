"""Show command handler.

Prints the resolved, human-facing values of a desktop file.
"""

from argparse import Namespace

from desktop_entry.core.locale import resolve
from desktop_entry.logger import get_logger, temporary_console_level
from desktop_entry.models import ApplicationFields, DesktopFile, LinkFields

from .base import BaseCommandHandler

logger = get_logger(__name__)


class ShowHandler(BaseCommandHandler):
    """Handler for the show command."""

    def _locales(self, args: Namespace) -> list[str] | None:
        """Return --locale, the parser option locales, or None for $LANG."""
        if args.locale:
            return [args.locale]
        locales = self._options(args).locales
        return list(locales) if locales else None

    def execute(self, args: Namespace) -> int:
        """Execute the show command."""
        desktop_file = self._parse(args.file, args)
        with temporary_console_level("INFO"):
            self._show(desktop_file, self._locales(args))
        return 0

    def _show(
        self, desktop_file: DesktopFile, locales: list[str] | None
    ) -> None:
        entry = desktop_file.entry
        logger.info("Name: %s", resolve(entry.name, locales))
        if entry.generic_name is not None:
            logger.info(
                "Generic name: %s", resolve(entry.generic_name, locales)
            )
        if entry.comment is not None:
            logger.info("Comment: %s", resolve(entry.comment, locales))
        if entry.icon is not None:
            logger.info("Icon: %s", entry.icon)
        logger.info("Type: %s", entry.kind.value)

        fields = entry.entry_type
        if isinstance(fields, ApplicationFields):
            if fields.exec is not None:
                logger.info("Exec: %s", fields.exec)
            if fields.categories:
                logger.info("Categories: %s", ", ".join(fields.categories))
            if fields.keywords is not None:
                keywords = resolve(fields.keywords, locales)
                logger.info("Keywords: %s", ", ".join(keywords))
        elif isinstance(fields, LinkFields):
            logger.info("URL: %s", fields.url)

        if desktop_file.actions:
            logger.info("Actions:")
        for action in desktop_file.actions.values():
            logger.info(
                "  %s: %s", action.identifier, resolve(action.name, locales)
            )
