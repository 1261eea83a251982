"""Validate command handler.

Parses every file given and reports each error; the exit code is 1 when
any file fails.
"""

from argparse import Namespace

from desktop_entry.exceptions import DesktopEntryError, EntryValidationError
from desktop_entry.logger import get_logger, temporary_console_level

from .base import BaseCommandHandler

logger = get_logger(__name__)


class ValidateHandler(BaseCommandHandler):
    """Handler for the validate command."""

    def execute(self, args: Namespace) -> int:
        """Execute the validate command."""
        failed = 0
        with temporary_console_level("INFO"):
            for path in args.files:
                if not self._validate_file(path, args):
                    failed += 1

            total = len(args.files)
            if failed:
                logger.info("%d of %d file(s) failed", failed, total)
                return 1
            logger.info("All %d file(s) valid", total)
            return 0

    def _validate_file(self, path: str, args: Namespace) -> bool:
        try:
            desktop_file = self._parse(path, args)
        except EntryValidationError as e:
            logger.error("❌ %s: %d error(s)", path, len(e.errors))
            for error in e.errors:
                logger.error("   %s", error)
            return False
        except (DesktopEntryError, OSError) as e:
            logger.error("❌ %s: %s", path, e)
            return False

        logger.info(
            "✅ %s: %s entry, %d action(s)",
            path,
            desktop_file.entry.kind.value,
            len(desktop_file.actions),
        )
        return True
