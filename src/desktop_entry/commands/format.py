"""Format command handler.

Reserializes a desktop file in canonical key order, either to stdout or
in place.
"""

import sys
from argparse import Namespace
from pathlib import Path

from desktop_entry.core.serializer import serialize
from desktop_entry.logger import (
    flush_all_handlers,
    get_logger,
    temporary_console_level,
)

from .base import BaseCommandHandler

logger = get_logger(__name__)


class FormatHandler(BaseCommandHandler):
    """Handler for the format command."""

    def execute(self, args: Namespace) -> int:
        """Execute the format command."""
        path = Path(args.file)
        text = serialize(self._parse(args.file, args))

        if not args.write:
            flush_all_handlers()
            sys.stdout.write(text)
            return 0

        if path.read_text(encoding="utf-8") == text:
            with temporary_console_level("INFO"):
                logger.info("%s already formatted", path)
            return 0

        path.write_text(text, encoding="utf-8")
        with temporary_console_level("INFO"):
            logger.info("✅ Formatted %s", path)
        return 0
