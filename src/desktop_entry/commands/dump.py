"""Dump command handler: print the JSON export of a desktop file."""

import sys
from argparse import Namespace

from desktop_entry.export import dumps
from desktop_entry.logger import flush_all_handlers

from .base import BaseCommandHandler


class DumpHandler(BaseCommandHandler):
    """Handler for the dump command."""

    def execute(self, args: Namespace) -> int:
        """Execute the dump command."""
        desktop_file = self._parse(args.file, args)
        flush_all_handlers()
        sys.stdout.write(dumps(desktop_file) + "\n")
        return 0
