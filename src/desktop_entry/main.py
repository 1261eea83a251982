"""Main CLI entry point for desktop-entry.

This module provides the minimal entry point for the command-line
interface, delegating all functionality to specialized command
handlers and CLI components.
"""

import sys

from desktop_entry.cli import CLIRunner
from desktop_entry.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Run the CLI application and exit with its status code."""
    logger.debug("CLI started")
    try:
        code = CLIRunner().run()
    except KeyboardInterrupt:
        logger.info("CLI cancelled by user")
        sys.exit(1)
    logger.debug("CLI finished with exit code %d", code)
    sys.exit(code)


if __name__ == "__main__":
    main()
