"""Logging utilities for desktop-entry.

Architecture:
    Module logger -> "desktop_entry" root -> QueueHandler -> Queue
        -> QueueListener thread -> console (+ optional rotating file)

Usage:
    >>> from desktop_entry.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Assembled group %s", name)  # %-style, never f-strings

Environment Variables:
    LOG_LEVEL: Override console log level
    DESKTOP_ENTRY_LOG_DIR: Enable file logging into this directory

Rules:
    1. Always use: logger = get_logger(__name__); only the CLI calls
       setup_logging(), library imports leave a NullHandler in place
    2. Never call logging.basicConfig()
    3. Handlers are only attached to the root "desktop_entry" logger
"""

from typing import TYPE_CHECKING

from desktop_entry.exceptions import ConfigurationError
from desktop_entry.logger.config import (
    update_logger_from_config as _update_config,
)
from desktop_entry.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from desktop_entry.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
    temporary_console_level,
)
from desktop_entry.logger.state import _state, get_state

if TYPE_CHECKING:
    from desktop_entry.config import Settings

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "_state",  # For testing only
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "setup_logging",
    "temporary_console_level",
    "update_logger_from_config",
]


def update_logger_from_config(settings: "Settings") -> None:
    """Update logger handler levels from loaded settings.

    Convenience wrapper passing the global state singleton.
    """
    _update_config(get_state(), settings)
