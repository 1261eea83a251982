"""Configuration loading and updating for logging system.

Bootstrap values come from the environment; settings file values are
applied later through update_logger_from_config() so the logger never
imports the config package at module import time.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from desktop_entry.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    LOG_FILE_NAME,
    VALID_LOG_LEVELS,
)

if TYPE_CHECKING:
    from desktop_entry.config import Settings
    from desktop_entry.logger.state import _LoggerState


def load_log_settings() -> tuple[str, str, Path | None]:
    """Load default console level, file level, and file path.

    Environment Variable Override:
        DESKTOP_ENTRY_LOG_DIR: Enables file logging to
        $DESKTOP_ENTRY_LOG_DIR/desktop-entry.log. Without it only the
        console handler is installed.

        LOG_LEVEL: Overrides the console level (DEBUG, INFO, ...).

    Returns:
        Tuple of (console_level, file_level, log_path) where log_path is
        None when file logging is disabled

    """
    console_level = DEFAULT_CONSOLE_LOG_LEVEL
    env_level = os.getenv(ENV_LOG_LEVEL, "").upper()
    if env_level in VALID_LOG_LEVELS:
        console_level = env_level

    env_log_dir = os.getenv(ENV_LOG_DIR)
    log_path = (
        Path(env_log_dir).expanduser() / LOG_FILE_NAME if env_log_dir else None
    )

    return console_level, DEFAULT_LOG_LEVEL, log_path


def update_logger_from_config(
    state: "_LoggerState", settings: "Settings"
) -> None:
    """Update logger handler levels from loaded settings.

    Only updates handler levels, never adds or removes handlers. A valid
    LOG_LEVEL environment value still wins over the settings file.

    Args:
        state: Logger state object (from logger.state module)
        settings: Settings loaded from the settings file

    """
    env_level = os.getenv(ENV_LOG_LEVEL, "").upper()
    console_level_name = (
        env_level
        if env_level in VALID_LOG_LEVELS
        else settings.console_log_level
    )
    console_level = getattr(logging, console_level_name, logging.WARNING)
    file_level = getattr(logging, settings.log_level, logging.INFO)

    if state.queue_listener is not None:
        for handler in state.queue_listener.handlers:
            if isinstance(handler, RotatingFileHandler):
                handler.setLevel(file_level)
            elif isinstance(handler, logging.StreamHandler):
                handler.setLevel(console_level)

    state.config_applied = True
