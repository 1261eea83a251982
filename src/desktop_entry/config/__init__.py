"""Configuration for desktop-entry.

ParserOptions is the in-code configuration of the parser. Settings holds
the persistent defaults read from settings.conf by the CLI.
"""

from desktop_entry.config.options import ParserOptions
from desktop_entry.config.parser import CommentAwareConfigParser
from desktop_entry.config.settings import (
    Settings,
    SettingsManager,
    default_settings_path,
    load_settings,
)

__all__ = [
    "CommentAwareConfigParser",
    "ParserOptions",
    "Settings",
    "SettingsManager",
    "default_settings_path",
    "load_settings",
]
