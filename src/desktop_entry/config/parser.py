"""INI parser utilities for the settings file.

Provides a ConfigParser that tolerates inline comments and the header
written when a default settings file is created.
"""

import configparser
from typing import Any

from desktop_entry.constants import (
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_LEVEL,
    KEY_PREFERRED,
    KEY_STRICT,
    SECTION_LOCALE,
    SECTION_LOGGING,
    SECTION_PARSER,
)


def _strip_inline_comment(value: str) -> str:
    """Strip inline comments from configuration values.

    Args:
        value: Configuration value that may contain inline comment

    Returns:
        Value with inline comment removed (anything after '  #')
    """
    if "  #" in value:
        return value.split("  #")[0].strip()
    return value


class CommentAwareConfigParser(configparser.ConfigParser):
    """ConfigParser that strips inline comments when reading values."""

    def __init__(self, **kwargs: Any) -> None:  # noqa: ANN401
        kwargs.setdefault("interpolation", None)
        super().__init__(**kwargs)

    def get(  # type: ignore[override]
        self,
        section: str,
        option: str,
        **kwargs: Any,  # noqa: ANN401
    ) -> str:
        """Get a configuration value with inline comments stripped."""
        value = super().get(section, option, **kwargs)
        return _strip_inline_comment(value)


def get_file_header() -> str:
    """Return the comment block written at the top of a new settings file."""
    return f"""# desktop-entry settings
#
# [{SECTION_PARSER}]
# {KEY_STRICT}: reject duplicate keys and keys of another entry type
#
# [{SECTION_LOCALE}]
# {KEY_PREFERRED}: ';' or ':' separated locales for 'show', empty = $LANG
#
# [{SECTION_LOGGING}]
# {KEY_CONSOLE_LOG_LEVEL}: console verbosity (DEBUG, INFO, WARNING, ...)
# {KEY_LOG_LEVEL}: log file verbosity, used with DESKTOP_ENTRY_LOG_DIR

"""
