"""Constants for desktop-entry.

This module holds the key table of the Desktop Entry format, group names,
and the logging and settings defaults used across the package.
"""

from typing import Final, Literal

# Group names
DESKTOP_ENTRY_GROUP: Final[str] = "Desktop Entry"
DESKTOP_ACTION_PREFIX: Final[str] = "Desktop Action "

# Entry type names
TYPE_APPLICATION: Final[str] = "Application"
TYPE_LINK: Final[str] = "Link"
TYPE_DIRECTORY: Final[str] = "Directory"

# Value kinds understood by the decoder
ValueKind = Literal["string", "localestring", "boolean", "numeric", "list"]

# Keys valid for every entry type: key -> (attribute, kind)
COMMON_KEYS: Final[dict[str, tuple[str, ValueKind]]] = {
    "Version": ("version", "numeric"),
    "Name": ("name", "localestring"),
    "GenericName": ("generic_name", "localestring"),
    "NoDisplay": ("no_display", "boolean"),
    "Comment": ("comment", "localestring"),
    "Icon": ("icon", "string"),
    "Hidden": ("hidden", "boolean"),
    "OnlyShowIn": ("only_show_in", "list"),
    "NotShowIn": ("not_show_in", "list"),
}

APPLICATION_KEYS: Final[dict[str, tuple[str, ValueKind]]] = {
    "DBusActivatable": ("dbus_activatable", "boolean"),
    "TryExec": ("try_exec", "string"),
    "Exec": ("exec", "string"),
    "Path": ("path", "string"),
    "Terminal": ("terminal", "boolean"),
    "MimeType": ("mime_type", "list"),
    "Categories": ("categories", "list"),
    "Implements": ("implements", "list"),
    "Keywords": ("keywords", "localestring"),
    "StartupNotify": ("startup_notify", "boolean"),
    "StartupWMClass": ("startup_wm_class", "string"),
    "PrefersNonDefaultGPU": ("prefers_non_default_gpu", "boolean"),
    "SingleMainWindow": ("single_main_window", "boolean"),
}

LINK_KEYS: Final[dict[str, tuple[str, ValueKind]]] = {
    "URL": ("url", "string"),
}

ACTION_KEYS: Final[dict[str, tuple[str, ValueKind]]] = {
    "Name": ("name", "localestring"),
    "Icon": ("icon", "string"),
    "Exec": ("exec", "string"),
}

# Keys handled outside the per-type tables
KEY_TYPE: Final[str] = "Type"
KEY_ACTIONS: Final[str] = "Actions"

# Keywords is a localized list, every other localestring is a plain string
LOCALIZED_LIST_KEYS: Final[frozenset[str]] = frozenset({"Keywords"})

# Serialization order of the [Desktop Entry] group
ENTRY_KEY_ORDER: Final[tuple[str, ...]] = (
    "Type",
    "Version",
    "Name",
    "GenericName",
    "NoDisplay",
    "Comment",
    "Icon",
    "Hidden",
    "OnlyShowIn",
    "NotShowIn",
    "DBusActivatable",
    "TryExec",
    "Exec",
    "Path",
    "Terminal",
    "Actions",
    "MimeType",
    "Categories",
    "Implements",
    "Keywords",
    "StartupNotify",
    "StartupWMClass",
    "URL",
    "PrefersNonDefaultGPU",
    "SingleMainWindow",
)

ACTION_KEY_ORDER: Final[tuple[str, ...]] = ("Name", "Icon", "Exec")

# Locales that always select the untagged value
NEUTRAL_LOCALES: Final[frozenset[str]] = frozenset({"C", "POSIX"})

# Environment variables consulted for the user's locale, in gettext order
LOCALE_ENV_VARS: Final[tuple[str, ...]] = (
    "LANGUAGE",
    "LC_ALL",
    "LC_MESSAGES",
    "LANG",
)

# Logging
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
LOG_ROOT_NAME: Final[str] = "desktop_entry"
LOG_FILE_NAME: Final[str] = "desktop-entry.log"
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024
LOG_BACKUP_COUNT: Final[int] = 3
LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(funcName)s:%(lineno)d] - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
    "RESET": "\033[0m",
}

# Environment overrides
ENV_LOG_DIR: Final[str] = "DESKTOP_ENTRY_LOG_DIR"
ENV_LOG_LEVEL: Final[str] = "LOG_LEVEL"
ENV_CONFIG_FILE: Final[str] = "DESKTOP_ENTRY_CONFIG"

# Settings file
SETTINGS_FILE_NAME: Final[str] = "settings.conf"
SECTION_PARSER: Final[str] = "parser"
SECTION_LOCALE: Final[str] = "locale"
SECTION_LOGGING: Final[str] = "logging"
KEY_STRICT: Final[str] = "strict"
KEY_PREFERRED: Final[str] = "preferred"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_LOG_LEVEL: Final[str] = "log_level"
VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)
