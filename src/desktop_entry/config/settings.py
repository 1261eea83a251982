"""Persistent settings stored in an INI file.

The settings file is optional. When it is missing every option keeps its
default; when present its values are checked against the settings schema
before being converted to a :class:`Settings` instance.
"""

import configparser
import os
import re
from dataclasses import dataclass
from pathlib import Path

from desktop_entry.config.options import ParserOptions
from desktop_entry.config.parser import (
    CommentAwareConfigParser,
    get_file_header,
)
from desktop_entry.config.schemas import validate_settings
from desktop_entry.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_CONFIG_FILE,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_LEVEL,
    KEY_PREFERRED,
    KEY_STRICT,
    SECTION_LOCALE,
    SECTION_LOGGING,
    SECTION_PARSER,
    SETTINGS_FILE_NAME,
)
from desktop_entry.exceptions import ConfigurationError
from desktop_entry.logger import get_logger

logger = get_logger(__name__)

# Type alias for raw INI values: section -> option -> value
RawSettings = dict[str, dict[str, str]]

_TRUE_VALUES = frozenset({"true", "yes", "on", "1"})
# Semicolons as in desktop files, colons as in $LANGUAGE
_LOCALE_SEPARATOR_RE = re.compile(r"[;:]")


def default_settings_path() -> Path:
    """Return the settings file location.

    DESKTOP_ENTRY_CONFIG wins; otherwise $XDG_CONFIG_HOME (or ~/.config)
    / desktop-entry / settings.conf.
    """
    env_path = os.getenv(ENV_CONFIG_FILE)
    if env_path:
        return Path(env_path).expanduser()
    config_home = os.getenv("XDG_CONFIG_HOME") or str(
        Path.home() / ".config"
    )
    return Path(config_home).expanduser() / "desktop-entry" / (
        SETTINGS_FILE_NAME
    )


@dataclass(frozen=True)
class Settings:
    """Typed settings.

    Attributes:
        strict: Default for the CLI --strict flag.
        preferred_locales: Locales used when showing resolved values; empty
            means the process environment.
        console_log_level: Console handler level.
        log_level: File handler level.

    """

    strict: bool = False
    preferred_locales: tuple[str, ...] = ()
    console_log_level: str = DEFAULT_CONSOLE_LOG_LEVEL
    log_level: str = DEFAULT_LOG_LEVEL

    def to_options(self, *, strict: bool | None = None) -> ParserOptions:
        """Return parser options, optionally overriding strict."""
        return ParserOptions(
            strict=self.strict if strict is None else strict,
            locales=self.preferred_locales,
        )


def _defaults() -> RawSettings:
    return {
        SECTION_PARSER: {KEY_STRICT: "false"},
        SECTION_LOCALE: {KEY_PREFERRED: ""},
        SECTION_LOGGING: {
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
        },
    }


def _normalize(section: str, option: str, value: str) -> str:
    if section == SECTION_PARSER and option == KEY_STRICT:
        return value.lower()
    if section == SECTION_LOGGING:
        return value.upper()
    return value


class SettingsManager:
    """Loads and writes the INI settings file."""

    def __init__(self, settings_file: Path | None = None) -> None:
        """Initialize settings manager.

        Args:
            settings_file: Settings file path (defaults to
                default_settings_path())

        """
        self.settings_file = settings_file or default_settings_path()

    def _read_raw(self) -> RawSettings:
        """Read the settings file into raw string values.

        Raises:
            ConfigurationError: If the file is not valid INI

        """
        parser = CommentAwareConfigParser()
        try:
            with self.settings_file.open(encoding="utf-8") as f:
                parser.read_file(f)
        except (OSError, configparser.Error) as e:
            msg = f"Cannot read {self.settings_file}: {e}"
            raise ConfigurationError(msg) from e

        raw: RawSettings = {}
        for section in parser.sections():
            raw[section] = {
                option: _normalize(
                    section, option, parser.get(section, option)
                )
                for option in parser.options(section)
            }
        return raw

    def load(self) -> Settings:
        """Load settings, falling back to defaults for anything unset.

        Returns:
            Loaded settings

        Raises:
            ConfigurationError: If the file cannot be read or parsed
            SchemaValidationError: If a value is invalid

        """
        if not self.settings_file.exists():
            logger.debug(
                "No settings file at %s, using defaults", self.settings_file
            )
            return Settings()

        raw = self._read_raw()
        validate_settings(raw)

        merged = _defaults()
        for section, values in raw.items():
            merged[section].update(values)

        preferred = merged[SECTION_LOCALE][KEY_PREFERRED]
        settings = Settings(
            strict=merged[SECTION_PARSER][KEY_STRICT] in _TRUE_VALUES,
            preferred_locales=tuple(
                item.strip()
                for item in _LOCALE_SEPARATOR_RE.split(preferred)
                if item.strip()
            ),
            console_log_level=merged[SECTION_LOGGING][KEY_CONSOLE_LOG_LEVEL],
            log_level=merged[SECTION_LOGGING][KEY_LOG_LEVEL],
        )
        logger.debug("Loaded settings from %s", self.settings_file)
        return settings

    def write_defaults(self, *, overwrite: bool = False) -> Path:
        """Write a commented default settings file.

        Args:
            overwrite: Replace an existing file

        Returns:
            The settings file path

        Raises:
            ConfigurationError: If the file exists and overwrite is False,
                or if it cannot be written

        """
        if self.settings_file.exists() and not overwrite:
            msg = f"{self.settings_file} already exists"
            raise ConfigurationError(msg)

        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            with self.settings_file.open("w", encoding="utf-8") as f:
                f.write(get_file_header())
                for section, values in _defaults().items():
                    f.write(f"[{section}]\n")
                    for key, value in values.items():
                        f.write(f"{key} = {value}\n")
                    f.write("\n")
        except OSError as e:
            msg = f"Cannot write {self.settings_file}: {e}"
            raise ConfigurationError(msg) from e

        logger.debug("Wrote default settings to %s", self.settings_file)
        return self.settings_file


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from path or the default location."""
    return SettingsManager(path).load()
