"""Locale tags, aggregation of localized values, and locale resolution.

Resolution follows the Desktop Entry fallback chain. For a requested
locale lang_COUNTRY.ENCODING@MODIFIER the encoding is ignored and the
candidates are tried in this order, first hit wins:

    1. lang_COUNTRY@MODIFIER
    2. lang_COUNTRY
    3. lang@MODIFIER
    4. lang
    5. the untagged default

Candidates that need a missing component are skipped, so a country-only or
modifier-only tag never matches without its language.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import TypeVar, overload

from desktop_entry.constants import LOCALE_ENV_VARS, NEUTRAL_LOCALES
from desktop_entry.exceptions import EntrySyntaxError
from desktop_entry.logger import get_logger
from desktop_entry.models import LocaleString, LocaleStringList

logger = get_logger(__name__)

_LOCALE_RE = re.compile(
    r"""
    ^(?P<lang>[A-Za-z]+)
    (?:_(?P<country>[A-Za-z0-9]+))?
    (?:\.(?P<encoding>[A-Za-z0-9_-]+))?
    (?:@(?P<modifier>[A-Za-z0-9_-]+))?$
    """,
    re.VERBOSE,
)

T = TypeVar("T")


@dataclass(frozen=True)
class LocaleTag:
    """A decomposed lang[_COUNTRY][.ENCODING][@MODIFIER] tag."""

    lang: str
    country: str | None = None
    encoding: str | None = None
    modifier: str | None = None

    @classmethod
    def parse(cls, tag: str) -> LocaleTag:
        """Parse tag into its components.

        Raises:
            ValueError: If tag does not follow the locale syntax.

        """
        match = _LOCALE_RE.match(tag)
        if match is None:
            msg = f"invalid locale tag '{tag}'"
            raise ValueError(msg)
        return cls(
            lang=match.group("lang"),
            country=match.group("country"),
            encoding=match.group("encoding"),
            modifier=match.group("modifier"),
        )

    def candidates(self) -> list[str]:
        """Return lookup keys in fallback order, most specific first."""
        keys = []
        if self.country and self.modifier:
            keys.append(f"{self.lang}_{self.country}@{self.modifier}")
        if self.country:
            keys.append(f"{self.lang}_{self.country}")
        if self.modifier:
            keys.append(f"{self.lang}@{self.modifier}")
        keys.append(self.lang)
        return keys

    def without_encoding(self) -> str:
        """Return the tag text with the encoding part dropped."""
        text = self.lang
        if self.country:
            text += f"_{self.country}"
        if self.modifier:
            text += f"@{self.modifier}"
        return text


def _normalized_variants(variants: Mapping[str, T]) -> dict[str, T]:
    normalized: dict[str, T] = {}
    for tag, value in variants.items():
        try:
            key = LocaleTag.parse(tag).without_encoding()
        except ValueError:
            key = tag
        # An exact tag beats one that only matches after dropping encoding
        if key not in normalized or key == tag:
            normalized[key] = value
    return normalized


def _preferences(locales: str | Sequence[str] | None) -> list[str]:
    if locales is None:
        return system_locales()
    if isinstance(locales, str):
        return [locales]
    return list(locales)


def lookup(
    variants: Mapping[str, T], locales: str | Sequence[str] | None
) -> T | None:
    """Return the best variant for locales, or None when nothing matches.

    Args:
        variants: Localized values keyed by locale tag.
        locales: One locale tag, an ordered preference list, or None to
            use the process environment.

    """
    if not variants:
        return None
    normalized = _normalized_variants(variants)
    for preference in _preferences(locales):
        if preference.split(".", 1)[0] in NEUTRAL_LOCALES:
            return None
        try:
            tag = LocaleTag.parse(preference)
        except ValueError:
            logger.debug("Ignoring unparsable locale %s", preference)
            continue
        for candidate in tag.candidates():
            if candidate in normalized:
                return normalized[candidate]
    return None


@overload
def resolve(
    value: LocaleString, locales: str | Sequence[str] | None = None
) -> str: ...


@overload
def resolve(
    value: LocaleStringList, locales: str | Sequence[str] | None = None
) -> tuple[str, ...]: ...


def resolve(value, locales=None):
    """Return the best-matching localized value, or its default.

    Args:
        value: A LocaleString or LocaleStringList.
        locales: A locale tag such as "de_DE@euro", an ordered preference
            list of tags, or None to read the locale from the environment.

    Returns:
        The matched variant, or value.default when no candidate matches.

    """
    match = lookup(value.variants, locales)
    return value.default if match is None else match


def system_locales(environ: Mapping[str, str] | None = None) -> list[str]:
    """Return the user's preferred locales from the environment.

    Follows gettext: LANGUAGE (colon-separated list) wins, then the first
    non-empty of LC_ALL, LC_MESSAGES and LANG.
    """
    env = os.environ if environ is None else environ
    for name in LOCALE_ENV_VARS:
        value = env.get(name, "")
        if not value:
            continue
        if name == "LANGUAGE":
            return [item for item in value.split(":") if item]
        return [value]
    return []


def aggregate(
    key: str,
    occurrences: Iterable[tuple[str | None, T, int]],
    group: str | None = None,
) -> tuple[T | None, dict[str, T]]:
    """Collect the occurrences of one localizable key.

    Args:
        key: Key name, for error messages.
        occurrences: (locale tag or None, decoded value, line number).
        group: Enclosing group name, for error messages.

    Returns:
        The untagged default (None if absent) and the tagged variants.

    Raises:
        EntrySyntaxError: If a locale tag is malformed.

    """
    default: T | None = None
    variants: dict[str, T] = {}
    for locale, value, line in occurrences:
        if locale is None:
            default = value
            continue
        try:
            LocaleTag.parse(locale)
        except ValueError as e:
            msg = f"{e} on key '{key}'"
            raise EntrySyntaxError(msg, line=line, group=group) from e
        variants[locale] = value
    return default, variants


def build_locale_string(
    key: str,
    occurrences: Iterable[tuple[str | None, str, int]],
    group: str | None = None,
) -> LocaleString:
    """Aggregate occurrences into a LocaleString.

    A key with only tagged occurrences gets an empty default.
    """
    default, variants = aggregate(key, occurrences, group)
    return LocaleString(default=default or "", variants=variants)


def build_locale_string_list(
    key: str,
    occurrences: Iterable[tuple[str | None, tuple[str, ...], int]],
    group: str | None = None,
) -> LocaleStringList:
    """Aggregate list occurrences into a LocaleStringList."""
    default, variants = aggregate(key, occurrences, group)
    return LocaleStringList(default=default or (), variants=variants)
