"""Typed model of a parsed desktop file.

All types are frozen dataclasses built once by the entry builder. Lists are
stored as tuples and mappings as read-only views, so a parsed file can be
hashed and shared. To change one, rebuild it with
:func:`dataclasses.replace`.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import ClassVar

from desktop_entry.constants import (
    TYPE_APPLICATION,
    TYPE_DIRECTORY,
    TYPE_LINK,
)

ValueList = tuple[str, ...]
RawKey = tuple[str, str | None]


def _freeze(instance: object, name: str) -> None:
    """Swap a mapping field of a frozen instance for a read-only copy."""
    value = getattr(instance, name)
    object.__setattr__(instance, name, MappingProxyType(dict(value)))


class EntryKind(Enum):
    """Closed set of desktop entry types."""

    APPLICATION = TYPE_APPLICATION
    LINK = TYPE_LINK
    DIRECTORY = TYPE_DIRECTORY


@dataclass(frozen=True)
class LocaleString:
    """A string with an untagged default and locale-tagged variants."""

    default: str
    variants: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _freeze(self, "variants")

    def __hash__(self) -> int:
        return hash((self.default, frozenset(self.variants.items())))

    def resolve(self, locales: str | Sequence[str] | None = None) -> str:
        """Return the best variant for locales, falling back to default."""
        from desktop_entry.core.locale import resolve  # noqa: PLC0415

        return resolve(self, locales)


@dataclass(frozen=True)
class LocaleStringList:
    """A localized list value, such as Keywords."""

    default: ValueList = ()
    variants: Mapping[str, ValueList] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _freeze(self, "variants")

    def __hash__(self) -> int:
        return hash((self.default, frozenset(self.variants.items())))

    def resolve(
        self, locales: str | Sequence[str] | None = None
    ) -> ValueList:
        """Return the best list variant for locales."""
        from desktop_entry.core.locale import resolve  # noqa: PLC0415

        return resolve(self, locales)


@dataclass(frozen=True)
class RawGroup:
    """Ordered raw key/value data kept verbatim for serialization.

    Keys are (key, locale) pairs, locale being None for untagged lines.
    Values are the escaped text exactly as found after the "=".
    """

    entries: Mapping[RawKey, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _freeze(self, "entries")

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))

    def get(self, key: str, locale: str | None = None) -> str | None:
        """Return the raw value for key and locale, if present."""
        return self.entries.get((key, locale))

    def __iter__(self) -> Iterator[RawKey]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, item: object) -> bool:
        return item in self.entries

    def items(self) -> Iterator[tuple[RawKey, str]]:
        """Iterate over ((key, locale), raw value) pairs in file order."""
        return iter(self.entries.items())


@dataclass(frozen=True)
class ApplicationFields:
    """Fields specific to Application entries.

    Every field is optional; None means the key was absent. Exec and
    TryExec are kept unexpanded, field codes included.
    """

    kind: ClassVar[EntryKind] = EntryKind.APPLICATION

    exec: str | None = None
    try_exec: str | None = None
    path: str | None = None
    terminal: bool | None = None
    mime_type: ValueList | None = None
    categories: ValueList | None = None
    implements: ValueList | None = None
    keywords: LocaleStringList | None = None
    dbus_activatable: bool | None = None
    startup_notify: bool | None = None
    startup_wm_class: str | None = None
    prefers_non_default_gpu: bool | None = None
    single_main_window: bool | None = None


@dataclass(frozen=True)
class LinkFields:
    """Fields specific to Link entries."""

    kind: ClassVar[EntryKind] = EntryKind.LINK

    url: str


@dataclass(frozen=True)
class DirectoryFields:
    """Directory entries carry no type-specific fields."""

    kind: ClassVar[EntryKind] = EntryKind.DIRECTORY


EntryType = ApplicationFields | LinkFields | DirectoryFields


@dataclass(frozen=True)
class DesktopEntry:
    """The [Desktop Entry] group of a desktop file."""

    name: LocaleString
    entry_type: EntryType
    version: str | None = None
    generic_name: LocaleString | None = None
    comment: LocaleString | None = None
    icon: str | None = None
    no_display: bool | None = None
    hidden: bool | None = None
    only_show_in: ValueList | None = None
    not_show_in: ValueList | None = None
    extra: RawGroup = field(default_factory=RawGroup)

    @property
    def kind(self) -> EntryKind:
        """Return the entry type."""
        return self.entry_type.kind


@dataclass(frozen=True)
class DesktopAction:
    """A [Desktop Action <identifier>] group."""

    identifier: str
    name: LocaleString
    icon: str | None = None
    exec: str | None = None
    extra: RawGroup = field(default_factory=RawGroup)


@dataclass(frozen=True)
class DesktopFile:
    """A complete parsed desktop file.

    Attributes:
        entry: The main entry.
        actions: Actions in Actions-list order, keyed by identifier.
        extra_groups: Unrecognized groups and action groups not named in
            Actions, in file order, kept verbatim.

    """

    entry: DesktopEntry
    actions: Mapping[str, DesktopAction] = field(default_factory=dict)
    extra_groups: Mapping[str, RawGroup] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _freeze(self, "actions")
        _freeze(self, "extra_groups")

    def __hash__(self) -> int:
        return hash(
            (
                self.entry,
                frozenset(self.actions.items()),
                frozenset(self.extra_groups.items()),
            )
        )
