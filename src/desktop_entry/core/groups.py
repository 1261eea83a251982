"""Group assembler.

Collects key lines into the group that encloses them and checks the
structural rules: [Desktop Entry] comes first and exactly once, no key
line precedes it, and no group name repeats.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from desktop_entry.constants import DESKTOP_ACTION_PREFIX, DESKTOP_ENTRY_GROUP
from desktop_entry.core.lexer import Line, LineKind
from desktop_entry.exceptions import (
    DuplicateGroupError,
    DuplicateKeyError,
    EntrySyntaxError,
    MissingGroupError,
)
from desktop_entry.logger import get_logger
from desktop_entry.models import RawGroup, RawKey

logger = get_logger(__name__)


@dataclass
class AssembledGroup:
    """Key lines of one group, keyed by (key, locale), in file order."""

    name: str
    line: int
    entries: dict[RawKey, Line] = field(default_factory=dict)

    def lines_for(self, key: str) -> list[Line]:
        """Return every line of key, untagged and tagged, in file order."""
        return [line for (k, _), line in self.entries.items() if k == key]

    def get(self, key: str, locale: str | None = None) -> Line | None:
        """Return the line for key and locale, if present."""
        return self.entries.get((key, locale))

    def to_raw(self, skip: Iterable[RawKey] = ()) -> RawGroup:
        """Return the group's raw values, minus the skipped keys."""
        skipped = set(skip)
        return RawGroup(
            {
                raw_key: line.value or ""
                for raw_key, line in self.entries.items()
                if raw_key not in skipped
            }
        )


@dataclass
class AssembledFile:
    """Groups of a desktop file before typed validation.

    Attributes:
        entry: The [Desktop Entry] group.
        actions: [Desktop Action <id>] groups keyed by id, file order.
        others: Any other group, keyed by its full name, file order.

    """

    entry: AssembledGroup
    actions: dict[str, AssembledGroup] = field(default_factory=dict)
    others: dict[str, AssembledGroup] = field(default_factory=dict)


def action_identifier(group_name: str) -> str | None:
    """Return the action id of a "Desktop Action <id>" group name."""
    if group_name.startswith(DESKTOP_ACTION_PREFIX):
        identifier = group_name[len(DESKTOP_ACTION_PREFIX) :]
        return identifier or None
    return None


def _add_key(group: AssembledGroup, line: Line, *, strict: bool) -> None:
    raw_key = (line.key or "", line.locale)
    previous = group.entries.get(raw_key)
    if previous is not None:
        label = line.key
        if line.locale is not None:
            label = f"{line.key}[{line.locale}]"
        if strict:
            msg = f"'{label}' already set on line {previous.number}"
            raise DuplicateKeyError(msg, line=line.number, group=group.name)
        logger.warning(
            "Duplicate key %s in [%s] on line %d overrides line %d",
            label,
            group.name,
            line.number,
            previous.number,
        )
    group.entries[raw_key] = line


def assemble(lines: Iterable[Line], *, strict: bool = False) -> AssembledFile:
    """Assemble classified lines into groups.

    Args:
        lines: Output of the lexer.
        strict: Reject duplicate keys instead of letting the last one win.

    Returns:
        The assembled groups.

    Raises:
        EntrySyntaxError: If a key line appears before any group header.
        DuplicateKeyError: In strict mode, for a repeated key.
        MissingGroupError: If [Desktop Entry] is absent or not first.
        DuplicateGroupError: If a group name is repeated.

    """
    result: AssembledFile | None = None
    current: AssembledGroup | None = None
    seen: set[str] = set()

    for line in lines:
        if line.kind in (LineKind.BLANK, LineKind.COMMENT):
            continue

        if line.kind is LineKind.KEY:
            if current is None:
                msg = f"key '{line.key}' appears before any group header"
                raise EntrySyntaxError(msg, line=line.number)
            _add_key(current, line, strict=strict)
            continue

        name = line.group or ""
        if result is None and name != DESKTOP_ENTRY_GROUP:
            msg = f"first group must be [{DESKTOP_ENTRY_GROUP}], got [{name}]"
            raise MissingGroupError(msg, line=line.number, group=name)
        if name in seen:
            msg = f"[{name}] appears more than once"
            raise DuplicateGroupError(msg, line=line.number, group=name)
        seen.add(name)

        current = AssembledGroup(name, line.number)
        identifier = action_identifier(name)
        if result is None:
            result = AssembledFile(entry=current)
        elif identifier is not None:
            result.actions[identifier] = current
        else:
            result.others[name] = current
        logger.debug("Opened group [%s] on line %d", name, line.number)

    if result is None:
        msg = f"no [{DESKTOP_ENTRY_GROUP}] group"
        raise MissingGroupError(msg)

    logger.debug(
        "Assembled %d action group(s) and %d other group(s)",
        len(result.actions),
        len(result.others),
    )
    return result
