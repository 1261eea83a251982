"""Serializer for the typed model.

Output is deterministic: known keys in a fixed order, locale variants
sorted by tag, passthrough keys and preserved groups verbatim in their
original order, one blank line between groups and a final newline.
"""

from __future__ import annotations

from desktop_entry.constants import (
    ACTION_KEY_ORDER,
    ACTION_KEYS,
    APPLICATION_KEYS,
    COMMON_KEYS,
    DESKTOP_ACTION_PREFIX,
    DESKTOP_ENTRY_GROUP,
    ENTRY_KEY_ORDER,
    KEY_ACTIONS,
    KEY_TYPE,
    LINK_KEYS,
    ValueKind,
)
from desktop_entry.core.values import (
    encode_boolean,
    encode_list,
    encode_string,
)
from desktop_entry.exceptions import ValueEncodeError
from desktop_entry.logger import get_logger
from desktop_entry.models import (
    DesktopAction,
    DesktopEntry,
    DesktopFile,
    EntryKind,
    LocaleString,
    LocaleStringList,
    RawGroup,
)

logger = get_logger(__name__)

_TYPE_KEYS: dict[EntryKind, dict[str, tuple[str, ValueKind]]] = {
    EntryKind.APPLICATION: APPLICATION_KEYS,
    EntryKind.LINK: LINK_KEYS,
    EntryKind.DIRECTORY: {},
}


def _line(key: str, locale: str | None, raw: str) -> str:
    if locale is None:
        return f"{key}={raw}"
    return f"{key}[{locale}]={raw}"


def _encode(value: object) -> str:
    if isinstance(value, bool):
        return encode_boolean(value)
    if isinstance(value, tuple):
        return encode_list(value)
    return encode_string(str(value))


def _value_lines(key: str, value: object) -> list[str]:
    """Return the lines for one known key, tagged variants included."""
    if value is None:
        return []
    try:
        if isinstance(value, (LocaleString, LocaleStringList)):
            lines = [_line(key, None, _encode(value.default))]
            lines.extend(
                _line(key, tag, _encode(value.variants[tag]))
                for tag in sorted(value.variants)
            )
            return lines
        return [_line(key, None, _encode(value))]
    except ValueEncodeError as e:
        e.message = f"{key}: {e.message}"
        raise


def _raw_lines(raw: RawGroup) -> list[str]:
    return [_line(key, locale, value) for (key, locale), value in raw.items()]


def _entry_value(entry: DesktopEntry, key: str, action_ids: list[str]):
    if key == KEY_TYPE:
        return entry.kind.value
    if key == KEY_ACTIONS:
        return tuple(action_ids) or None
    if key in COMMON_KEYS:
        return getattr(entry, COMMON_KEYS[key][0])
    table = _TYPE_KEYS[entry.kind]
    if key in table:
        return getattr(entry.entry_type, table[key][0])
    return None


def _entry_group(entry: DesktopEntry, action_ids: list[str]) -> list[str]:
    lines = [f"[{DESKTOP_ENTRY_GROUP}]"]
    for key in ENTRY_KEY_ORDER:
        lines.extend(_value_lines(key, _entry_value(entry, key, action_ids)))
    lines.extend(_raw_lines(entry.extra))
    return lines


def _action_group(action: DesktopAction) -> list[str]:
    lines = [f"[{DESKTOP_ACTION_PREFIX}{action.identifier}]"]
    for key in ACTION_KEY_ORDER:
        attribute = ACTION_KEYS[key][0]
        lines.extend(_value_lines(key, getattr(action, attribute)))
    lines.extend(_raw_lines(action.extra))
    return lines


def serialize(desktop_file: DesktopFile) -> str:
    """Render a desktop file as text.

    Args:
        desktop_file: The parsed or constructed model.

    Returns:
        Desktop entry text ending with a newline.

    Raises:
        ValueEncodeError: If a value of a constructed model starts or
            ends with whitespace that cannot be escaped.

    """
    groups = [_entry_group(desktop_file.entry, list(desktop_file.actions))]
    groups.extend(
        _action_group(action) for action in desktop_file.actions.values()
    )
    groups.extend(
        [f"[{name}]", *_raw_lines(raw)]
        for name, raw in desktop_file.extra_groups.items()
    )
    logger.debug("Serialized %d group(s)", len(groups))
    return "\n\n".join("\n".join(lines) for lines in groups) + "\n"
