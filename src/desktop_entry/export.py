"""JSON form of the typed model.

The document layout is described by config/schemas/desktop_file.schema.json.
Absent optional fields are omitted, locale variants keep their raw tags,
and passthrough data is stored as [key, locale, raw value] triples so the
original text survives a JSON round trip.
"""

from typing import Any

import orjson

from desktop_entry.config.schemas import validate_desktop_file
from desktop_entry.exceptions import SchemaValidationError
from desktop_entry.logger import get_logger
from desktop_entry.models import (
    ApplicationFields,
    DesktopAction,
    DesktopEntry,
    DesktopFile,
    DirectoryFields,
    EntryKind,
    EntryType,
    LinkFields,
    LocaleString,
    LocaleStringList,
    RawGroup,
)

logger = get_logger(__name__)

FORMAT_VERSION = 1

_LOCALIZED_ENTRY_FIELDS = ("name", "generic_name", "comment")
_PLAIN_ENTRY_FIELDS = ("version", "icon", "no_display", "hidden")
_LIST_ENTRY_FIELDS = ("only_show_in", "not_show_in")


def _locale_to_dict(
    value: LocaleString | LocaleStringList,
) -> dict[str, Any]:
    data: dict[str, Any] = {"default": _plain(value.default)}
    if value.variants:
        data["variants"] = {
            tag: _plain(item) for tag, item in sorted(value.variants.items())
        }
    return data


def _plain(value: Any) -> Any:  # noqa: ANN401
    if isinstance(value, (LocaleString, LocaleStringList)):
        return _locale_to_dict(value)
    if isinstance(value, tuple):
        return list(value)
    return value


def _raw_to_list(raw: RawGroup) -> list[list[str | None]]:
    return [[key, locale, value] for (key, locale), value in raw.items()]


def _fields_to_dict(entry_type: EntryType) -> dict[str, Any]:
    if isinstance(entry_type, DirectoryFields):
        return {}
    return {
        name: _plain(value)
        for name, value in vars(entry_type).items()
        if value is not None
    }


def _entry_to_dict(entry: DesktopEntry) -> dict[str, Any]:
    data: dict[str, Any] = {"type": entry.kind.value}
    for name in (
        *_LOCALIZED_ENTRY_FIELDS,
        *_PLAIN_ENTRY_FIELDS,
        *_LIST_ENTRY_FIELDS,
    ):
        value = getattr(entry, name)
        if value is not None:
            data[name] = _plain(value)
    fields = _fields_to_dict(entry.entry_type)
    if fields:
        data["fields"] = fields
    if entry.extra:
        data["extra"] = _raw_to_list(entry.extra)
    return data


def _action_to_dict(action: DesktopAction) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": action.identifier,
        "name": _locale_to_dict(action.name),
    }
    if action.icon is not None:
        data["icon"] = action.icon
    if action.exec is not None:
        data["exec"] = action.exec
    if action.extra:
        data["extra"] = _raw_to_list(action.extra)
    return data


def to_dict(desktop_file: DesktopFile) -> dict[str, Any]:
    """Convert a desktop file to a JSON-compatible dictionary."""
    data: dict[str, Any] = {
        "format_version": FORMAT_VERSION,
        "entry": _entry_to_dict(desktop_file.entry),
    }
    if desktop_file.actions:
        data["actions"] = [
            _action_to_dict(action)
            for action in desktop_file.actions.values()
        ]
    if desktop_file.extra_groups:
        data["extra_groups"] = [
            {"name": name, "entries": _raw_to_list(raw)}
            for name, raw in desktop_file.extra_groups.items()
        ]
    return data


def _locale_string(data: dict[str, Any] | None) -> LocaleString | None:
    if data is None:
        return None
    return LocaleString(
        default=data["default"], variants=dict(data.get("variants", {}))
    )


def _locale_string_list(
    data: dict[str, Any] | None,
) -> LocaleStringList | None:
    if data is None:
        return None
    return LocaleStringList(
        default=tuple(data["default"]),
        variants={
            tag: tuple(items)
            for tag, items in data.get("variants", {}).items()
        },
    )


def _tuple(items: list[str] | None) -> tuple[str, ...] | None:
    return None if items is None else tuple(items)


def _raw_group(entries: list[list[str | None]] | None) -> RawGroup:
    return RawGroup(
        {(key, locale): value for key, locale, value in entries or []}
    )


def _entry_type_from_dict(
    kind: EntryKind, fields: dict[str, Any]
) -> EntryType:
    if kind is EntryKind.LINK:
        return LinkFields(url=fields["url"])
    if kind is EntryKind.DIRECTORY:
        return DirectoryFields()
    values = dict(fields)
    for name in ("mime_type", "categories", "implements"):
        if name in values:
            values[name] = _tuple(values[name])
    if "keywords" in values:
        values["keywords"] = _locale_string_list(values["keywords"])
    return ApplicationFields(**values)


def from_dict(data: dict[str, Any]) -> DesktopFile:
    """Build a desktop file from its JSON form.

    Raises:
        SchemaValidationError: If data does not match the export schema.

    """
    validate_desktop_file(data)

    entry_data = data["entry"]
    kind = EntryKind(entry_data["type"])
    entry = DesktopEntry(
        name=_locale_string(entry_data["name"]),
        entry_type=_entry_type_from_dict(kind, entry_data.get("fields", {})),
        version=entry_data.get("version"),
        generic_name=_locale_string(entry_data.get("generic_name")),
        comment=_locale_string(entry_data.get("comment")),
        icon=entry_data.get("icon"),
        no_display=entry_data.get("no_display"),
        hidden=entry_data.get("hidden"),
        only_show_in=_tuple(entry_data.get("only_show_in")),
        not_show_in=_tuple(entry_data.get("not_show_in")),
        extra=_raw_group(entry_data.get("extra")),
    )

    actions: dict[str, DesktopAction] = {}
    for action_data in data.get("actions", []):
        identifier = action_data["id"]
        if identifier in actions:
            msg = f"Duplicate action id '{identifier}'"
            raise SchemaValidationError(
                msg, path="actions", schema_type="desktop_file"
            )
        actions[identifier] = DesktopAction(
            identifier=identifier,
            name=_locale_string(action_data["name"]),
            icon=action_data.get("icon"),
            exec=action_data.get("exec"),
            extra=_raw_group(action_data.get("extra")),
        )

    extra_groups = {
        group["name"]: _raw_group(group["entries"])
        for group in data.get("extra_groups", [])
    }
    return DesktopFile(
        entry=entry, actions=actions, extra_groups=extra_groups
    )


def dumps(desktop_file: DesktopFile) -> str:
    """Render a desktop file as indented JSON."""
    return orjson.dumps(
        to_dict(desktop_file), option=orjson.OPT_INDENT_2
    ).decode("utf-8")


def loads(text: str | bytes) -> DesktopFile:
    """Parse JSON produced by dumps() back into a desktop file.

    Raises:
        SchemaValidationError: If text is not valid JSON or does not match
            the export schema.

    """
    try:
        data = orjson.loads(text)
    except orjson.JSONDecodeError as e:
        msg = f"Invalid JSON: {e}"
        raise SchemaValidationError(msg, schema_type="desktop_file") from e
    if not isinstance(data, dict):
        msg = "Expected a JSON object"
        raise SchemaValidationError(msg, schema_type="desktop_file")
    logger.debug("Loading desktop file from JSON")
    return from_dict(data)
