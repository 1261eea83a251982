"""Entry builder and validator.

Turns assembled groups into the typed model. The entry type is read once
and selects which key table applies. Field-level problems are collected and
raised together in an EntryValidationError once the whole file has been
examined; lexical and structural problems were already raised by the
lexer and assembler.
"""

from __future__ import annotations

from desktop_entry.config.options import ParserOptions
from desktop_entry.constants import (
    ACTION_KEYS,
    APPLICATION_KEYS,
    COMMON_KEYS,
    KEY_ACTIONS,
    KEY_TYPE,
    LINK_KEYS,
    LOCALIZED_LIST_KEYS,
    ValueKind,
)
from desktop_entry.core.groups import AssembledFile, AssembledGroup
from desktop_entry.core.lexer import Line
from desktop_entry.core.locale import (
    build_locale_string,
    build_locale_string_list,
)
from desktop_entry.core.values import (
    decode_boolean,
    decode_list,
    decode_numeric,
    decode_string,
)
from desktop_entry.exceptions import (
    DanglingActionReferenceError,
    EntryValidationError,
    ForbiddenFieldError,
    MissingRequiredFieldError,
    ParseError,
    TypeMismatchError,
    UnknownTypeError,
    ValueDecodeError,
)
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
    RawKey,
)

logger = get_logger(__name__)

_TYPE_KEYS: dict[EntryKind, dict[str, tuple[str, ValueKind]]] = {
    EntryKind.APPLICATION: APPLICATION_KEYS,
    EntryKind.LINK: LINK_KEYS,
    EntryKind.DIRECTORY: {},
}


class _FieldReader:
    """Reads typed values from one group, recording errors and usage."""

    def __init__(
        self,
        group: AssembledGroup,
        errors: list[ParseError],
        target: str | None = None,
    ) -> None:
        self.group = group
        self.errors = errors
        self.target = target
        self.consumed: set[RawKey] = set()

    def _fail(self, error: ParseError, line: Line) -> None:
        error.line = line.number
        error.group = self.group.name
        if self.target is not None and error.target is None:
            error.target = self.target
        self.errors.append(error)

    def _single(self, key: str) -> Line | None:
        for line in self.group.lines_for(key):
            if line.locale is not None:
                logger.warning(
                    "%s[%s] on line %d: %s is not localizable, keeping it "
                    "as passthrough data",
                    key,
                    line.locale,
                    line.number,
                    key,
                )
        line = self.group.get(key)
        if line is not None:
            self.consumed.add((key, None))
        return line

    def string(self, key: str) -> str | None:
        line = self._single(key)
        if line is None:
            return None
        try:
            return decode_string(line.value or "")
        except ValueDecodeError as e:
            e.message = f"{key}: {e.message}"
            self._fail(e, line)
            return None

    def boolean(self, key: str) -> bool | None:
        line = self._single(key)
        if line is None:
            return None
        try:
            return decode_boolean(line.value or "", key)
        except TypeMismatchError as e:
            self._fail(e, line)
            return None

    def numeric(self, key: str) -> str | None:
        """Return the value as text after checking that it is a number."""
        line = self._single(key)
        if line is None:
            return None
        try:
            text = decode_string(line.value or "")
            decode_numeric(text, key)
        except (ValueDecodeError, TypeMismatchError) as e:
            self._fail(e, line)
            return None
        return text

    def string_list(self, key: str) -> tuple[str, ...] | None:
        line = self._single(key)
        if line is None:
            return None
        try:
            return decode_list(line.value or "")
        except ValueDecodeError as e:
            e.message = f"{key}: {e.message}"
            self._fail(e, line)
            return None

    def _localized(self, key: str, decoder) -> list[tuple]:
        occurrences = []
        for line in self.group.lines_for(key):
            self.consumed.add((key, line.locale))
            try:
                value = decoder(line.value or "")
            except ValueDecodeError as e:
                e.message = f"{key}: {e.message}"
                self._fail(e, line)
                continue
            occurrences.append((line.locale, value, line.number))
        return occurrences

    def locale_string(self, key: str) -> LocaleString | None:
        if not self.group.lines_for(key):
            return None
        occurrences = self._localized(key, decode_string)
        return build_locale_string(key, occurrences, self.group.name)

    def locale_list(self, key: str) -> LocaleStringList | None:
        if not self.group.lines_for(key):
            return None
        occurrences = self._localized(key, decode_list)
        return build_locale_string_list(key, occurrences, self.group.name)

    def read(self, key: str, kind: ValueKind):
        """Read key according to its declared value kind."""
        if kind == "localestring":
            if key in LOCALIZED_LIST_KEYS:
                return self.locale_list(key)
            return self.locale_string(key)
        if kind == "boolean":
            return self.boolean(key)
        if kind == "numeric":
            return self.numeric(key)
        if kind == "list":
            return self.string_list(key)
        return self.string(key)

    def read_table(
        self, table: dict[str, tuple[str, ValueKind]]
    ) -> dict[str, object]:
        """Read every key of table, returning attribute -> value."""
        return {
            attribute: self.read(key, kind)
            for key, (attribute, kind) in table.items()
        }

    def require(self, key: str, value: object) -> None:
        if value is None:
            self.errors.append(
                MissingRequiredFieldError(
                    key, group=self.group.name, target=self.target
                )
            )

    def extra(self) -> RawGroup:
        """Return every key this reader did not consume."""
        return self.group.to_raw(skip=self.consumed)


def _read_entry_kind(reader: _FieldReader) -> EntryKind | None:
    line = reader.group.get(KEY_TYPE)
    if line is None:
        reader.require(KEY_TYPE, None)
        return None
    value = reader.string(KEY_TYPE)
    if value is None:
        return None
    try:
        return EntryKind(value)
    except ValueError:
        reader.errors.append(
            UnknownTypeError(
                value, line=line.number, group=reader.group.name
            )
        )
        return None


def _check_foreign_keys(
    reader: _FieldReader, kind: EntryKind, options: ParserOptions
) -> None:
    """Report or keep keys that belong to another entry type."""
    foreign = {
        key
        for other, table in _TYPE_KEYS.items()
        if other is not kind
        for key in table
        if key not in _TYPE_KEYS[kind]
    }
    for (key, _), line in reader.group.entries.items():
        if key not in foreign:
            continue
        if options.strict:
            reader.errors.append(
                ForbiddenFieldError(
                    key,
                    kind.value,
                    line=line.number,
                    group=reader.group.name,
                )
            )
        else:
            logger.warning(
                "%s on line %d is not valid for %s entries, keeping it as "
                "passthrough data",
                key,
                line.number,
                kind.value,
            )


def _build_entry_type(
    reader: _FieldReader, kind: EntryKind
) -> EntryType | None:
    values = reader.read_table(_TYPE_KEYS[kind])
    if kind is EntryKind.APPLICATION:
        return ApplicationFields(**values)
    if kind is EntryKind.LINK:
        reader.require("URL", values["url"])
        if values["url"] is None:
            return None
        return LinkFields(**values)
    return DirectoryFields()


def _build_action(
    identifier: str, group: AssembledGroup, errors: list[ParseError]
) -> DesktopAction | None:
    reader = _FieldReader(group, errors, target=identifier)
    values = reader.read_table(ACTION_KEYS)
    reader.require("Name", values["name"])
    if values["name"] is None:
        return None
    return DesktopAction(identifier=identifier, extra=reader.extra(), **values)


def _attach_actions(
    reader: _FieldReader,
    assembled: AssembledFile,
    errors: list[ParseError],
) -> tuple[dict[str, DesktopAction], dict[str, RawGroup]]:
    """Build the actions named in Actions, in listed order.

    Returns:
        The built actions, and the unreferenced action groups to keep as
        passthrough, keyed by group name.

    """
    line = reader.group.get(KEY_ACTIONS)
    identifiers = reader.string_list(KEY_ACTIONS) or ()

    actions: dict[str, DesktopAction] = {}
    for identifier in identifiers:
        if not identifier:
            logger.warning("Ignoring empty identifier in %s", KEY_ACTIONS)
            continue
        if identifier in actions:
            logger.warning("Action %s listed more than once", identifier)
            continue
        group = assembled.actions.get(identifier)
        if group is None:
            errors.append(
                DanglingActionReferenceError(
                    identifier,
                    line=line.number if line else None,
                    group=reader.group.name,
                )
            )
            continue
        action = _build_action(identifier, group, errors)
        if action is not None:
            actions[identifier] = action

    unreferenced: dict[str, RawGroup] = {}
    for identifier, group in assembled.actions.items():
        if identifier in identifiers:
            continue
        logger.warning(
            "[%s] on line %d is not listed in %s, keeping it as "
            "passthrough data",
            group.name,
            group.line,
            KEY_ACTIONS,
        )
        unreferenced[group.name] = group.to_raw()
    return actions, unreferenced


def _extra_groups(
    assembled: AssembledFile, unreferenced: dict[str, RawGroup]
) -> dict[str, RawGroup]:
    """Merge other groups and unreferenced action groups in file order."""
    ordered = sorted(
        [*assembled.others.values(), *assembled.actions.values()],
        key=lambda group: group.line,
    )
    extra: dict[str, RawGroup] = {}
    for group in ordered:
        if group.name in assembled.others:
            extra[group.name] = group.to_raw()
        elif group.name in unreferenced:
            extra[group.name] = unreferenced[group.name]
    return extra


def build(
    assembled: AssembledFile, options: ParserOptions | None = None
) -> DesktopFile:
    """Validate assembled groups and build the typed model.

    Args:
        assembled: Output of the group assembler.
        options: Parser options; strict mode reports keys of another
            entry type as ForbiddenFieldError.

    Returns:
        The parsed desktop file.

    Raises:
        EntryValidationError: With every field-level error, in file order.
        EntrySyntaxError: For a malformed locale tag.

    """
    options = options or ParserOptions()
    errors: list[ParseError] = []
    reader = _FieldReader(assembled.entry, errors)

    kind = _read_entry_kind(reader)
    common = reader.read_table(COMMON_KEYS)
    reader.require("Name", common["name"])

    entry_type: EntryType | None = None
    if kind is not None:
        _check_foreign_keys(reader, kind, options)
        entry_type = _build_entry_type(reader, kind)

    actions, unreferenced = _attach_actions(reader, assembled, errors)

    if errors:
        errors.sort(key=lambda e: (e.line is None, e.line or 0))
        logger.debug("Build failed with %d error(s)", len(errors))
        raise EntryValidationError(errors)

    entry = DesktopEntry(
        entry_type=entry_type,
        extra=reader.extra(),
        **common,
    )
    logger.debug(
        "Built %s entry with %d action(s)", entry.kind.value, len(actions)
    )
    return DesktopFile(
        entry=entry,
        actions=actions,
        extra_groups=_extra_groups(assembled, unreferenced),
    )
