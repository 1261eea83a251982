"""Parse and write freedesktop.org Desktop Entry files.

Usage:
    >>> from desktop_entry import parse, resolve, serialize
    >>> desktop_file = parse(text)
    >>> resolve(desktop_file.entry.name, "de_DE")
    'Webbrowser'
    >>> serialize(desktop_file)
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from desktop_entry.config.options import ParserOptions
from desktop_entry.core import assemble, build, resolve, serialize, tokenize
from desktop_entry.exceptions import (
    ConfigurationError,
    DanglingActionReferenceError,
    DesktopEntryError,
    DuplicateGroupError,
    DuplicateKeyError,
    EntrySyntaxError,
    EntryValidationError,
    ForbiddenFieldError,
    MissingGroupError,
    MissingRequiredFieldError,
    ParseError,
    SchemaValidationError,
    TypeMismatchError,
    UnknownTypeError,
    ValueDecodeError,
    ValueEncodeError,
)
from desktop_entry.logger import get_logger
from desktop_entry.models import (
    ApplicationFields,
    DesktopAction,
    DesktopEntry,
    DesktopFile,
    DirectoryFields,
    EntryKind,
    LinkFields,
    LocaleString,
    LocaleStringList,
    RawGroup,
)

try:
    __version__ = version("desktop-entry")
except PackageNotFoundError:
    __version__ = "dev"

logger = get_logger(__name__)


def parse(
    text: str,
    *,
    strict: bool = False,
    options: ParserOptions | None = None,
) -> DesktopFile:
    """Parse desktop entry text into the typed model.

    Args:
        text: File content.
        strict: Reject duplicate keys and keys of another entry type.
            Ignored when options is given.
        options: Full parser options.

    Returns:
        The parsed desktop file.

    Raises:
        EntrySyntaxError: For a malformed line or locale tag.
        MissingGroupError: If [Desktop Entry] is absent or not first.
        DuplicateGroupError: If a group name repeats.
        EntryValidationError: With every field-level error found.

    """
    options = options or ParserOptions(strict=strict)
    assembled = assemble(tokenize(text), strict=options.strict)
    return build(assembled, options)


def parse_file(
    path: str | Path,
    *,
    strict: bool = False,
    options: ParserOptions | None = None,
) -> DesktopFile:
    """Read a UTF-8 desktop file and parse it.

    A parse failure carries the file name as its target unless the error
    already names an entry or action.

    Raises:
        OSError: If the file cannot be read.
        DesktopEntryError: Any error raised by parse().

    """
    file_path = Path(path)
    logger.debug("Parsing %s", file_path)
    text = file_path.read_text(encoding="utf-8")
    try:
        return parse(text, strict=strict, options=options)
    except DesktopEntryError as e:
        if e.target is None:
            e.target = file_path.name
        raise


__all__ = [
    "ApplicationFields",
    "ConfigurationError",
    "DanglingActionReferenceError",
    "DesktopAction",
    "DesktopEntry",
    "DesktopEntryError",
    "DesktopFile",
    "DirectoryFields",
    "DuplicateGroupError",
    "DuplicateKeyError",
    "EntryKind",
    "EntrySyntaxError",
    "EntryValidationError",
    "ForbiddenFieldError",
    "LinkFields",
    "LocaleString",
    "LocaleStringList",
    "MissingGroupError",
    "MissingRequiredFieldError",
    "ParseError",
    "ParserOptions",
    "RawGroup",
    "SchemaValidationError",
    "TypeMismatchError",
    "UnknownTypeError",
    "ValueDecodeError",
    "ValueEncodeError",
    "__version__",
    "parse",
    "parse_file",
    "resolve",
    "serialize",
]
