"""Line classifier for desktop entry text.

Splits raw text into comment, blank, group header and key lines. The lexer
knows nothing about which groups are valid; that is the assembler's job.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from desktop_entry.exceptions import EntrySyntaxError

_KEY_NAME_RE = re.compile(r"^[A-Za-z0-9-]+$")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")


class LineKind(Enum):
    """Classification of a single input line."""

    COMMENT = "comment"
    BLANK = "blank"
    GROUP = "group"
    KEY = "key"


@dataclass(frozen=True)
class Line:
    """A classified input line.

    Attributes:
        kind: Line classification.
        number: 1-based line number.
        text: The line with surrounding whitespace removed.
        group: Group name, for GROUP lines.
        key: Key name, for KEY lines.
        locale: Raw locale tag from the [..] suffix, for KEY lines.
        value: Raw (still escaped) value, for KEY lines.

    """

    kind: LineKind
    number: int
    text: str
    group: str | None = None
    key: str | None = None
    locale: str | None = None
    value: str | None = None


def _parse_group_header(text: str, number: int) -> Line:
    name = text[1:-1]
    if "[" in name or "]" in name:
        msg = f"unexpected bracket in group header '{text}'"
        raise EntrySyntaxError(msg, line=number)
    if _CONTROL_RE.search(name):
        msg = "control character in group header"
        raise EntrySyntaxError(msg, line=number)
    if not name.strip():
        msg = "empty group name"
        raise EntrySyntaxError(msg, line=number)
    return Line(LineKind.GROUP, number, text, group=name)


def _split_locale(name: str) -> tuple[str, str | None]:
    """Split "Key[locale]" into key and locale; brackets are not checked."""
    if not name.endswith("]"):
        return name, None
    start = name.rfind("[")
    if start == -1:
        return name, None
    return name[:start].rstrip(), name[start + 1 : -1]


def _parse_key_line(text: str, number: int) -> Line:
    name, separator, value = text.partition("=")
    if not separator:
        msg = f"expected 'Key=Value' or '[Group]', got '{text}'"
        raise EntrySyntaxError(msg, line=number)

    key, locale = _split_locale(name.rstrip())
    if not _KEY_NAME_RE.match(key):
        msg = f"invalid key name '{key}', only A-Za-z0-9- are allowed"
        raise EntrySyntaxError(msg, line=number)

    if locale is not None:
        if not locale:
            msg = f"empty locale suffix on key '{key}'"
            raise EntrySyntaxError(msg, line=number)
        if "[" in locale or "]" in locale:
            msg = f"unexpected bracket in locale suffix of key '{key}'"
            raise EntrySyntaxError(msg, line=number)

    return Line(
        LineKind.KEY,
        number,
        text,
        key=key,
        locale=locale,
        value=value.lstrip(),
    )


def classify_line(raw: str, number: int) -> Line:
    """Classify a single raw line.

    Args:
        raw: Line content without its line terminator.
        number: 1-based line number for error reporting.

    Returns:
        The classified line.

    Raises:
        EntrySyntaxError: If the line is neither comment, blank, group
            header nor a well-formed key line.

    """
    text = raw.strip()
    if not text:
        return Line(LineKind.BLANK, number, text)
    if text.startswith("#"):
        return Line(LineKind.COMMENT, number, text)
    if text.startswith("["):
        if not text.endswith("]"):
            msg = f"unterminated group header '{text}'"
            raise EntrySyntaxError(msg, line=number)
        return _parse_group_header(text, number)
    return _parse_key_line(text, number)


def tokenize(text: str) -> Iterator[Line]:
    """Yield classified lines for text.

    Lines are split on "\\n"; a trailing "\\r" is dropped with the rest of
    the surrounding whitespace.

    Raises:
        EntrySyntaxError: On the first malformed line.

    """
    for number, raw in enumerate(text.split("\n"), 1):
        yield classify_line(raw, number)
