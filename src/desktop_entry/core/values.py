"""Value decoding and encoding for desktop entry keys.

Decoding turns the raw text after "=" into Python values according to the
kind declared for the key; encoding is the exact inverse used by the
serializer.
"""

from __future__ import annotations

import re

from desktop_entry.exceptions import (
    TypeMismatchError,
    ValueDecodeError,
    ValueEncodeError,
)

_ESCAPES: dict[str, str] = {
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "s": " ",
}
_LIST_SEPARATOR = ";"
_FLOAT_RE = re.compile(
    r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$"
)


def _unescape(raw: str, *, in_list: bool) -> str:
    result: list[str] = []
    chars = iter(raw)
    for ch in chars:
        if ch != "\\":
            result.append(ch)
            continue
        nxt = next(chars, None)
        if nxt is None:
            msg = "unterminated escape sequence at end of value"
            raise ValueDecodeError(msg)
        if nxt in _ESCAPES:
            result.append(_ESCAPES[nxt])
        elif in_list and nxt == _LIST_SEPARATOR:
            result.append(_LIST_SEPARATOR)
        else:
            msg = f"invalid escape sequence '\\{nxt}'"
            raise ValueDecodeError(msg)
    return "".join(result)


def decode_string(raw: str) -> str:
    """Decode a string or localestring value.

    Raises:
        ValueDecodeError: On an unknown or unterminated escape.

    """
    return _unescape(raw, in_list=False)


def split_list(raw: str) -> list[str]:
    """Split raw on unescaped separators without decoding the elements.

    Exactly one trailing empty element, produced by the terminating
    separator, is dropped. An empty value yields an empty list.
    """
    if not raw:
        return []
    parts: list[str] = []
    current: list[str] = []
    escaped = False
    for ch in raw:
        if escaped:
            current.append(ch)
            escaped = False
        elif ch == "\\":
            current.append(ch)
            escaped = True
        elif ch == _LIST_SEPARATOR:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    if parts[-1] == "":
        parts.pop()
    return parts


def decode_list(raw: str) -> tuple[str, ...]:
    """Decode a semicolon-separated list value.

    Examples:
        >>> decode_list("a;b;c;")
        ('a', 'b', 'c')
        >>> decode_list("a\\\\;b;")
        ('a;b',)

    Raises:
        ValueDecodeError: On an unknown or unterminated escape.

    """
    return tuple(_unescape(part, in_list=True) for part in split_list(raw))


def decode_boolean(raw: str, field: str = "value") -> bool:
    """Decode a boolean; only the literals "true" and "false" are valid.

    Raises:
        TypeMismatchError: For anything else.

    """
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise TypeMismatchError(field, "boolean", raw)


def decode_numeric(raw: str, field: str = "value") -> float:
    """Decode a numeric value; the whole string must be a float literal.

    Raises:
        TypeMismatchError: If raw is not a floating-point literal.

    """
    if not _FLOAT_RE.match(raw):
        raise TypeMismatchError(field, "numeric", raw)
    return float(raw)


def encode_string(value: str) -> str:
    """Escape a string for output.

    Backslashes and control characters are escaped; leading and trailing
    spaces become "\\s" so that whitespace trimming on input keeps them.

    Raises:
        ValueEncodeError: If the value starts or ends with other
            whitespace, such as a no-break space, which has no escape and
            would be trimmed when read back.

    """
    return _check_edges(_escape(value), value)


def _escape(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\")
        .replace("\n", "\\n")
        .replace("\t", "\\t")
        .replace("\r", "\\r")
    )
    stripped = escaped.lstrip(" ")
    escaped = "\\s" * (len(escaped) - len(stripped)) + stripped
    stripped = escaped.rstrip(" ")
    return stripped + "\\s" * (len(escaped) - len(stripped))


def _check_edges(encoded: str, value: object) -> str:
    """Reject output whose edges the reader would trim as whitespace."""
    if encoded[:1].isspace() or encoded[-1:].isspace():
        msg = f"unescapable whitespace at the edge of {value!r}"
        raise ValueEncodeError(msg)
    return encoded


def encode_list(values: tuple[str, ...] | list[str]) -> str:
    """Encode a list, escaping separators and terminating with ";".

    Raises:
        ValueEncodeError: If the first element starts with whitespace
            that has no escape.

    """
    encoded = "".join(
        _escape(item).replace(_LIST_SEPARATOR, "\\;")
        + _LIST_SEPARATOR
        for item in values
    )
    return _check_edges(encoded, values)


def encode_boolean(value: bool) -> str:  # noqa: FBT001
    """Encode a boolean as "true" or "false"."""
    return "true" if value else "false"
