"""In-code parser configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserOptions:
    """Options controlling how strictly input is checked.

    Attributes:
        strict: Reject duplicate keys within a group and report keys that
            belong to another entry type, instead of last-wins and
            passthrough.
        locales: Preferred locales used by callers that display resolved
            values; empty means the process environment.

    """

    strict: bool = False
    locales: tuple[str, ...] = ()
