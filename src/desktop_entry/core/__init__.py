"""Parsing engine: lexer, value codec, locale handling, assembler,
builder and serializer."""

from desktop_entry.core.builder import build
from desktop_entry.core.groups import AssembledFile, AssembledGroup, assemble
from desktop_entry.core.lexer import Line, LineKind, classify_line, tokenize
from desktop_entry.core.locale import LocaleTag, resolve, system_locales
from desktop_entry.core.serializer import serialize

__all__ = [
    "AssembledFile",
    "AssembledGroup",
    "Line",
    "LineKind",
    "LocaleTag",
    "assemble",
    "build",
    "classify_line",
    "resolve",
    "serialize",
    "system_locales",
    "tokenize",
]
