"""Tests for the group assembler."""

import logging

import pytest

from desktop_entry.core.groups import action_identifier, assemble
from desktop_entry.core.lexer import tokenize
from desktop_entry.exceptions import (
    DuplicateGroupError,
    DuplicateKeyError,
    EntrySyntaxError,
    MissingGroupError,
)
from desktop_entry.models import RawGroup


def _assemble(text: str, *, strict: bool = False):
    return assemble(tokenize(text), strict=strict)


def test_groups_are_collected_in_file_order() -> None:
    assembled = _assemble(
        "# header comment\n"
        "[Desktop Entry]\n"
        "Name=App\n"
        "[Desktop Action b]\n"
        "Name=B\n"
        "[X-Other]\n"
        "Key=1\n"
        "[Desktop Action a]\n"
        "Name=A\n"
    )

    assert assembled.entry.name == "Desktop Entry"
    assert assembled.entry.get("Name").value == "App"
    assert list(assembled.actions) == ["b", "a"]
    assert assembled.actions["a"].line == 8
    assert list(assembled.others) == ["X-Other"]


def test_localized_lines_are_separate_entries() -> None:
    assembled = _assemble("[Desktop Entry]\nName=App\nName[de]=Anwendung\n")

    lines = assembled.entry.lines_for("Name")

    assert [line.locale for line in lines] == [None, "de"]
    assert assembled.entry.get("Name", "de").value == "Anwendung"


def test_to_raw_keeps_order_and_skips() -> None:
    assembled = _assemble("[Desktop Entry]\nB=2\nA=1\nA[de]=eins\n")

    raw = assembled.entry.to_raw(skip=[("B", None)])

    assert raw == RawGroup({("A", None): "1", ("A", "de"): "eins"})


def test_key_before_group() -> None:
    with pytest.raises(EntrySyntaxError, match="before any group") as exc:
        _assemble("Name=App\n[Desktop Entry]\n")

    assert exc.value.line == 1


def test_first_group_must_be_desktop_entry() -> None:
    with pytest.raises(MissingGroupError) as exc_info:
        _assemble("[X-Other]\nKey=1\n[Desktop Entry]\nName=App\n")

    assert exc_info.value.group == "X-Other"
    assert exc_info.value.line == 1


@pytest.mark.parametrize("text", ["", "# only a comment\n", "\n\n"])
def test_missing_desktop_entry(text: str) -> None:
    with pytest.raises(MissingGroupError, match="no \\[Desktop Entry\\]"):
        _assemble(text)


def test_repeated_desktop_entry() -> None:
    with pytest.raises(DuplicateGroupError) as exc_info:
        _assemble("[Desktop Entry]\nName=A\n[Desktop Entry]\nName=B\n")

    assert exc_info.value.line == 3


def test_repeated_other_group() -> None:
    with pytest.raises(DuplicateGroupError):
        _assemble("[Desktop Entry]\n[X-A]\n[X-B]\n[X-A]\n")


def test_duplicate_key_last_wins(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="desktop_entry"):
        assembled = _assemble("[Desktop Entry]\nName=First\nName=Second\n")

    assert assembled.entry.get("Name").value == "Second"
    assert "Duplicate key Name" in caplog.text


def test_duplicate_key_strict() -> None:
    with pytest.raises(DuplicateKeyError) as exc_info:
        _assemble(
            "[Desktop Entry]\nName[de]=A\nName[de]=B\n", strict=True
        )

    assert exc_info.value.line == 3
    assert "Name[de]" in str(exc_info.value)
    assert isinstance(exc_info.value, EntrySyntaxError)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Desktop Action new-window", "new-window"),
        ("Desktop Action ", None),
        ("Desktop Entry", None),
        ("X-Desktop Action foo", None),
    ],
)
def test_action_identifier(name: str, expected: str | None) -> None:
    assert action_identifier(name) == expected
