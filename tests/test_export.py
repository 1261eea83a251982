"""Tests for the JSON export of the model."""

import orjson
import pytest

from desktop_entry import parse
from desktop_entry.exceptions import SchemaValidationError
from desktop_entry.export import (
    FORMAT_VERSION,
    dumps,
    from_dict,
    loads,
    to_dict,
)


def test_firefox_to_dict(firefox_text: str) -> None:
    assert to_dict(parse(firefox_text)) == {
        "format_version": FORMAT_VERSION,
        "entry": {
            "type": "Application",
            "name": {"default": "Firefox", "variants": {"de": "Feuerfuchs"}},
            "fields": {
                "exec": "firefox %u",
                "categories": ["Network", "WebBrowser"],
            },
        },
    }


def test_full_to_dict_sections(full_text: str) -> None:
    data = to_dict(parse(full_text))

    assert [action["id"] for action in data["actions"]] == [
        "new-window",
        "preferences",
    ]
    assert data["actions"][1]["extra"] == [["X-Action-Flag", None, "1"]]
    assert data["extra_groups"] == [
        {
            "name": "X-Vendor Data",
            "entries": [["Key", None, "value"], ["Other", "de", "Wert"]],
        }
    ]
    assert data["entry"]["fields"]["keywords"] == {
        "default": ["text", "editor"],
        "variants": {"de": ["Text", "Editor"]},
    }
    assert data["entry"]["version"] == "1.5"


def test_dumps_loads_round_trip(full_text: str) -> None:
    parsed = parse(full_text)

    text = dumps(parsed)

    assert text.startswith("{\n  ")
    assert loads(text) == parsed
    assert loads(text.encode("utf-8")) == parsed


def test_link_and_directory_round_trip() -> None:
    link = parse("[Desktop Entry]\nType=Link\nName=L\nURL=https://x.test\n")
    directory = parse("[Desktop Entry]\nType=Directory\nName=D\nHidden=true\n")

    assert from_dict(to_dict(link)) == link
    assert from_dict(to_dict(directory)) == directory


class TestValidation:
    """Documents are checked against the export schema."""

    def test_invalid_json(self) -> None:
        with pytest.raises(SchemaValidationError, match="Invalid JSON"):
            loads("{not json")

    def test_not_an_object(self) -> None:
        with pytest.raises(SchemaValidationError, match="JSON object"):
            loads("[]")

    def test_missing_name(self) -> None:
        document = {"format_version": 1, "entry": {"type": "Application"}}

        with pytest.raises(SchemaValidationError) as exc_info:
            from_dict(document)

        assert exc_info.value.schema_type == "desktop_file"
        assert "name" in str(exc_info.value)

    def test_unknown_type(self) -> None:
        document = {
            "format_version": 1,
            "entry": {"type": "Service", "name": {"default": "S"}},
        }

        with pytest.raises(SchemaValidationError):
            from_dict(document)

    def test_link_requires_url(self) -> None:
        document = {
            "format_version": 1,
            "entry": {"type": "Link", "name": {"default": "L"}, "fields": {}},
        }

        with pytest.raises(SchemaValidationError) as exc_info:
            from_dict(document)

        assert "url" in str(exc_info.value)

    def test_wrong_field_type(self) -> None:
        document = {
            "format_version": 1,
            "entry": {
                "type": "Application",
                "name": {"default": "A"},
                "fields": {"terminal": "yes"},
            },
        }

        with pytest.raises(SchemaValidationError) as exc_info:
            from_dict(document)

        assert exc_info.value.path == "entry.fields.terminal"

    def test_unsupported_format_version(self) -> None:
        document = {
            "format_version": 2,
            "entry": {"type": "Directory", "name": {"default": "D"}},
        }

        with pytest.raises(SchemaValidationError, match="format_version"):
            from_dict(document)

    def test_duplicate_action_id(self) -> None:
        action = {"id": "go", "name": {"default": "Go"}}
        document = {
            "format_version": 1,
            "entry": {"type": "Application", "name": {"default": "A"}},
            "actions": [action, action],
        }

        with pytest.raises(SchemaValidationError, match="Duplicate action"):
            from_dict(document)


def test_dumps_output_is_valid_json(firefox_text: str) -> None:
    data = orjson.loads(dumps(parse(firefox_text)))

    assert data["entry"]["name"]["default"] == "Firefox"
