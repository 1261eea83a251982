"""Tests for the JSON schema validator."""

import pytest

from desktop_entry.config.schemas import (
    SchemaValidationError,
    SchemaValidator,
    get_validator,
    validate_settings,
)


def test_get_validator_is_cached() -> None:
    assert get_validator() is get_validator()


def test_valid_settings() -> None:
    validate_settings(
        {
            "parser": {"strict": "true"},
            "locale": {"preferred": "de_DE.UTF-8@euro;fr"},
            "logging": {"console_log_level": "INFO", "log_level": "DEBUG"},
        }
    )


def test_empty_settings_are_valid() -> None:
    SchemaValidator().validate_settings({})


def test_invalid_locale_characters() -> None:
    with pytest.raises(SchemaValidationError) as exc_info:
        validate_settings({"locale": {"preferred": "de$DE"}})

    assert exc_info.value.path == "locale.preferred"


def test_enum_error_message() -> None:
    with pytest.raises(SchemaValidationError, match="Invalid value"):
        validate_settings({"logging": {"log_level": "TRACE"}})
