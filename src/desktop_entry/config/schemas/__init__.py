"""JSON Schema validation package for desktop-entry.

This package provides JSON Schema validation for:
- The settings file (settings.conf), after INI parsing
- The JSON export of a parsed desktop file

Usage:
    from desktop_entry.config.schemas import (
        validate_desktop_file,
        SchemaValidationError,
    )

    try:
        validate_desktop_file(document)
    except SchemaValidationError as e:
        print(f"Validation failed: {e}")
"""

from desktop_entry.config.schemas.validator import (
    SchemaValidator,
    get_validator,
    validate_desktop_file,
    validate_settings,
)
from desktop_entry.exceptions import SchemaValidationError

__all__ = [
    "SchemaValidationError",
    "SchemaValidator",
    "get_validator",
    "validate_desktop_file",
    "validate_settings",
]
