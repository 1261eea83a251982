"""JSON Schema validation for settings and exported desktop files.

Schemas live next to this module and are loaded with orjson; validation
uses Draft 7 and reports the most relevant error through best_match.
"""

from pathlib import Path
from typing import Any

import orjson
from jsonschema import Draft7Validator, ValidationError
from jsonschema.exceptions import best_match

from desktop_entry.exceptions import SchemaValidationError
from desktop_entry.logger import get_logger

logger = get_logger(__name__)

# Schema file paths
SCHEMA_DIR = Path(__file__).parent
SETTINGS_SCHEMA_PATH = SCHEMA_DIR / "settings.schema.json"
DESKTOP_FILE_SCHEMA_PATH = SCHEMA_DIR / "desktop_file.schema.json"


class SchemaValidator:
    """Validates settings and export documents against JSON schemas."""

    def __init__(self) -> None:
        """Initialize validator with loaded schemas."""
        self._settings_validator = Draft7Validator(
            self._load_schema(SETTINGS_SCHEMA_PATH)
        )
        self._desktop_file_validator = Draft7Validator(
            self._load_schema(DESKTOP_FILE_SCHEMA_PATH)
        )

    @staticmethod
    def _load_schema(schema_path: Path) -> dict[str, Any]:
        """Load JSON schema from file.

        Args:
            schema_path: Path to schema file

        Returns:
            Loaded schema dictionary

        Raises:
            FileNotFoundError: If schema file doesn't exist
            ValueError: If schema JSON is invalid

        """
        if not schema_path.exists():
            msg = f"Schema file not found: {schema_path}"
            raise FileNotFoundError(msg)

        try:
            with schema_path.open("rb") as f:
                return orjson.loads(f.read())  # type: ignore[no-any-return]
        except orjson.JSONDecodeError as e:
            msg = f"Invalid JSON in schema file {schema_path}: {e}"
            raise ValueError(msg) from e

    @staticmethod
    def _error_path(error: ValidationError) -> str | None:
        if not error.absolute_path:
            return None
        return ".".join(str(p) for p in error.absolute_path)

    @staticmethod
    def _format_validation_error(error: ValidationError) -> str:
        """Format validation error into user-friendly message.

        Args:
            error: Validation error from jsonschema

        Returns:
            Formatted error message

        """
        path = SchemaValidator._error_path(error) or "root"
        message = error.message

        if error.validator == "required":
            missing = (
                error.message.split("'")[1]
                if "'" in error.message
                else "unknown"
            )
            message = f"Missing required field: '{missing}'"
        elif error.validator == "enum":
            message = f"Invalid value. {error.message}"
        elif error.validator == "const":
            expected = error.validator_value
            message = (
                f"Expected constant value '{expected}', got '{error.instance}'"
            )
        elif error.validator == "type":
            expected_type = error.validator_value
            actual = type(error.instance).__name__
            message = f"Expected type '{expected_type}', got '{actual}'"
        elif error.validator == "additionalProperties":
            message = f"Unknown option. {error.message}"

        return f"{message} (at '{path}')"

    def _validate(
        self,
        validator: Draft7Validator,
        document: dict[str, Any],
        schema_type: str,
    ) -> None:
        errors = list(validator.iter_errors(document))
        if not errors:
            logger.debug("%s validation passed", schema_type)
            return

        best_error = best_match(errors)
        raise SchemaValidationError(
            self._format_validation_error(best_error),
            path=self._error_path(best_error),
            schema_type=schema_type,
        )

    def validate_settings(self, settings: dict[str, Any]) -> None:
        """Validate raw settings values read from settings.conf.

        Args:
            settings: Section name -> option name -> raw string value

        Raises:
            SchemaValidationError: If validation fails

        """
        self._validate(self._settings_validator, settings, "settings")

    def validate_desktop_file(self, document: dict[str, Any]) -> None:
        """Validate the JSON form of a desktop file.

        Args:
            document: Dictionary produced by export.to_dict or read back
                from JSON

        Raises:
            SchemaValidationError: If validation fails

        """
        self._validate(
            self._desktop_file_validator, document, "desktop_file"
        )


# Global validator instance
_validator: SchemaValidator | None = None


def get_validator() -> SchemaValidator:
    """Get or create global validator instance."""
    global _validator  # noqa: PLW0603
    if _validator is None:
        _validator = SchemaValidator()
    return _validator


def validate_settings(settings: dict[str, Any]) -> None:
    """Validate raw settings values (convenience function).

    Raises:
        SchemaValidationError: If validation fails

    """
    get_validator().validate_settings(settings)


def validate_desktop_file(document: dict[str, Any]) -> None:
    """Validate an exported desktop file (convenience function).

    Raises:
        SchemaValidationError: If validation fails

    """
    get_validator().validate_desktop_file(document)
