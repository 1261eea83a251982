"""Exception classes for desktop-entry operations.

Structural and lexical errors are raised as soon as they are found.
Field-level errors are collected by the entry builder and raised together
inside an :class:`EntryValidationError`.
"""


class DesktopEntryError(Exception):
    """Base exception for desktop-entry operations."""

    error_prefix: str = "Desktop entry error"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the entry or action that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class ParseError(DesktopEntryError):
    """Base class for errors tied to a position in the input."""

    error_prefix = "Parse error"

    def __init__(
        self,
        message: str,
        line: int | None = None,
        group: str | None = None,
        target: str | None = None,
    ) -> None:
        """Initialize parse error.

        Args:
            message: Error message.
            line: 1-based line number, when known.
            group: Name of the enclosing group, when known.
            target: Optional entry or action identifier.

        """
        super().__init__(message, target)
        self.line = line
        self.group = group

    def __str__(self) -> str:
        """Format error message with position information."""
        parts = []
        if self.line is not None:
            parts.append(f"line {self.line}")
        if self.group:
            parts.append(f"[{self.group}]")
        base = super().__str__()
        if parts:
            return f"{base} ({', '.join(parts)})"
        return base


class EntrySyntaxError(ParseError):
    """Raised for malformed lines and misplaced key lines."""

    error_prefix = "Syntax error"


class ValueDecodeError(EntrySyntaxError):
    """Raised for invalid or unterminated escape sequences."""

    error_prefix = "Invalid value"


class DuplicateKeyError(EntrySyntaxError):
    """Raised in strict mode when a key is repeated within a group."""

    error_prefix = "Duplicate key"


class MissingGroupError(ParseError):
    """Raised when [Desktop Entry] is absent or is not the first group."""

    error_prefix = "Missing group"


class DuplicateGroupError(ParseError):
    """Raised when a group name appears more than once."""

    error_prefix = "Duplicate group"


class UnknownTypeError(ParseError):
    """Raised when Type is not Application, Link or Directory."""

    error_prefix = "Unknown type"

    def __init__(
        self,
        value: str,
        line: int | None = None,
        group: str | None = None,
    ) -> None:
        """Initialize with the rejected Type value."""
        super().__init__(
            f"'{value}' is not one of Application, Link, Directory",
            line=line,
            group=group,
        )
        self.value = value


class MissingRequiredFieldError(ParseError):
    """Raised when a required key is absent."""

    error_prefix = "Missing required field"

    def __init__(
        self,
        field: str,
        group: str | None = None,
        target: str | None = None,
    ) -> None:
        """Initialize with the missing key name.

        Args:
            field: Name of the missing key.
            group: Group that should contain the key.
            target: Entry or action identifier.

        """
        super().__init__(field, group=group, target=target)
        self.field = field


class TypeMismatchError(ParseError):
    """Raised when a value does not match its key's declared kind."""

    error_prefix = "Type mismatch"

    def __init__(
        self,
        field: str,
        expected: str,
        value: str,
        line: int | None = None,
        group: str | None = None,
    ) -> None:
        """Initialize type mismatch error.

        Args:
            field: Name of the offending key.
            expected: Kind the key requires (boolean, numeric, ...).
            value: Raw value found in the file.
            line: 1-based line number.
            group: Enclosing group name.

        """
        super().__init__(
            f"{field} expects a {expected} value, got '{value}'",
            line=line,
            group=group,
        )
        self.field = field
        self.expected = expected
        self.value = value


class DanglingActionReferenceError(ParseError):
    """Raised when Actions names an identifier with no action group."""

    error_prefix = "Dangling action reference"

    def __init__(
        self,
        identifier: str,
        line: int | None = None,
        group: str | None = None,
    ) -> None:
        """Initialize with the unmatched action identifier."""
        super().__init__(
            f"no [Desktop Action {identifier}] group",
            line=line,
            group=group,
            target=identifier,
        )
        self.identifier = identifier


class ForbiddenFieldError(ParseError):
    """Raised in strict mode for a key that is invalid for the entry type."""

    error_prefix = "Forbidden field"

    def __init__(
        self,
        field: str,
        entry_type: str,
        line: int | None = None,
        group: str | None = None,
    ) -> None:
        """Initialize with the key and the entry type rejecting it."""
        super().__init__(
            f"{field} is not valid for {entry_type} entries",
            line=line,
            group=group,
        )
        self.field = field
        self.entry_type = entry_type


class EntryValidationError(ParseError):
    """Collection of field-level errors found while building the model."""

    error_prefix = "Validation failed"

    def __init__(self, errors: list[ParseError]) -> None:
        """Initialize with the collected errors, in file order."""
        self.errors = list(errors)
        summary = "; ".join(str(error) for error in self.errors)
        super().__init__(f"{len(self.errors)} error(s): {summary}")

    def of_type(self, error_type: type[ParseError]) -> list[ParseError]:
        """Return the collected errors that are instances of error_type."""
        return [e for e in self.errors if isinstance(e, error_type)]


class ValueEncodeError(DesktopEntryError):
    """Raised when a value cannot be written so that it reads back equal."""

    error_prefix = "Cannot encode value"


class SchemaValidationError(DesktopEntryError):
    """Raised when JSON schema validation fails."""

    error_prefix = "Schema validation failed"

    def __init__(
        self,
        message: str,
        path: str | None = None,
        schema_type: str | None = None,
    ) -> None:
        """Initialize schema validation error.

        Args:
            message: Error message
            path: JSON path where error occurred
            schema_type: Type of schema being validated

        """
        super().__init__(message)
        self.path = path
        self.schema_type = schema_type

    def __str__(self) -> str:
        """Format error message with path information."""
        parts = []
        if self.schema_type:
            parts.append(f"[{self.schema_type}]")
        if self.path:
            parts.append(f"at '{self.path}'")
        if parts:
            return f"{' '.join(parts)}: {self.message}"
        return self.message


class ConfigurationError(DesktopEntryError):
    """Error in logging or settings configuration."""

    error_prefix = "Configuration error"
