"""Exception classes for loading, binding and persisting settings.

Every error raised by the package derives from :class:`GlueConfError`, and
each one also derives from the builtin exception a caller would naturally
expect (``FileNotFoundError``, ``ValueError``), so both styles of
``except`` clause work.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence


class GlueConfError(Exception):
    """Base error for settings handling.

    Carries the human-readable message and, when known, the settings
    file the error relates to.
    """

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            path: Settings file involved, if any
        """
        super().__init__(message)
        self.message: str = message
        self.path: Optional[Path] = path


class SettingsFileNotFoundError(GlueConfError, FileNotFoundError):
    """Raised when the settings file to load or update does not exist."""

    def __init__(self, path: Path, message: Optional[str] = None) -> None:
        super().__init__(message or f"Failed to locate config file {path}", path)


class DuplicateKeyError(GlueConfError, ValueError):
    """Raised when the same name is defined twice in one settings file."""

    def __init__(self, name: str, path: Optional[Path] = None) -> None:
        """Initialize with the duplicated name.

        Args:
            name: Setting name that appears twice
            path: Settings file being parsed
        """
        source = str(path) if path is not None else "the config file"
        super().__init__(
            f"Key already exists: check {source} for duplicate settings of '{name}'. "
            "You may have accidentally commented/uncommented one so it appears twice",
            path,
        )
        self.name: str = name


class CoercionError(GlueConfError, ValueError):
    """Raised when a setting value cannot be converted to a field's type."""

    kind: str = "value"

    def __init__(
        self,
        key: str,
        value: str,
        field: str,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize with conversion details.

        Args:
            key: Setting name from the file
            value: Raw string value that failed to convert
            field: Name of the target field
            original_error: The original exception that was caught
        """
        super().__init__(f"Invalid {self.kind} for '{key}' (field '{field}'): {value!r}")
        self.key: str = key
        self.value: str = value
        self.field: str = field
        self.original_error: Optional[Exception] = original_error


class InvalidNumberFormatError(CoercionError):
    """Raised when a value is not a valid integer or decimal number."""

    kind = "number"


class InvalidBooleanFormatError(CoercionError):
    """Raised when a value is neither ``true`` nor ``false``."""

    kind = "boolean"


class InvalidDateFormatError(CoercionError):
    """Raised when a value cannot be parsed as a date/time."""

    kind = "date"


class InvalidEnumValueError(CoercionError):
    """Raised when a value names no member of the target enum."""

    kind = "enum value"

    def __init__(
        self,
        key: str,
        value: str,
        field: str,
        allowed: Sequence[str] = (),
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(key, value, field, original_error)
        self.allowed: tuple[str, ...] = tuple(allowed)
        if self.allowed:
            self.message = f"{self.message}; expected one of {', '.join(self.allowed)}"
            self.args = (self.message,)


class UnmatchedFieldError(GlueConfError, LookupError):
    """Raised by a strict bind when a setting has no field to land on."""

    def __init__(self, key: str, target_type: str) -> None:
        super().__init__(
            f"Your config file had a setting for '{key}' but no member variable was found "
            f"in {target_type} to glue this on to"
        )
        self.key: str = key


class UnmatchedKeyError(GlueConfError, LookupError):
    """Raised by a strict persist when the file has no line for the name."""

    def __init__(self, name: str, path: Path) -> None:
        super().__init__(f"No '{name}=' line found in {path}", path)
        self.name: str = name
