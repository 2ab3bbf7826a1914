"""Convert resolved string values into a field's declared kind."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Final

from pydantic import TypeAdapter, ValidationError

from glueconf.binding.descriptors import FieldDescriptor, FieldKind
from glueconf.errors import (
    InvalidBooleanFormatError,
    InvalidDateFormatError,
    InvalidEnumValueError,
    InvalidNumberFormatError,
)

_FLOAT: Final = TypeAdapter(float)
_INT: Final = TypeAdapter(int)
_DATETIME: Final = TypeAdapter(datetime)
_DATE: Final = TypeAdapter(date)

_BOOLEANS: Final = {"true": True, "false": False}

# pydantic reads a bare number as a Unix timestamp; settings dates must be written out
_NUMERIC: Final = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)\s*")


def to_number(key: str, value: str, field: FieldDescriptor) -> float | int:
    if "_" in value:
        raise InvalidNumberFormatError(key, value, field.name)
    adapter = _INT if field.kind is FieldKind.INT else _FLOAT
    try:
        return adapter.validate_python(value)
    except ValidationError as exc:
        raise InvalidNumberFormatError(key, value, field.name, exc) from exc


def to_bool(key: str, value: str, field: FieldDescriptor) -> bool:
    try:
        return _BOOLEANS[value.strip().lower()]
    except KeyError as exc:
        raise InvalidBooleanFormatError(key, value, field.name, exc) from exc


def to_enum(key: str, value: str, field: FieldDescriptor) -> Any:
    """Look up an enum member by its (case-sensitive) name."""
    enum_type = field.enum_type
    assert enum_type is not None
    try:
        return enum_type[value]
    except KeyError as exc:
        raise InvalidEnumValueError(
            key, value, field.name, allowed=list(enum_type.__members__), original_error=exc
        ) from exc


def to_datetime(key: str, value: str, field: FieldDescriptor) -> datetime | date:
    """Parse an ISO 8601 date or date/time for DATETIME and DATE fields."""
    if _NUMERIC.fullmatch(value):
        raise InvalidDateFormatError(key, value, field.name)
    adapter = _DATE if field.kind is FieldKind.DATE else _DATETIME
    try:
        return adapter.validate_python(value)
    except ValidationError as exc:
        raise InvalidDateFormatError(key, value, field.name, exc) from exc


def coerce_value(key: str, value: str, field: FieldDescriptor) -> Any:
    """Convert *value* for a single (non-list) field.

    Args:
        key: Setting name, reported in errors
        value: Resolved string value
        field: Destination field (or list element) descriptor

    Returns:
        The converted value; strings and unknown kinds pass through as-is

    Raises:
        CoercionError: A subclass matching the failed conversion
    """
    if field.kind in (FieldKind.FLOAT, FieldKind.INT):
        return to_number(key, value, field)
    if field.kind is FieldKind.BOOL:
        return to_bool(key, value, field)
    if field.kind is FieldKind.ENUM:
        return to_enum(key, value, field)
    if field.kind in (FieldKind.DATETIME, FieldKind.DATE):
        return to_datetime(key, value, field)
    return value
