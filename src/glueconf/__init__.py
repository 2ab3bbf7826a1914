"""Load flat ``name=value`` settings files and glue them onto objects."""

from glueconf.binding import FieldDescriptor, FieldKind, bind_settings
from glueconf.context import SettingsContext
from glueconf.errors import (
    CoercionError,
    DuplicateKeyError,
    GlueConfError,
    InvalidBooleanFormatError,
    InvalidDateFormatError,
    InvalidEnumValueError,
    InvalidNumberFormatError,
    SettingsFileNotFoundError,
    UnmatchedFieldError,
    UnmatchedKeyError,
)
from glueconf.parser import parse_lines
from glueconf.persister import persist_setting
from glueconf.resolver import ResolvedSettings, resolve

__all__ = [
    "CoercionError",
    "DuplicateKeyError",
    "FieldDescriptor",
    "FieldKind",
    "GlueConfError",
    "InvalidBooleanFormatError",
    "InvalidDateFormatError",
    "InvalidEnumValueError",
    "InvalidNumberFormatError",
    "ResolvedSettings",
    "SettingsContext",
    "SettingsFileNotFoundError",
    "UnmatchedFieldError",
    "UnmatchedKeyError",
    "bind_settings",
    "parse_lines",
    "persist_setting",
    "resolve",
]
