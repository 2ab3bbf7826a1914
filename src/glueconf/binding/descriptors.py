"""Discover the bindable fields of a target object.

A target's fields are found through its type annotations (across the
MRO), its instance attributes and its plain class attributes. The kind
of each field comes from its annotation when there is one, otherwise
from the value it currently holds.
"""

from __future__ import annotations

import inspect
import sys
import types
import typing
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, ClassVar, Final, Iterator, Optional, Union, get_args, get_origin


class FieldKind(Enum):
    """Declared kind of a bindable field."""

    FLOAT = "float"
    INT = "int"
    BOOL = "bool"
    STRING = "str"
    ENUM = "enum"
    DATETIME = "datetime"
    DATE = "date"
    LIST = "list"
    OTHER = "other"


_SCALAR_KINDS: dict[type, FieldKind] = {
    bool: FieldKind.BOOL,
    int: FieldKind.INT,
    float: FieldKind.FLOAT,
    str: FieldKind.STRING,
}


@dataclass(frozen=True)
class FieldDescriptor:
    """A storage location on a binding target.

    Attributes:
        name: Attribute name on the target
        kind: Declared kind used to pick the value conversion
        enum_type: Enum class for ENUM fields
        element: Element descriptor for LIST fields
        static: True when the value lives on the class, not the instance
    """

    name: str
    kind: FieldKind
    enum_type: Optional[type[Enum]] = None
    element: Optional[FieldDescriptor] = None
    static: bool = False


def _unwrap_optional(tp: Any) -> Any:
    if get_origin(tp) in (Union, types.UnionType):
        args = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def descriptor_for_type(name: str, tp: Any, static: bool = False) -> FieldDescriptor:
    """Build a descriptor from a type annotation."""
    if get_origin(tp) is ClassVar:
        args = get_args(tp)
        return descriptor_for_type(name, args[0] if args else Any, static=True)

    tp = _unwrap_optional(tp)
    if tp in _SCALAR_KINDS:
        return FieldDescriptor(name, _SCALAR_KINDS[tp], static=static)
    if isinstance(tp, type) and issubclass(tp, Enum):
        return FieldDescriptor(name, FieldKind.ENUM, enum_type=tp, static=static)
    if isinstance(tp, type) and issubclass(tp, datetime):
        return FieldDescriptor(name, FieldKind.DATETIME, static=static)
    if isinstance(tp, type) and issubclass(tp, date):
        return FieldDescriptor(name, FieldKind.DATE, static=static)
    if tp is list or get_origin(tp) is list:
        args = get_args(tp)
        element = descriptor_for_type(name, args[0] if args else str)
        return FieldDescriptor(name, FieldKind.LIST, element=element, static=static)
    return FieldDescriptor(name, FieldKind.OTHER, static=static)


def descriptor_for_value(name: str, value: Any, static: bool = False) -> FieldDescriptor:
    """Build a descriptor from the value an unannotated field holds."""
    if isinstance(value, list):
        element_type = type(value[0]) if value else str
        element = descriptor_for_type(name, element_type)
        return FieldDescriptor(name, FieldKind.LIST, element=element, static=static)
    if value is None:
        return FieldDescriptor(name, FieldKind.OTHER, static=static)
    return descriptor_for_type(name, type(value), static=static)


def _is_plain_attribute(name: str, value: Any) -> bool:
    if name.startswith("__"):
        return False
    if isinstance(value, (property, staticmethod, classmethod)):
        return False
    return not callable(value)


_UNRESOLVED: Final = object()

# names a string annotation may use without its module importing them
_KNOWN_NAMES: Final[dict[str, Any]] = {
    "date": date,
    "datetime": datetime,
    "ClassVar": ClassVar,
    "List": typing.List,
    "Optional": Optional,
    "Union": Union,
}


def _resolve_annotation(klass: type, annotation: Any) -> Any:
    """Evaluate a string annotation, or return ``_UNRESOLVED``."""
    if not isinstance(annotation, str):
        return annotation
    module = sys.modules.get(klass.__module__)
    globalns = dict(_KNOWN_NAMES)
    if module is not None:
        globalns.update(vars(module))
    try:
        return eval(annotation, globalns, dict(vars(klass)))  # noqa: S307
    except Exception:  # noqa: BLE001
        return _UNRESOLVED


def _annotations(owner: type) -> dict[str, Any]:
    """Resolve annotations across the MRO one field at a time.

    A field whose annotation cannot be evaluated (a name imported only
    under ``TYPE_CHECKING``, a type local to a function) maps to
    ``_UNRESOLVED`` without affecting the other fields.
    """
    hints: dict[str, Any] = {}
    for klass in reversed(owner.__mro__):
        try:
            own = inspect.get_annotations(klass)
        except NameError:
            # eagerly evaluated annotations that fail; fields still
            # come through their class attribute values
            continue
        for name, annotation in own.items():
            hints[name] = _resolve_annotation(klass, annotation)
    return hints


def iter_fields(target: Any) -> Iterator[FieldDescriptor]:
    """Yield every bindable field of *target*, annotated fields first.

    Args:
        target: Instance to bind onto, or a class to bind its
            class-level attributes

    Yields:
        One descriptor per attribute name
    """
    is_class = isinstance(target, type)
    owner: type = target if is_class else type(target)
    seen: set[str] = set()

    for name, tp in _annotations(owner).items():
        if name.startswith("__"):
            continue
        seen.add(name)
        if tp is _UNRESOLVED:
            yield descriptor_for_value(name, getattr(target, name, None), static=is_class)
        else:
            yield descriptor_for_type(name, tp, static=is_class)

    if not is_class:
        for name, value in getattr(target, "__dict__", {}).items():
            if name not in seen and not name.startswith("__"):
                seen.add(name)
                yield descriptor_for_value(name, value)

    for klass in owner.__mro__:
        if klass is object:
            continue
        for name, value in vars(klass).items():
            if name not in seen and _is_plain_attribute(name, value):
                seen.add(name)
                yield descriptor_for_value(name, value, static=is_class)


def field_lookup(target: Any) -> dict[str, FieldDescriptor]:
    """Index the fields of *target* by lower-cased name.

    When two names differ only by case, the first one discovered wins.
    """
    lookup: dict[str, FieldDescriptor] = {}
    for field in iter_fields(target):
        lookup.setdefault(field.name.lower(), field)
    return lookup


def candidate_names(key: str) -> Iterator[str]:
    """Yield the attribute names a setting key may bind to, in priority order."""
    yield key
    yield "_" + key
    if "." in key:
        head = key.split(".", 1)[0]
        yield head
        yield "_" + head


def find_field(lookup: dict[str, FieldDescriptor], key: str) -> Optional[FieldDescriptor]:
    """Find the field a setting key binds to, or None."""
    for name in candidate_names(key):
        field = lookup.get(name.lower())
        if field is not None:
            return field
    return None
