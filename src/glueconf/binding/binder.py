"""Glue resolved settings onto the fields of a caller-supplied object."""

from __future__ import annotations

import logging
from typing import Any, Final, Mapping

from glueconf.binding.coerce import coerce_value
from glueconf.binding.descriptors import FieldDescriptor, FieldKind, field_lookup, find_field
from glueconf.errors import UnmatchedFieldError

logger: Final = logging.getLogger(__name__)


def _holder(target: Any, field: FieldDescriptor) -> Any:
    if field.static and not isinstance(target, type):
        return type(target)
    return target


def _owns(holder: Any, name: str) -> bool:
    if isinstance(holder, type):
        return True
    attrs = getattr(holder, "__dict__", None)
    return attrs is None or name in attrs


def _append(target: Any, field: FieldDescriptor, item: Any) -> None:
    holder = _holder(target, field)
    current = getattr(holder, field.name, None)
    if not isinstance(current, list):
        current = []
        setattr(holder, field.name, current)
    elif not _owns(holder, field.name):
        # copy a class-level default before appending to it
        current = list(current)
        setattr(holder, field.name, current)
    current.append(item)


def bind_settings(target: Any, settings: Mapping[str, str], strict: bool = False) -> None:
    """Assign every matching setting onto *target* in place.

    Each key is matched case-insensitively against the target's fields,
    then against the ``_key`` convention, then (for dotted keys such as
    ``colors.0``) against the text before the first dot. Values bound to
    a list field are appended in file order.

    Args:
        target: Object (or class) to populate
        settings: Resolved settings
        strict: Raise instead of skipping keys that match no field

    Raises:
        CoercionError: If a value cannot be converted to its field's kind
        UnmatchedFieldError: If *strict* and a key matches no field
    """
    lookup = field_lookup(target)
    target_name = target.__name__ if isinstance(target, type) else type(target).__name__

    for key, value in settings.items():
        field = find_field(lookup, key)
        if field is None:
            if strict:
                raise UnmatchedFieldError(key, target_name)
            logger.debug("No field on %s for %s, skipping", target_name, key)
            continue

        if field.kind is FieldKind.LIST:
            assert field.element is not None
            _append(target, field, coerce_value(key, value, field.element))
        else:
            setattr(_holder(target, field), field.name, coerce_value(key, value, field))
        logger.debug("> %s.%s=%s", target_name, field.name, value)
