"""Binding of resolved settings onto arbitrary objects."""

from glueconf.binding.binder import bind_settings
from glueconf.binding.coerce import coerce_value
from glueconf.binding.descriptors import FieldDescriptor, FieldKind, field_lookup, find_field

__all__ = [
    "FieldDescriptor",
    "FieldKind",
    "bind_settings",
    "coerce_value",
    "field_lookup",
    "find_field",
]
