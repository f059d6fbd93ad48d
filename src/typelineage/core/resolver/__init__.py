"""Type resolver: instance to type, type to default instance, classification."""

from typelineage.core.resolver.operations import (
    get_thing_type_name,
    is_named_object,
    make_instance_of,
    type_of,
)

__all__ = [
    "type_of",
    "make_instance_of",
    "get_thing_type_name",
    "is_named_object",
]
