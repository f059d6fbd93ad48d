"""Type resolution and value classification.

These are stateless functions mapping instances to registered types and back,
plus total helpers that classify arbitrary values by type name.
"""

from __future__ import annotations

from dataclasses import MISSING
from typing import Any

from typelineage.core.exceptions import ConstructionError
from typelineage.core.registry import get_registry
from typelineage.core.types import PLAIN_DATA_TYPE_NAME, UNKNOWN_TYPE_NAME, TypeName

_PRIMITIVES: tuple[type, ...] = (bool, int, float, complex, str, bytes)


def type_of(instance: Any) -> type:
    """Get the registered runtime type of an instance.

    Args:
        instance: Instance of a registered hierarchy type.

    Returns:
        The instance's exact class.

    Raises:
        UnregisteredTypeError: If the instance's class is not registered.
    """
    cls = type(instance)
    get_registry().require_meta(cls)
    return cls


def make_instance_of[T](type_: type[T]) -> T:
    """Build a default instance through the no-argument construction path.

    Args:
        type_: Class to instantiate.

    Returns:
        A fresh instance built with no arguments.

    Raises:
        ConstructionError: If the class needs arguments or its constructor fails.
    """
    try:
        return type_()
    except Exception as e:
        raise ConstructionError(type_.__name__, str(e)) from e


def get_thing_type_name(value: Any) -> TypeName:
    """Name of a value's type, or "Unknown" for absent values. Never raises."""
    if value is None or value is MISSING:
        return UNKNOWN_TYPE_NAME
    return type(value).__name__


def is_named_object(value: Any) -> bool:
    """Check if a value is a typed object worth reflecting into.

    Plain data (dicts), primitives and absent values are opaque; anything
    else is a named object.

    Args:
        value: Any value.

    Returns:
        True if value is an object whose type is not the plain-data type.
    """
    if value is None or value is MISSING or isinstance(value, _PRIMITIVES):
        return False
    return get_thing_type_name(value) != PLAIN_DATA_TYPE_NAME
