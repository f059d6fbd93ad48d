"""Ancestry navigation over the type registry.

``super_type_of`` is the one parent-of primitive; every other entry point,
whether it starts from a type or from an instance, is derived from it.
"""

from __future__ import annotations

from typing import Any

from typelineage.core.registry import get_registry
from typelineage.core.resolver import type_of


def super_type_of(type_: type) -> type | None:
    """Get the immediate parent of a registered type.

    Args:
        type_: Registered hierarchy type.

    Returns:
        The parent type, or None if type_ is a hierarchy root.

    Raises:
        UnregisteredTypeError: If type_ is not registered.
    """
    return get_registry().require_meta(type_).parent


def super_class_of(type_: type) -> type | None:
    """Constructor-facing alias of super_type_of."""
    return super_type_of(type_)


def get_super_class_name(instance: Any) -> str | None:
    """Name of the parent type of an instance's type, None at a hierarchy root."""
    parent = super_type_of(type_of(instance))
    return parent.__name__ if parent is not None else None


def is_hierarchy_root(type_: type) -> bool:
    """Check if a registered type has no parent."""
    return super_type_of(type_) is None


def ancestors_of(type_: type) -> list[type]:
    """List the ancestors of a type, nearest first.

    Args:
        type_: Registered hierarchy type.

    Returns:
        Parent, grandparent, ... up to the hierarchy root. Excludes type_.
    """
    chain: list[type] = []
    parent = super_type_of(type_)
    while parent is not None:
        chain.append(parent)
        parent = super_type_of(parent)
    return chain


def lineage_of(type_: type) -> list[type]:
    """type_ followed by its ancestors, nearest first."""
    return [type_, *ancestors_of(type_)]
