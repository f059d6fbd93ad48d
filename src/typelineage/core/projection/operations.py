"""Shape projection: narrowing an instance to an ancestor's shape.

The source instance is never mutated. Values are copied by reference into a
fresh default instance of the target type.
"""

from __future__ import annotations

import logging
from dataclasses import is_dataclass
from typing import Any

from typelineage.core.ancestry import lineage_of, super_type_of
from typelineage.core.exceptions import HierarchyError
from typelineage.core.properties.operations import all_property_names_of, present_values
from typelineage.core.resolver import make_instance_of, type_of

logger = logging.getLogger(__name__)


def _assign_values[T](target: T, values: dict[str, Any]) -> T:
    """Write values onto a freshly built instance.

    Pydantic models get a copy with the update applied; frozen dataclasses
    are written the same way their generated __init__ writes them.
    """
    if not values:
        return target
    model_copy = getattr(target, "model_copy", None)
    if model_copy is not None:
        return model_copy(update=values)  # type: ignore[no-any-return]
    if is_dataclass(target) and target.__dataclass_params__.frozen:  # type: ignore[attr-defined]
        for name, value in values.items():
            object.__setattr__(target, name, value)
        return target
    for name, value in values.items():
        setattr(target, name, value)
    return target


def trim_to_super_type(instance: Any) -> Any | None:
    """Project an instance onto its immediate parent type's shape.

    Args:
        instance: Instance of a registered hierarchy type.

    Returns:
        A new instance of the parent type carrying the source's values for
        the parent's properties, or None if the source's type is a
        hierarchy root.

    Raises:
        UnregisteredTypeError: If the instance's type is not registered.
        ConstructionError: If the parent type cannot be default-constructed.
    """
    type_ = type_of(instance)
    super_type = super_type_of(type_)
    if super_type is None:
        return None

    super_names = set(all_property_names_of(super_type))
    kept: dict[str, Any] = {}
    dropped: list[str] = []
    for name, value in present_values(instance):
        if name in super_names:
            kept[name] = value
        else:
            dropped.append(name)

    trimmed = _assign_values(make_instance_of(super_type), kept)
    logger.debug(
        "Trimmed %s to %s, dropped: %s",
        type_.__name__,
        super_type.__name__,
        ", ".join(dropped) or "-",
    )
    return trimmed


def project_onto(instance: Any, ancestor: type) -> Any:
    """Trim an instance level by level until it has the ancestor's shape.

    Args:
        instance: Instance of a registered hierarchy type.
        ancestor: The instance's own type or one of its ancestors.

    Returns:
        An instance of ancestor. The source itself when ancestor is its type.

    Raises:
        HierarchyError: If ancestor is not in the instance's lineage.
    """
    lineage = lineage_of(type_of(instance))
    if ancestor not in lineage:
        raise HierarchyError(
            f"{ancestor.__name__} is not an ancestor of {type(instance).__name__}"
        )

    current = instance
    for _ in range(lineage.index(ancestor)):
        current = trim_to_super_type(current)
    return current
