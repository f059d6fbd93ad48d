"""Property enumeration over the type registry.

Names come from per-type schema metadata recorded at registration. A
property is present on an instance when its schema name is set as an
attribute; extra attributes outside the schema are not enumerated.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from typelineage.core.ancestry import super_type_of
from typelineage.core.exceptions import DefinerLookupError
from typelineage.core.properties.models import Property, PropertyDefinition, PropertyShape
from typelineage.core.registry import get_registry
from typelineage.core.resolver import get_thing_type_name, type_of
from typelineage.core.types import TaggedName, TypeName

_ABSENT = object()


def all_property_names_of(type_: type | None) -> tuple[str, ...]:
    """All property names an instance of a type carries.

    Args:
        type_: Registered hierarchy type, or None.

    Returns:
        Ordered, duplicate-free names; empty for None.

    Raises:
        UnregisteredTypeError: If type_ is not registered.
    """
    if type_ is None:
        return ()
    return get_registry().require_meta(type_).field_names


def exclusive_property_names_of(type_: type | None) -> tuple[str, ...]:
    """Property names a type introduces itself (absent from its parent).

    Args:
        type_: Registered hierarchy type, or None.

    Returns:
        Ordered names; empty for None.
    """
    if type_ is None:
        return ()
    inherited = set(all_property_names_of(super_type_of(type_)))
    return tuple(name for name in all_property_names_of(type_) if name not in inherited)


def tagged_property_names_of(type_: type | None) -> list[TaggedName]:
    """Tag every reachable property name with the type that introduced it.

    The type's own exclusive names come first, followed by its ancestors'
    (nearest ancestor first). A lookup taking the first match therefore
    resolves to the most specific type.

    Args:
        type_: Registered hierarchy type, or None.

    Returns:
        List of (property_name, type_name) pairs; empty for None.
    """
    if type_ is None:
        return []
    own = [(name, type_.__name__) for name in exclusive_property_names_of(type_)]
    return own + tagged_property_names_of(super_type_of(type_))


def _first_definer(tagged: list[TaggedName], type_: type, name: str) -> TypeName:
    for prop_name, type_name in tagged:
        if prop_name == name:
            return type_name
    raise DefinerLookupError(type_.__name__, name)


def definer_of(type_: type, name: str) -> TypeName:
    """Name of the most specific type in a chain that declares a property.

    Args:
        type_: Registered hierarchy type to start from.
        name: Property name.

    Returns:
        Type name of the definer.

    Raises:
        DefinerLookupError: If no type in the chain declares the name.
    """
    return _first_definer(tagged_property_names_of(type_), type_, name)


def present_values(instance: Any) -> Iterator[tuple[str, Any]]:
    """(name, value) for each schema name set on the instance, in schema order."""
    for name in all_property_names_of(type_of(instance)):
        value = getattr(instance, name, _ABSENT)
        if value is not _ABSENT:
            yield name, value


def properties_of(instance: Any) -> list[Property]:
    """Describe every property present on an instance.

    Args:
        instance: Instance of a registered hierarchy type.

    Returns:
        Properties in schema order, each tagged with its definer's name and
        its value's type name.

    Raises:
        UnregisteredTypeError: If the instance's type is not registered.
        DefinerLookupError: If a present name has no definer in the chain.
    """
    type_ = type_of(instance)
    tagged = tagged_property_names_of(type_)
    return [
        Property(
            definition=PropertyDefinition(
                name=name,
                defined_on=_first_definer(tagged, type_, name),
                value_type_name=get_thing_type_name(value),
            ),
            value=value,
        )
        for name, value in present_values(instance)
    ]


def own_properties_of(instance: Any) -> list[Property]:
    """Properties introduced by the instance's exact type, not inherited ones."""
    type_name = type_of(instance).__name__
    return [
        prop
        for prop in properties_of(instance)
        if isinstance(prop.definition, PropertyDefinition)
        and prop.definition.defined_on == type_name
    ]


def get_properties(instance: Any) -> list[Property]:
    """Describe property names and value types without ancestry attribution.

    Args:
        instance: Instance of a registered hierarchy type, or a plain mapping.

    Returns:
        Properties whose definitions are PropertyShape records.
    """
    if isinstance(instance, Mapping):
        entries: Iterator[tuple[Any, Any]] = iter(instance.items())
    else:
        entries = present_values(instance)
    return [
        Property(
            definition=PropertyShape(name=str(key), value_type_name=get_thing_type_name(value)),
            value=value,
        )
        for key, value in entries
    ]

