"""Core type definitions for typelineage."""

type TypeName = str
"""Short class name (``cls.__name__``) used to tag property definers."""

type TaggedName = tuple[str, TypeName]
"""A ``(property_name, definer_type_name)`` pair."""

UNKNOWN_TYPE_NAME: TypeName = "Unknown"
"""Type name reported for absent values (``None`` or ``dataclasses.MISSING``)."""

PLAIN_DATA_TYPE_NAME: TypeName = "dict"
"""Type name of the generic plain-data container."""
