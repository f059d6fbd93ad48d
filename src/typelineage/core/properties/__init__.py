"""Property enumerator: definer attribution and property descriptors."""

from typelineage.core.properties.models import Property, PropertyDefinition, PropertyShape
from typelineage.core.properties.operations import (
    all_property_names_of,
    definer_of,
    exclusive_property_names_of,
    get_properties,
    own_properties_of,
    properties_of,
    tagged_property_names_of,
)

__all__ = [
    # Models
    "Property",
    "PropertyDefinition",
    "PropertyShape",
    # Operations
    "all_property_names_of",
    "exclusive_property_names_of",
    "tagged_property_names_of",
    "definer_of",
    "properties_of",
    "own_properties_of",
    "get_properties",
]
