"""Core functionalities: registry, resolution, navigation, enumeration, projection.

Architecture Note:
    core/ contains stateless functions over one shared, definition-time
    registry. Nothing here retains instances beyond a single call.
"""

from typelineage.core.ancestry import (
    ancestors_of,
    get_super_class_name,
    is_hierarchy_root,
    lineage_of,
    super_class_of,
    super_type_of,
)
from typelineage.core.exceptions import (
    ConstructionError,
    DefinerLookupError,
    HierarchyError,
    TypeLineageError,
    UnregisteredTypeError,
)
from typelineage.core.projection import project_onto, trim_to_super_type
from typelineage.core.properties import (
    Property,
    PropertyDefinition,
    PropertyShape,
    all_property_names_of,
    definer_of,
    exclusive_property_names_of,
    get_properties,
    own_properties_of,
    properties_of,
    tagged_property_names_of,
)
from typelineage.core.registry import TypeMeta, TypeRegistry, get_registry, hierarchy_type
from typelineage.core.resolver import (
    get_thing_type_name,
    is_named_object,
    make_instance_of,
    type_of,
)
from typelineage.core.types import PLAIN_DATA_TYPE_NAME, UNKNOWN_TYPE_NAME, TaggedName, TypeName

__all__ = [
    # Types
    "TypeName",
    "TaggedName",
    "UNKNOWN_TYPE_NAME",
    "PLAIN_DATA_TYPE_NAME",
    # Exceptions
    "TypeLineageError",
    "UnregisteredTypeError",
    "HierarchyError",
    "ConstructionError",
    "DefinerLookupError",
    # Registry
    "hierarchy_type",
    "get_registry",
    "TypeMeta",
    "TypeRegistry",
    # Resolver
    "type_of",
    "make_instance_of",
    "get_thing_type_name",
    "is_named_object",
    # Ancestry
    "super_type_of",
    "super_class_of",
    "get_super_class_name",
    "is_hierarchy_root",
    "ancestors_of",
    "lineage_of",
    # Properties
    "Property",
    "PropertyDefinition",
    "PropertyShape",
    "all_property_names_of",
    "exclusive_property_names_of",
    "tagged_property_names_of",
    "definer_of",
    "properties_of",
    "own_properties_of",
    "get_properties",
    # Projection
    "trim_to_super_type",
    "project_onto",
]
