"""typelineage: runtime type introspection for single-inheritance hierarchies.

Usage:
    from dataclasses import dataclass
    from typelineage import hierarchy_type, properties_of, trim_to_super_type

    @hierarchy_type
    @dataclass
    class Animal:
        name: str = ""

    @hierarchy_type
    @dataclass
    class Dog(Animal):
        breed: str = ""

    rex = Dog(name="Rex", breed="Lab")
    [p.definition.defined_on for p in properties_of(rex)]  # ["Animal", "Dog"]
    trim_to_super_type(rex)  # Animal(name="Rex")
"""

__version__ = "0.1.0"

# Core primitives
from typelineage.core import (
    PLAIN_DATA_TYPE_NAME,
    UNKNOWN_TYPE_NAME,
    ConstructionError,
    DefinerLookupError,
    HierarchyError,
    Property,
    PropertyDefinition,
    PropertyShape,
    TypeLineageError,
    TypeMeta,
    TypeRegistry,
    UnregisteredTypeError,
    all_property_names_of,
    ancestors_of,
    definer_of,
    exclusive_property_names_of,
    get_properties,
    get_registry,
    get_super_class_name,
    get_thing_type_name,
    hierarchy_type,
    is_hierarchy_root,
    is_named_object,
    lineage_of,
    make_instance_of,
    own_properties_of,
    project_onto,
    properties_of,
    super_class_of,
    super_type_of,
    tagged_property_names_of,
    trim_to_super_type,
    type_of,
)

# Configuration
from typelineage.config import (
    IntrospectionSettings,
    configure_logging,
    configure_logging_from_settings,
)

__all__ = [
    # Version
    "__version__",
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
    "UNKNOWN_TYPE_NAME",
    "PLAIN_DATA_TYPE_NAME",
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
    # Errors
    "TypeLineageError",
    "UnregisteredTypeError",
    "HierarchyError",
    "ConstructionError",
    "DefinerLookupError",
    # Config
    "IntrospectionSettings",
    "configure_logging",
    "configure_logging_from_settings",
]
