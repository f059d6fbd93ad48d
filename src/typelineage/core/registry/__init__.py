"""Type registry: models, registry and decorator."""

from typelineage.core.registry.core import TypeRegistry, get_registry, hierarchy_type
from typelineage.core.registry.models import TypeMeta

__all__ = [
    "TypeMeta",
    "TypeRegistry",
    "get_registry",
    "hierarchy_type",
]
