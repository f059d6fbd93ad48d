"""Ancestry navigator: single-parent chain walking."""

from typelineage.core.ancestry.operations import (
    ancestors_of,
    get_super_class_name,
    is_hierarchy_root,
    lineage_of,
    super_class_of,
    super_type_of,
)

__all__ = [
    "super_type_of",
    "super_class_of",
    "get_super_class_name",
    "is_hierarchy_root",
    "ancestors_of",
    "lineage_of",
]
