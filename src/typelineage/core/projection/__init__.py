"""Shape projector: trimming instances to ancestor shapes."""

from typelineage.core.projection.operations import project_onto, trim_to_super_type

__all__ = [
    "trim_to_super_type",
    "project_onto",
]
