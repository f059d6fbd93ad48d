"""Property descriptor models.

Descriptors are plain frozen data; ``dataclasses.asdict`` turns them into
dicts for serialization.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from typelineage.core.types import TypeName


@dataclass(slots=True, frozen=True)
class PropertyDefinition:
    """Name of a property, the type that introduced it, and its value's type."""

    name: str
    defined_on: TypeName
    value_type_name: TypeName


@dataclass(slots=True, frozen=True)
class PropertyShape:
    """Name of a property and its value's type, without ancestry attribution."""

    name: str
    value_type_name: TypeName


@dataclass(slots=True, frozen=True)
class Property:
    """A property value paired with its definition."""

    definition: PropertyDefinition | PropertyShape
    value: Any

    @property
    def name(self) -> str:
        return self.definition.name
