"""Registry models: per-type schema metadata."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class TypeMeta:
    """Metadata recorded for a registered hierarchy type.

    ``field_names`` lists every property an instance of the type carries,
    the parent's names first and then the names this type adds.
    """

    name: str
    qualified_name: str
    parent: type | None
    field_names: tuple[str, ...]

    @property
    def is_root(self) -> bool:
        """True if the type sits directly below the root sentinel."""
        return self.parent is None
