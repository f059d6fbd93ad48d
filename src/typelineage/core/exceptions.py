"""Exception classes for typelineage.

Every failure surfaces to the caller of the top-level operation. Nothing is
retried or defaulted.
"""

from __future__ import annotations


class TypeLineageError(Exception):
    """Base exception class for all typelineage exceptions."""

    pass


class UnregisteredTypeError(TypeLineageError, LookupError):
    """Raised when a class (or its parent) is not in the type registry."""

    def __init__(self, cls: type) -> None:
        self.type_name = getattr(cls, "__name__", repr(cls))
        super().__init__(
            f"{self.type_name} is not a registered hierarchy type. "
            f"Did you forget the @hierarchy_type decorator?"
        )


class HierarchyError(TypeLineageError, TypeError):
    """Raised when a type does not fit a single-inheritance hierarchy."""

    pass


class ConstructionError(TypeLineageError):
    """Raised when a type cannot be built through its no-argument path.

    Example:
        >>> try:
        ...     make_instance_of(NeedsArgs)
        ... except ConstructionError as e:
        ...     e.__cause__  # the original TypeError
    """

    def __init__(self, type_name: str, reason: str) -> None:
        self.type_name = type_name
        self.reason = reason
        super().__init__(f"Cannot default-construct {type_name}: {reason}")


class DefinerLookupError(TypeLineageError, LookupError):
    """Raised when no type in a chain declares a property name."""

    def __init__(self, type_name: str, property_name: str) -> None:
        self.type_name = type_name
        self.property_name = property_name
        super().__init__(
            f"No type in the ancestry of {type_name} declares property {property_name!r}"
        )
