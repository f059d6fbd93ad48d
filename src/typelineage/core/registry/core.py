"""Type registry and the @hierarchy_type decorator.

Usage:
    @hierarchy_type
    @dataclass
    class Animal:
        name: str = ""

    @hierarchy_type
    @dataclass
    class Dog(Animal):
        breed: str = ""

    # Plain classes declare the names they add
    @hierarchy_type(fields=("label",))
    class Tagged:
        def __init__(self) -> None:
            self.label = ""
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import fields as dataclass_fields
from dataclasses import is_dataclass
from typing import Generic, overload

from typelineage.config.settings import IntrospectionSettings
from typelineage.core.exceptions import HierarchyError, UnregisteredTypeError
from typelineage.core.registry.models import TypeMeta

logger = logging.getLogger(__name__)


def _is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    return any(_is_pydantic_base(base) for base in cls.__mro__)


def _is_pydantic_base(cls: type) -> bool:
    return cls.__module__.startswith("pydantic") and cls.__name__ == "BaseModel"


def _is_root_sentinel(cls: type) -> bool:
    """Bases that end a chain (object, pydantic.BaseModel) or carry no fields (Generic)."""
    return cls is object or cls is Generic or _is_pydantic_base(cls)


def _declared_field_names(cls: type, declared: Iterable[str] | None) -> list[str]:
    if declared is not None:
        if is_dataclass(cls) or _is_pydantic(cls):
            raise TypeError(
                f"{cls.__name__} is a dataclass or Pydantic model; "
                f"its fields are read from the class, do not pass fields="
            )
        return list(declared)
    if is_dataclass(cls):
        return [f.name for f in dataclass_fields(cls)]
    if _is_pydantic(cls):
        return list(cls.model_fields)  # type: ignore[attr-defined]
    raise TypeError(
        f"Hierarchy type {cls.__name__} must be a dataclass or Pydantic model, "
        f"or declare its properties with fields=(...). "
        f"Did you forget @dataclass decorator?"
    )


class TypeRegistry:
    """Process-local table of hierarchy types, their parents and their fields.

    Types are registered once, at definition time. Every navigation and
    enumeration query is answered from this table; no probe instances are
    built to discover parents or field names.
    """

    def __init__(self, probe_on_register: bool | None = None) -> None:
        """Initialize empty type registry.

        Args:
            probe_on_register: Build a default instance of each type on
                registration. Read from IntrospectionSettings when None.
        """
        if probe_on_register is None:
            probe_on_register = IntrospectionSettings().probe_on_register
        self.probe_on_register = probe_on_register
        self._by_type: dict[type, TypeMeta] = {}

    def register(self, cls: type, fields: Iterable[str] | None = None) -> TypeMeta:
        """Register a hierarchy type and return its metadata.

        Args:
            cls: Class to register.
            fields: Property names a plain class declares itself. Dataclasses
                and Pydantic models must leave this as None.

        Returns:
            Type metadata including parent and ordered field names.

        Raises:
            TypeError: If the class has no readable schema.
            HierarchyError: If the class has several bases, or repeats the
                name of a type already in its chain.
            UnregisteredTypeError: If the parent class is not registered.
            ConstructionError: If probing is enabled and the class cannot be
                built without arguments.
        """
        if cls in self._by_type:
            return self._by_type[cls]

        parent = self._parent_of(cls)
        parent_names = self._by_type[parent].field_names if parent is not None else ()
        own_names = [
            name
            for name in dict.fromkeys(_declared_field_names(cls, fields))
            if name not in parent_names
        ]

        meta = TypeMeta(
            name=cls.__name__,
            qualified_name=f"{cls.__module__}.{cls.__qualname__}",
            parent=parent,
            field_names=(*parent_names, *own_names),
        )

        if self.probe_on_register:
            # Late import to avoid circular dependency
            from typelineage.core.resolver import make_instance_of

            make_instance_of(cls)

        self._by_type[cls] = meta
        logger.debug(
            "Registered hierarchy type %s (parent=%s, fields=%s)",
            meta.name,
            parent.__name__ if parent is not None else None,
            ", ".join(meta.field_names),
        )
        return meta

    def _parent_of(self, cls: type) -> type | None:
        bases = [base for base in cls.__bases__ if not _is_root_sentinel(base)]
        if len(bases) > 1:
            names = ", ".join(base.__name__ for base in bases)
            raise HierarchyError(
                f"{cls.__name__} has several bases ({names}); only single inheritance is supported"
            )
        if not bases:
            return None

        parent = bases[0]
        if parent not in self._by_type:
            raise UnregisteredTypeError(parent)

        ancestor: type | None = parent
        while ancestor is not None:
            if ancestor.__name__ == cls.__name__:
                raise HierarchyError(
                    f"{cls.__name__} repeats the name of an ancestor type; "
                    f"type names must be unique along a chain"
                )
            ancestor = self._by_type[ancestor].parent
        return parent

    def get_meta(self, cls: type) -> TypeMeta | None:
        """Get metadata for a registered type.

        Args:
            cls: Class to look up.

        Returns:
            Type metadata if registered, None otherwise.
        """
        return self._by_type.get(cls)

    def require_meta(self, cls: type) -> TypeMeta:
        """Get metadata for a type that must be registered.

        Args:
            cls: Class to look up.

        Returns:
            Type metadata.

        Raises:
            UnregisteredTypeError: If the class is not registered.
        """
        meta = self._by_type.get(cls)
        if meta is None:
            raise UnregisteredTypeError(cls)
        return meta

    def is_registered(self, cls: type) -> bool:
        """Check if a class is registered as a hierarchy type.

        Args:
            cls: Class to check.

        Returns:
            True if class is registered, False otherwise.
        """
        return cls in self._by_type

    def registered_types(self) -> list[type]:
        """All registered types, in registration order."""
        return list(self._by_type)


# Module-level registry instance
_registry = TypeRegistry()


def get_registry() -> TypeRegistry:
    """Access the global type registry.

    Returns:
        The process-local TypeRegistry instance.
    """
    return _registry


@overload
def hierarchy_type(cls: type) -> type: ...


@overload
def hierarchy_type(
    cls: None = None, *, fields: Iterable[str] | None = None
) -> Callable[[type], type]: ...


def hierarchy_type(
    cls: type | None = None, *, fields: Iterable[str] | None = None
) -> type | Callable[[type], type]:
    """Register a class as a hierarchy type.

    Supports three forms:
        @hierarchy_type                       # bare decorator
        @hierarchy_type()                     # parenthesized, no args
        @hierarchy_type(fields=("a", "b"))    # plain class declaring its fields

    Args:
        cls: The class to register, or None if called with arguments.
        fields: Property names introduced by a plain (non-dataclass) class.

    Returns:
        Decorated class or decorator function.

    Note:
        Apply @hierarchy_type AFTER @dataclass, and register a parent before
        its subclasses.
    """
    declared = tuple(fields) if fields is not None else None

    def decorator(c: type) -> type:
        _registry.register(c, fields=declared)
        return c

    if cls is None:
        return decorator
    else:
        return decorator(cls)
