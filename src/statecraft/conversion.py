# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Convert resources into runtime handles via builtin or composite constructors."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .identity import ResourceReference
from .types import ParameterValue

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .resource import Resource

LOGGER = logging.getLogger(__name__)


@runtime_checkable
class BuiltinConstructor(Protocol):
    """Natively registered constructor for a builtin resource type."""

    def create(self, resource: Resource) -> Any:
        """Return a runtime handle for ``resource``."""
        ...


@runtime_checkable
class CompositeConstructor(Protocol):
    """Constructor used for resource types without a builtin registration."""

    def create(self, resource: Resource) -> Any:
        """Return a composite runtime handle for ``resource``."""
        ...


@dataclass(slots=True)
class Component:
    """Runtime handle for a composite resource built from other resources."""

    reference: ResourceReference
    parameters: dict[str, ParameterValue] = field(default_factory=dict)

    @property
    def ref(self) -> str:
        """Return the canonical reference of the wrapped resource."""

        return self.reference.canonical_reference()


class ComponentConstructor:
    """Default composite constructor producing :class:`Component` handles."""

    def create(self, resource: Resource) -> Component:
        """Wrap ``resource`` in a new :class:`Component`.

        Args:
            resource: Resource whose type has no builtin constructor.

        Returns:
            Component: Handle carrying the resource identity and a copy of its
            parameters.
        """

        return Component(reference=resource.reference, parameters=resource.parameters.to_dict())


class TypeRegistry:
    """Registry mapping builtin resource type names to their constructors.

    The registry behaves like a read-only mapping keyed by the literal type
    string; :meth:`lookup` is the only query the conversion path relies on.
    """

    def __init__(self) -> None:
        """Initialise an empty type registry."""

        self._constructors: dict[str, BuiltinConstructor] = {}

    def register(self, type_name: str, constructor: BuiltinConstructor) -> None:
        """Register ``constructor`` for ``type_name`` enforcing uniqueness.

        Args:
            type_name: Literal resource type string, e.g. ``"file"``.
            constructor: Object exposing ``create(resource)``.

        Raises:
            ValueError: If ``type_name`` is empty or already registered.
            TypeError: If ``constructor`` lacks a callable ``create``.
        """

        if not type_name:
            raise ValueError("type registry names must be non-empty")
        if not callable(getattr(constructor, "create", None)):
            raise TypeError(f"constructor for '{type_name}' must define a callable create()")
        if type_name in self._constructors:
            raise ValueError(f"Type '{type_name}' already registered")
        self._constructors[type_name] = constructor

    def lookup(self, type_name: str) -> BuiltinConstructor | None:
        """Return the constructor registered for ``type_name`` or ``None``."""

        return self._constructors.get(type_name)

    def reset(self) -> None:
        """Remove every registration."""

        self._constructors.clear()

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._constructors

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._constructors))

    def __len__(self) -> int:
        return len(self._constructors)


DEFAULT_COMPOSITE = ComponentConstructor()


def resolve_constructor(
    resource: Resource,
    registry: TypeRegistry,
    composite: CompositeConstructor | None = None,
) -> BuiltinConstructor | CompositeConstructor:
    """Select the constructor responsible for ``resource``.

    Args:
        resource: Resource being converted.
        registry: Registry consulted with the literal resource type.
        composite: Constructor used when the type is not builtin; defaults to
            :data:`DEFAULT_COMPOSITE`.

    Returns:
        BuiltinConstructor | CompositeConstructor: The single constructor to invoke.
    """

    builtin = registry.lookup(resource.type)
    if builtin is not None:
        LOGGER.debug("resolved builtin constructor for %s", resource.ref)
        return builtin
    LOGGER.debug("no builtin type '%s'; treating %s as composite", resource.type, resource.ref)
    return composite if composite is not None else DEFAULT_COMPOSITE


def to_runtime_handle(
    resource: Resource,
    registry: TypeRegistry,
    composite: CompositeConstructor | None = None,
) -> Any:
    """Return the runtime handle produced by the constructor for ``resource``.

    The chosen constructor is invoked exactly once with the full resource; its
    result is returned and its exceptions propagate unchanged.

    Args:
        resource: Resource being converted.
        registry: Registry of builtin constructors.
        composite: Optional constructor for non-builtin types.

    Returns:
        Any: Handle returned by the selected constructor.
    """

    return resolve_constructor(resource, registry, composite).create(resource)


__all__ = [
    "BuiltinConstructor",
    "Component",
    "ComponentConstructor",
    "CompositeConstructor",
    "DEFAULT_COMPOSITE",
    "TypeRegistry",
    "resolve_constructor",
    "to_runtime_handle",
]
