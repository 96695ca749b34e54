# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""The declarative resource value object."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from .conversion import CompositeConstructor, TypeRegistry, to_runtime_handle
from .identity import ResourceReference
from .manifest import render
from .parameters import ParameterKey, ParameterStore
from .tagging import Tagging, default_tags
from .types import ParameterValue


class Resource(Tagging):
    """A single unit of desired state: identity, parameters and tags.

    ``catalog``, ``file`` and ``line`` are bookkeeping metadata; they never
    participate in equality, serialization identity, or rendering.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        resource_type: str | None = None,
        title: str | None = None,
        parameters: Mapping[ParameterKey, object] | None = None,
        *,
        catalog: Any = None,
        file: str | Path | None = None,
        line: int | None = None,
    ) -> None:
        """Create a resource identified by ``resource_type`` and ``title``.

        Args:
            resource_type: Declared resource type, e.g. ``"file"``.
            title: Resource title, e.g. ``"/etc/hosts"``.
            parameters: Optional initial parameters applied in order.
            catalog: Optional owning catalog back-reference.
            file: Optional originating manifest file.
            line: Optional originating line number.

        Raises:
            ArgumentError: If the type or title is missing, or a parameter is
                invalid.
        """

        self._reference = ResourceReference(resource_type, title)  # type: ignore[arg-type]
        self._parameters = ParameterStore(parameters)
        self._init_tags(default_tags(self._reference))
        self.catalog = catalog
        self.file = file
        self.line = line

    @property
    def type(self) -> str:
        """Return the declared resource type."""

        return self._reference.type

    @property
    def title(self) -> str:
        """Return the resource title."""

        return self._reference.title

    @property
    def reference(self) -> ResourceReference:
        """Return the immutable identity of this resource."""

        return self._reference

    @property
    def ref(self) -> str:
        """Return the canonical ``Type[title]`` reference string."""

        return self._reference.canonical_reference()

    @property
    def parameters(self) -> ParameterStore:
        """Return the underlying parameter store."""

        return self._parameters

    def __getitem__(self, name: ParameterKey) -> ParameterValue | None:
        return self._parameters.get(name)

    def __setitem__(self, name: ParameterKey, value: object) -> None:
        self._parameters.set(name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._parameters

    def __len__(self) -> int:
        return self._parameters.size()

    def __iter__(self) -> Iterator[str]:
        return iter(self._parameters)

    def get(self, name: ParameterKey, default: ParameterValue | None = None) -> ParameterValue | None:
        """Return the value of ``name`` or ``default`` when it is unset."""

        return self._parameters.get(name, default)

    def set(self, name: ParameterKey, value: object) -> None:
        """Assign ``value`` to the parameter ``name``."""

        self._parameters.set(name, value)

    def delete(self, name: ParameterKey) -> None:
        """Remove the parameter ``name``; unknown names are ignored."""

        self._parameters.delete(name)

    def has(self, name: ParameterKey) -> bool:
        """Return ``True`` when the parameter ``name`` is set."""

        return self._parameters.has(name)

    has_key = has

    def size(self) -> int:
        """Return the number of parameters."""

        return self._parameters.size()

    def is_empty(self) -> bool:
        """Return ``True`` when the resource has no parameters."""

        return self._parameters.is_empty()

    def iterate(self) -> Iterator[tuple[str, ParameterValue]]:
        """Yield ``(name, value)`` parameter pairs in insertion order."""

        return self._parameters.iterate()

    items = iterate

    def to_manifest(self) -> str:
        """Return the manifest source text for this resource."""

        return render(self)

    def to_runtime(
        self,
        registry: TypeRegistry,
        composite: CompositeConstructor | None = None,
    ) -> Any:
        """Convert this resource into a runtime handle.

        Args:
            registry: Registry of builtin type constructors.
            composite: Optional constructor for non-builtin types.

        Returns:
            Any: Whatever handle the selected constructor produces.
        """

        return to_runtime_handle(self, registry, composite)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return self._reference == other._reference and self._parameters == other._parameters

    def __repr__(self) -> str:
        return f"<Resource {self.ref} parameters={self._parameters.to_dict()!r}>"

    def __str__(self) -> str:
        return self.ref


__all__ = ["Resource"]
