# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for runtime conversion dispatch."""

from __future__ import annotations

from typing import Any

import pytest

from statecraft import Component, ConversionError, Resource, TypeRegistry, to_runtime_handle
from statecraft.conversion import DEFAULT_COMPOSITE, resolve_constructor


class RecordingConstructor:
    def __init__(self, result: Any = None, error: Exception | None = None) -> None:
        self.calls: list[Resource] = []
        self.result = result
        self.error = error

    def create(self, resource: Resource) -> Any:
        self.calls.append(resource)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def resource() -> Resource:
    resource = Resource("file", "/my/file")
    resource["one"] = "test"
    resource["two"] = "other"
    return resource


def test_builtin_type_uses_registered_constructor(resource: Resource) -> None:
    builtin = RecordingConstructor(result="myresource")
    composite = RecordingConstructor(result="unused")
    registry = TypeRegistry()
    registry.register("file", builtin)

    handle = to_runtime_handle(resource, registry, composite)

    assert handle == "myresource"
    assert builtin.calls == [resource]
    assert builtin.calls[0] is resource
    assert composite.calls == []


def test_unknown_type_uses_composite_constructor(resource: Resource) -> None:
    composite = RecordingConstructor(result="meh")

    handle = resource.to_runtime(TypeRegistry(), composite)

    assert handle == "meh"
    assert composite.calls == [resource]


def test_default_composite_builds_component(resource: Resource) -> None:
    handle = to_runtime_handle(resource, TypeRegistry())

    assert isinstance(handle, Component)
    assert handle.ref == "File[/my/file]"
    assert handle.parameters == {"one": "test", "two": "other"}


def test_lookup_uses_literal_type_string(resource: Resource) -> None:
    registry = TypeRegistry()
    registry.register("File", RecordingConstructor(result="capitalized"))

    assert registry.lookup("file") is None
    assert resolve_constructor(resource, registry) is DEFAULT_COMPOSITE


@pytest.mark.parametrize("type_name", ["file", "one::two"])
def test_constructor_errors_propagate_unchanged(type_name: str) -> None:
    error = ConversionError("cannot build")
    failing = RecordingConstructor(error=error)
    registry = TypeRegistry()
    registry.register("file", failing)

    with pytest.raises(ConversionError) as excinfo:
        to_runtime_handle(Resource(type_name, "x"), registry, failing)

    assert excinfo.value is error
    assert len(failing.calls) == 1


def test_arbitrary_constructor_errors_are_not_wrapped(resource: Resource) -> None:
    registry = TypeRegistry()
    registry.register("file", RecordingConstructor(error=KeyError("boom")))

    with pytest.raises(KeyError):
        resource.to_runtime(registry)


def test_registry_rejects_duplicates_and_invalid_constructors() -> None:
    registry = TypeRegistry()
    registry.register("file", RecordingConstructor())

    with pytest.raises(ValueError):
        registry.register("file", RecordingConstructor())
    with pytest.raises(ValueError):
        registry.register("", RecordingConstructor())
    with pytest.raises(TypeError):
        registry.register("user", object())  # type: ignore[arg-type]


def test_registry_queries_and_reset() -> None:
    registry = TypeRegistry()
    registry.register("user", RecordingConstructor())
    registry.register("file", RecordingConstructor())

    assert "file" in registry
    assert list(registry) == ["file", "user"]
    assert len(registry) == 2

    registry.reset()

    assert len(registry) == 0
    assert registry.lookup("file") is None


def test_component_carries_only_identity_and_parameters(resource: Resource) -> None:
    handle = to_runtime_handle(resource, TypeRegistry())

    assert handle == Component(reference=resource.reference, parameters={"one": "test", "two": "other"})
    assert not hasattr(handle, "members")
