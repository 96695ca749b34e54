# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for resource serialization and deserialization."""

from __future__ import annotations

import json

import pytest

from statecraft import Resource, SerializationError, deserialize, dumps, loads, serialize
from statecraft.serialization import dump_many, load_many


@pytest.fixture
def resource() -> Resource:
    resource = Resource("file", "/my/file")
    resource["one"] = "test"
    resource["two"] = "other"
    return resource


def _assert_equivalent(original: Resource, restored: Resource) -> None:
    assert restored.title == original.title
    assert restored.type == original.type
    assert list(restored.iterate()) == list(original.iterate())
    assert restored == original


def test_serialize_produces_structured_mapping(resource: Resource) -> None:
    payload = serialize(resource)

    assert payload["type"] == "file"
    assert payload["title"] == "/my/file"
    assert payload["parameters"] == {"one": "test", "two": "other"}
    assert payload["tags"] == ["file"]
    json.dumps(payload)


def test_round_trip_through_mapping(resource: Resource) -> None:
    _assert_equivalent(resource, deserialize(serialize(resource)))


@pytest.mark.parametrize(
    "parameters",
    [
        {},
        {"noop": True, "foo": ["one", "two"]},
        {"port": 8080, "ratio": 0.25, "enabled": False},
        {"empty": [], "mixed": ["a", 1, True, 2.5]},
        {"quote": "it's", "unicode": "café"},
    ],
)
def test_round_trip_through_json(parameters: dict[str, object]) -> None:
    original = Resource("one::two", "web01", parameters)

    restored = loads(dumps(original))

    _assert_equivalent(original, restored)
    for name, value in original.iterate():
        assert type(restored[name]) is type(value)


def test_default_tags_regenerate_on_load() -> None:
    original = Resource("file", "bar")

    assert loads(dumps(original)).tags == frozenset({"file", "bar"})


def test_extra_tags_are_restored(resource: Resource) -> None:
    resource.tag("webserver")

    assert deserialize(serialize(resource)).is_tagged("webserver")


def test_origin_metadata_round_trips() -> None:
    original = Resource("file", "/f", file="site.pp", line=12)

    restored = deserialize(serialize(original))

    assert restored.file == "site.pp"
    assert restored.line == 12


def test_stringify_policy_renders_scalars_as_text() -> None:
    original = Resource("file", "/f", {"noop": True, "mode": 644, "names": [1, False]})

    payload = serialize(original, stringify=True)

    assert payload["parameters"] == {"noop": "true", "mode": "644", "names": ["1", "false"]}
    assert serialize(original)["parameters"]["noop"] is True


@pytest.mark.parametrize(
    "payload",
    [
        {"title": "/f"},
        {"type": "file"},
        {"type": "", "title": "/f"},
        {"type": "file", "title": 3},
        {"type": "file", "title": "/f", "parameters": {"bad": {"nested": 1}}},
        {"type": "file", "title": "/f", "parameters": {"bad": None}},
        {"type": "file", "title": "/f", "parameters": []},
        {"type": "file", "title": "/f", "surprise": True},
        {"type": "file", "title": "/f", "format_version": "2.0.0"},
        {"type": "file", "title": "/f", "parameters": {"": "x"}},
    ],
)
def test_malformed_payloads_raise(payload: dict[str, object]) -> None:
    with pytest.raises(SerializationError):
        deserialize(payload)


def test_non_mapping_payload_raises() -> None:
    with pytest.raises(SerializationError):
        deserialize(["file", "/f"])  # type: ignore[arg-type]


def test_invalid_json_raises() -> None:
    with pytest.raises(SerializationError):
        loads("{not json")


def test_many_resources_round_trip(resource: Resource) -> None:
    other = Resource("user", "bob", {"uid": 1001})

    restored = load_many(dump_many([resource, other]))

    assert restored == [resource, other]
    assert load_many(dumps(other)) == [other]
