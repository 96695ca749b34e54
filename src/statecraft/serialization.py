# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Lossless structured serialization for :class:`~statecraft.resource.Resource`."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ArgumentError, SerializationError
from .manifest import scalar_text
from .resource import Resource
from .types import SERIALIZATION_FORMAT_VERSION, ParameterScalar, ParameterValue


class ResourceDocument(BaseModel):
    """Validated structured form of a resource."""

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    format_version: str = SERIALIZATION_FORMAT_VERSION
    type: str = Field(min_length=1)
    title: str = Field(min_length=1)
    parameters: dict[str, ParameterScalar | list[ParameterScalar]] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    file: str | None = None
    line: int | None = None

    @field_validator("format_version")
    @classmethod
    def _check_format_version(cls, value: str) -> str:
        """Reject payloads written by an incompatible major format version."""
        supported_major = SERIALIZATION_FORMAT_VERSION.split(".", 1)[0]
        if value.split(".", 1)[0] != supported_major:
            raise ValueError(f"unsupported format version {value!r} (expected {supported_major}.x)")
        return value


def _stringify_value(value: ParameterValue) -> ParameterValue:
    if isinstance(value, list):
        return [scalar_text(item) for item in value]
    return scalar_text(value)


def serialize(resource: Resource, *, stringify: bool = False) -> dict[str, Any]:
    """Return a JSON-compatible mapping describing ``resource``.

    Args:
        resource: Resource to serialize.
        stringify: When ``True`` every parameter scalar is written in its
            manifest text form (``True`` becomes ``"true"``).

    Returns:
        dict[str, Any]: Mapping with ``type``, ``title``, ordered
        ``parameters``, sorted ``tags`` and any origin metadata.
    """

    parameters = resource.parameters.to_dict()
    if stringify:
        parameters = {name: _stringify_value(value) for name, value in parameters.items()}
    payload: dict[str, Any] = {
        "format_version": SERIALIZATION_FORMAT_VERSION,
        "type": resource.type,
        "title": resource.title,
        "parameters": parameters,
        "tags": sorted(resource.tags),
    }
    if resource.file is not None:
        payload["file"] = str(resource.file)
    if resource.line is not None:
        payload["line"] = resource.line
    return payload


def _from_document(document: ResourceDocument) -> Resource:
    try:
        resource = Resource(
            document.type,
            document.title,
            document.parameters,
            file=document.file,
            line=document.line,
        )
    except ArgumentError as exc:
        raise SerializationError(f"invalid resource payload: {exc}") from exc
    if document.tags:
        resource.tag(*document.tags)
    return resource


def deserialize(payload: Mapping[str, Any]) -> Resource:
    """Rebuild a :class:`Resource` from the output of :func:`serialize`.

    Args:
        payload: Structured resource mapping.

    Returns:
        Resource: Resource equal to the original in type, title and parameters.

    Raises:
        SerializationError: If ``payload`` is malformed, incomplete, or
            contains unknown fields.
    """

    if not isinstance(payload, Mapping):
        raise SerializationError(f"expected a resource object, not {type(payload).__name__}")
    try:
        document = ResourceDocument.model_validate(dict(payload))
    except ValidationError as exc:
        raise SerializationError(f"invalid resource payload: {exc}") from exc
    return _from_document(document)


def dumps(resource: Resource, *, stringify: bool = False, indent: int | None = None) -> str:
    """Return ``resource`` serialized as JSON text."""

    return json.dumps(serialize(resource, stringify=stringify), indent=indent)


def loads(text: str | bytes) -> Resource:
    """Return the resource encoded in the JSON ``text``.

    Raises:
        SerializationError: If ``text`` is not valid JSON or not a valid
            resource document.
    """

    try:
        document = ResourceDocument.model_validate_json(text)
    except ValidationError as exc:
        raise SerializationError(f"invalid resource document: {exc}") from exc
    return _from_document(document)


def load_many(text: str | bytes) -> list[Resource]:
    """Return every resource in ``text``, a JSON object or array of objects.

    Raises:
        SerializationError: If the JSON is invalid or any entry is malformed.
    """

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"invalid JSON: {exc}") from exc
    entries = payload if isinstance(payload, list) else [payload]
    return [deserialize(entry) for entry in entries]


def dump_many(resources: Iterable[Resource], *, stringify: bool = False, indent: int | None = None) -> str:
    """Return ``resources`` serialized as a JSON array."""

    return json.dumps([serialize(resource, stringify=stringify) for resource in resources], indent=indent)


__all__ = [
    "ResourceDocument",
    "deserialize",
    "dump_many",
    "dumps",
    "load_many",
    "loads",
    "serialize",
]
