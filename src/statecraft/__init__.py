# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Declarative resource model: identity, parameters, tags, and conversions."""

from __future__ import annotations

from importlib import metadata

from .conversion import Component, ComponentConstructor, TypeRegistry, to_runtime_handle
from .errors import (
    ArgumentError,
    ConfigError,
    ConversionError,
    ProgrammerMisuseError,
    SerializationError,
    StatecraftError,
)
from .identity import ResourceReference
from .manifest import render
from .parameters import ParameterStore, Symbol, sym
from .resource import Resource
from .serialization import deserialize, dumps, loads, serialize
from .tagging import default_tags, is_valid_tag

__all__ = [
    "ArgumentError",
    "Component",
    "ComponentConstructor",
    "ConfigError",
    "ConversionError",
    "ParameterStore",
    "ProgrammerMisuseError",
    "Resource",
    "ResourceReference",
    "SerializationError",
    "StatecraftError",
    "Symbol",
    "TypeRegistry",
    "__version__",
    "default_tags",
    "deserialize",
    "dumps",
    "is_valid_tag",
    "loads",
    "render",
    "serialize",
    "sym",
    "to_runtime_handle",
]

try:
    __version__ = metadata.version("statecraft")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
