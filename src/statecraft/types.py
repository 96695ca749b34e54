# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for the resource model."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias

ParameterScalar: TypeAlias = str | int | float | bool
ParameterValue: TypeAlias = ParameterScalar | list[ParameterScalar]

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

FactValue: TypeAlias = str | int | float | bool | None | list["FactValue"] | dict[str, "FactValue"]

SCALAR_TYPES: Final[tuple[type, ...]] = (str, int, float, bool)
SERIALIZATION_FORMAT_VERSION: Final[str] = "1.0.0"

__all__ = [
    "FactValue",
    "JSONPrimitive",
    "JSONValue",
    "ParameterScalar",
    "ParameterValue",
    "SCALAR_TYPES",
    "SERIALIZATION_FORMAT_VERSION",
]
