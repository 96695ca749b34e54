# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Ordered parameter storage with a single canonical key space."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Mapping, MutableMapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from .errors import ArgumentError
from .types import SCALAR_TYPES, ParameterScalar, ParameterValue


@dataclass(frozen=True, slots=True)
class Symbol:
    """Interned parameter name, the symbolic counterpart of a plain string key."""

    name: str

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f":{self.name}"


def sym(name: str) -> Symbol:
    """Return the interned :class:`Symbol` for ``name``."""

    return Symbol(sys.intern(name))


ParameterKey: TypeAlias = str | Symbol | Enum


def canonical_name(key: object) -> str:
    """Collapse every accepted key form onto its canonical string.

    Args:
        key: Parameter name as a ``str``, :class:`Symbol` or ``Enum`` member.

    Returns:
        str: Canonical parameter name used for storage and lookup.

    Raises:
        ArgumentError: If ``key`` has an unsupported type or is empty.
    """

    if isinstance(key, Symbol):
        name = key.name
    elif isinstance(key, Enum):
        name = key.value if isinstance(key.value, str) else key.name
    elif isinstance(key, str):
        name = key
    else:
        raise ArgumentError(f"parameter names must be strings or symbols, not {type(key).__name__}")
    if not name:
        raise ArgumentError("parameter names must be non-empty")
    return str(name)


def normalize_value(value: object, *, name: str) -> ParameterValue:
    """Return ``value`` validated as a scalar or a fresh list of scalars.

    Args:
        value: Candidate parameter value.
        name: Canonical parameter name used in error messages.

    Returns:
        ParameterValue: The scalar itself, or a new ``list`` holding the
        sequence elements.

    Raises:
        ArgumentError: If ``value`` is neither a scalar nor a flat sequence of
            scalars.
    """

    if isinstance(value, SCALAR_TYPES):
        return value  # type: ignore[return-value]
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        items: list[ParameterScalar] = []
        for index, item in enumerate(value):
            if not isinstance(item, SCALAR_TYPES):
                raise ArgumentError(
                    f"parameter '{name}[{index}]' must be a scalar, not {type(item).__name__}",
                )
            items.append(item)  # type: ignore[arg-type]
        return items
    raise ArgumentError(f"parameter '{name}' has unsupported value type {type(value).__name__}")


class ParameterStore(MutableMapping[str, ParameterValue]):
    """Insertion-ordered mapping of canonical parameter names to values.

    Every key crossing the public surface goes through :func:`canonical_name`,
    so ``store["foo"]`` and ``store[sym("foo")]`` address the same slot.
    """

    def __init__(self, initial: Mapping[ParameterKey, object] | None = None) -> None:
        """Initialise the store, optionally seeding it from ``initial``.

        Args:
            initial: Mapping of parameter names to values applied in order.
        """

        self._values: dict[str, ParameterValue] = {}
        if initial:
            for key, value in initial.items():
                self.set(key, value)

    def set(self, name: ParameterKey, value: object) -> None:
        """Store ``value`` under the canonical form of ``name``.

        Args:
            name: Parameter name in any accepted form.
            value: Scalar or flat sequence of scalars.
        """

        key = canonical_name(name)
        self._values[key] = normalize_value(value, name=key)

    def get(self, name: ParameterKey, default: ParameterValue | None = None) -> ParameterValue | None:  # type: ignore[override]
        """Return the value stored for ``name`` or ``default`` when unset."""

        return self._values.get(canonical_name(name), default)

    def delete(self, name: ParameterKey) -> None:
        """Remove ``name`` from the store; absent names are ignored."""

        self._values.pop(canonical_name(name), None)

    def has(self, name: ParameterKey) -> bool:
        """Return ``True`` when ``name`` has a stored value."""

        return canonical_name(name) in self._values

    def size(self) -> int:
        """Return the number of stored parameters."""

        return len(self._values)

    def is_empty(self) -> bool:
        """Return ``True`` when no parameters are stored."""

        return not self._values

    def iterate(self) -> Iterator[tuple[str, ParameterValue]]:
        """Yield ``(name, value)`` pairs in insertion order.

        Each call returns a fresh generator over the current contents.
        """

        for key, value in self._values.items():
            yield key, value

    def to_dict(self) -> dict[str, ParameterValue]:
        """Return an ordered copy of the stored parameters, lists included."""

        return {key: list(value) if isinstance(value, list) else value for key, value in self._values.items()}

    def __getitem__(self, name: ParameterKey) -> ParameterValue:  # type: ignore[override]
        return self._values[canonical_name(name)]

    def __setitem__(self, name: ParameterKey, value: object) -> None:  # type: ignore[override]
        self.set(name, value)

    def __delitem__(self, name: ParameterKey) -> None:  # type: ignore[override]
        del self._values[canonical_name(name)]

    def __contains__(self, name: object) -> bool:
        try:
            return self.has(name)  # type: ignore[arg-type]
        except ArgumentError:
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def _typed_items(self) -> dict[str, object]:
        # Pair each scalar with its type so True and 1 (or 1 and 1.0) differ.
        return {
            key: tuple((type(item), item) for item in value) if isinstance(value, list) else (type(value), value)
            for key, value in self._values.items()
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterStore):
            return NotImplemented
        return self._typed_items() == other._typed_items()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ParameterStore({self._values!r})"


__all__ = [
    "ParameterKey",
    "ParameterStore",
    "Symbol",
    "canonical_name",
    "normalize_value",
    "sym",
]
