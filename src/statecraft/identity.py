# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resource identity: the immutable ``(type, title)`` pair."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from .errors import ArgumentError

TYPE_SEGMENT_SEPARATOR = "::"


def _require_text(value: object, *, field: str) -> str:
    """Return ``value`` when it is a non-empty string, otherwise raise.

    Args:
        value: Candidate identity component.
        field: Name of the component used in error messages.

    Returns:
        str: The validated component.

    Raises:
        ArgumentError: If ``value`` is missing, empty, or not a string.
    """

    if value is None:
        raise ArgumentError(f"resources require a {field}")
    if not isinstance(value, str):
        raise ArgumentError(f"resource {field} must be a string, not {type(value).__name__}")
    if not value:
        raise ArgumentError(f"resource {field} must be non-empty")
    return value


def canonical_type_name(type_name: str) -> str:
    """Return ``type_name`` with every ``::`` segment capitalised.

    Args:
        type_name: Resource type exactly as declared (``"one::two"``).

    Returns:
        str: Display form used in references (``"One::Two"``).
    """

    segments = type_name.split(TYPE_SEGMENT_SEPARATOR)
    return TYPE_SEGMENT_SEPARATOR.join(segment[:1].upper() + segment[1:] for segment in segments)


@total_ordering
@dataclass(frozen=True, slots=True)
class ResourceReference:
    """Identify a resource by its declared type and title.

    Equality and hashing use the literal type and title. Ordering follows the
    canonical reference string so that collections of references sort stably.
    """

    type: str
    title: str

    def __post_init__(self) -> None:
        _require_text(self.type, field="type")
        _require_text(self.title, field="title")

    def canonical_reference(self) -> str:
        """Return the ``Type[title]`` display string for this identity.

        Returns:
            str: Canonical reference such as ``File[/etc/hosts]``.
        """

        return f"{canonical_type_name(self.type)}[{self.title}]"

    def __str__(self) -> str:
        return self.canonical_reference()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ResourceReference):
            return NotImplemented
        return self.canonical_reference() < other.canonical_reference()


__all__ = ["ResourceReference", "canonical_type_name"]
