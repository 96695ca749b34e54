# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tag grammar and the default tag derivation for resources."""

from __future__ import annotations

import re
from collections.abc import Iterable
from re import Pattern
from typing import Final

from .identity import ResourceReference

TAG_PATTERN: Final[Pattern[str]] = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_:.\-]*$")


def is_valid_tag(value: object) -> bool:
    """Return ``True`` when ``value`` is a string matching :data:`TAG_PATTERN`."""

    return isinstance(value, str) and TAG_PATTERN.fullmatch(value) is not None


def default_tags(reference: ResourceReference) -> frozenset[str]:
    """Return the tags every resource carries from construction onward.

    The type is always included; the title only when it is itself a valid tag,
    so path-like titles such as ``/etc/hosts`` are skipped without error.

    Args:
        reference: Identity of the resource being tagged.

    Returns:
        frozenset[str]: Default tag set for ``reference``.
    """

    tags = {reference.type}
    if is_valid_tag(reference.title):
        tags.add(reference.title)
    return frozenset(tags)


class Tagging:
    """Mixin providing a plain, extensible tag set."""

    _tags: set[str]

    def _init_tags(self, initial: Iterable[str] = ()) -> None:
        self._tags = set(initial)

    def tag(self, *tags: str) -> None:
        """Add each of ``tags`` to the tag set."""

        self._tags.update(tags)

    def is_tagged(self, *tags: str) -> bool:
        """Return ``True`` when any of ``tags`` is present."""

        return any(tag in self._tags for tag in tags)

    @property
    def tags(self) -> frozenset[str]:
        """Return a snapshot of the current tag set."""

        return frozenset(self._tags)


__all__ = ["TAG_PATTERN", "Tagging", "default_tags", "is_valid_tag"]
