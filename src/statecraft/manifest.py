# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Render resources as manifest source text."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Final

from .types import ParameterScalar, ParameterValue

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .resource import Resource

INDENT: Final[str] = "    "


def scalar_text(value: ParameterScalar) -> str:
    """Return the manifest text form of ``value`` without quoting.

    Booleans use the lowercase ``true``/``false`` literals; everything else
    uses ``str``.
    """

    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def quote(text: str) -> str:
    """Wrap ``text`` in single quotes, escaping backslashes and quotes."""

    escaped = text.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def render_value(value: ParameterValue) -> str:
    """Return the quoted manifest form of a parameter value.

    Args:
        value: Scalar or list of scalars.

    Returns:
        str: ``'text'`` for scalars, ``['a','b']`` for sequences.
    """

    if isinstance(value, list):
        return "[" + ",".join(quote(scalar_text(item)) for item in value) + "]"
    return quote(scalar_text(value))


def render(resource: Resource) -> str:
    """Return deterministic manifest text for ``resource``.

    The header keeps the declared type untouched and single-quotes the title;
    parameters follow in insertion order, one per line.

    Args:
        resource: Resource to render. It is never mutated.

    Returns:
        str: Manifest text ending with a newline.
    """

    lines = [f"{resource.type} {{ {quote(resource.title)}:\n"]
    for name, value in resource.iterate():
        lines.append(f"{INDENT}{name} => {render_value(value)},\n")
    lines.append("}\n")
    return "".join(lines)


def render_all(resources: Iterable[Resource]) -> str:
    """Render several resources separated by blank lines."""

    return "\n".join(render(resource) for resource in resources)


__all__ = ["INDENT", "quote", "render", "render_all", "render_value", "scalar_text"]
