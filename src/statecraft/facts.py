# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Node facts and the read-only terminus that retrieves them from a fact source."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from importlib import metadata
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from .config import Settings
from .errors import ArgumentError, ProgrammerMisuseError
from .resource import Resource
from .types import SCALAR_TYPES, FactValue

LOGGER = logging.getLogger(__name__)

FACTS_RESOURCE_TYPE = "node"


def _package_version() -> str:
    try:
        return metadata.version("statecraft")
    except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
        return "0.0.0"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@runtime_checkable
class FactSource(Protocol):
    """Collaborator exposing the facts observed on the local system."""

    def snapshot(self) -> Mapping[str, FactValue]:
        """Return a fresh mapping of fact name to value."""
        ...


class StaticFactSource:
    """Fact source returning a fixed mapping, e.g. loaded from a JSON export."""

    def __init__(self, facts: Mapping[str, FactValue]) -> None:
        self._facts = dict(facts)

    def snapshot(self) -> Mapping[str, FactValue]:
        """Return a shallow copy of the configured facts."""

        return dict(self._facts)


def _fact_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(_sanitize_value(value), sort_keys=True)
    return str(value)


def _sanitize_value(value: Any) -> FactValue:
    if value is None or isinstance(value, SCALAR_TYPES):
        return value
    if isinstance(value, Mapping):
        return {str(key): _sanitize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        items = sorted(value, key=str) if isinstance(value, (set, frozenset)) else value
        return [_sanitize_value(item) for item in items]
    return str(value)


class FactSet(BaseModel):
    """Facts observed for a single node."""

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(min_length=1)
    values: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=_utc_now)

    def add_local_facts(self, settings: Settings) -> FactSet:
        """Record facts describing this agent: certificate name, version, environment.

        Args:
            settings: Settings supplying the certificate name and environment.

        Returns:
            FactSet: ``self`` for chaining.
        """

        self.values["clientcert"] = settings.certname
        self.values["clientversion"] = _package_version()
        self.values["environment"] = settings.environment
        return self

    def stringify(self) -> FactSet:
        """Replace every value with its string form; structured values become JSON text."""

        self.values = {name: _fact_text(value) for name, value in self.values.items()}
        return self

    def sanitize(self) -> FactSet:
        """Coerce values recursively into JSON-compatible types."""

        self.values = {name: _sanitize_value(value) for name, value in self.values.items()}
        return self

    def to_resource(self) -> Resource:
        """Return the facts as a ``node`` resource.

        Scalars are carried as-is; nested structures and ``None`` are carried as
        their string form so the resource stays within the parameter value
        model.

        Raises:
            ArgumentError: If a fact name is not a valid parameter name.
        """

        resource = Resource(FACTS_RESOURCE_TYPE, self.name)
        for name, value in self.values.items():
            carried = value if isinstance(value, SCALAR_TYPES) else _fact_text(value)
            try:
                resource[name] = carried
            except ArgumentError as exc:
                raise ArgumentError(f"fact {name!r} cannot be carried as a parameter: {exc}") from exc
        return resource


class FactsTerminus:
    """Read-only terminus retrieving facts from a :class:`FactSource`.

    It always returns the local snapshot, whatever key is requested; saving or
    destroying facts through it is a programming error.
    """

    def __init__(self, source: FactSource, settings: Settings | None = None) -> None:
        """Bind the terminus to ``source`` and the resolved ``settings``."""

        self._source = source
        self._settings = settings or Settings()

    def find(self, key: str) -> FactSet:
        """Return the current facts labelled with ``key``.

        Args:
            key: Node name the facts are reported for.

        Returns:
            FactSet: Fresh snapshot with local facts added, stringified when
            ``stringify_facts`` is enabled and sanitised otherwise.
        """

        LOGGER.info("retrieving facts for %s", key)
        facts = FactSet(name=key, values=dict(self._source.snapshot()))
        facts.add_local_facts(self._settings)
        if self._settings.stringify_facts:
            facts.stringify()
        else:
            facts.sanitize()
        LOGGER.debug("retrieved %d facts for %s", len(facts.values), key)
        return facts

    def save(self, facts: FactSet) -> None:
        """Reject persistence attempts.

        Raises:
            ProgrammerMisuseError: Always.
        """

        raise ProgrammerMisuseError(
            "You cannot save facts to the fact source terminus; it is only used for retrieving facts",
        )

    def destroy(self, key: str) -> None:
        """Reject deletion attempts.

        Raises:
            ProgrammerMisuseError: Always.
        """

        raise ProgrammerMisuseError(
            "You cannot destroy facts in the fact source terminus; it is only used for retrieving facts",
        )


__all__ = ["FACTS_RESOURCE_TYPE", "FactSet", "FactSource", "FactsTerminus", "StaticFactSource"]
