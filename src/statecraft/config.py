# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Runtime settings with layered precedence (defaults, TOML, environment)."""

from __future__ import annotations

import os
import socket
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
CONFIG_FILENAME: Final[str] = "statecraft.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "statecraft"
ENV_PREFIX: Final[str] = "STATECRAFT_"


def default_certname() -> str:
    """Return the lower-cased fully qualified host name of this machine."""

    return socket.getfqdn().lower()


class Settings(BaseModel):
    """Process-wide policy consumed by the facts terminus and the CLI."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    certname: str = Field(default_factory=default_certname, min_length=1)
    environment: str = Field(default="production", min_length=1)
    stringify_facts: bool = False
    use_color: bool = True
    use_emoji: bool = False


def _read_toml(path: Path) -> dict[str, Any]:
    """Return the parsed TOML document at ``path`` or an empty mapping.

    Raises:
        ConfigError: If the document cannot be parsed.
    """

    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML: {exc}") from exc


def _pyproject_section(path: Path) -> dict[str, Any]:
    document = _read_toml(path)
    tool_section = document.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"{path}: [tool.{PYPROJECT_SECTION_KEY}] must be a table")
    return dict(section)


def _env_overrides(env: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for field_name in Settings.model_fields:
        key = f"{ENV_PREFIX}{field_name.upper()}"
        if key in env:
            overrides[field_name] = env[key]
    return overrides


def load_settings(root: Path | None = None, *, env: Mapping[str, str] | None = None) -> Settings:
    """Resolve :class:`Settings` for the project rooted at ``root``.

    Precedence, lowest first: built-in defaults, ``[tool.statecraft]`` in
    ``pyproject.toml``, ``statecraft.toml``, then ``STATECRAFT_*`` environment
    variables.

    Args:
        root: Directory holding the configuration files; defaults to the
            current working directory.
        env: Optional environment mapping used instead of :data:`os.environ`.

    Returns:
        Settings: Validated, immutable settings.

    Raises:
        ConfigError: If a configuration file or override is invalid.
    """

    base = (root or Path.cwd()).resolve()
    environment = os.environ if env is None else env
    merged: dict[str, Any] = {}
    merged.update(_pyproject_section(base / PYPROJECT_FILENAME))
    merged.update(_read_toml(base / CONFIG_FILENAME))
    merged.update(_env_overrides(environment))
    try:
        return Settings.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"invalid statecraft configuration: {exc}") from exc


__all__ = ["CONFIG_FILENAME", "ENV_PREFIX", "Settings", "default_certname", "load_settings"]
