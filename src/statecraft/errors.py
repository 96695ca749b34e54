# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by resource model operations."""

from __future__ import annotations


class StatecraftError(RuntimeError):
    """Base class for every error raised by :mod:`statecraft`."""


class ArgumentError(StatecraftError, ValueError):
    """Raised when a resource is constructed or mutated with invalid arguments."""


class SerializationError(StatecraftError):
    """Raised when a serialized resource payload is malformed or incomplete."""


class ConversionError(StatecraftError):
    """Raised by runtime constructors that cannot build a handle for a resource.

    The conversion layer never raises this itself; it only propagates whatever
    the selected constructor raises.
    """


class ProgrammerMisuseError(StatecraftError):
    """Raised when a read-only collaborator is asked to persist or delete data."""


class ConfigError(StatecraftError):
    """Raised when configuration input is invalid."""


__all__ = (
    "ArgumentError",
    "ConfigError",
    "ConversionError",
    "ProgrammerMisuseError",
    "SerializationError",
    "StatecraftError",
)
