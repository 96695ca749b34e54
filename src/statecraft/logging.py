# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing console reporting driven by :class:`~statecraft.config.Settings`."""

from __future__ import annotations

import sys
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

from rich.console import Console
from rich.text import Text

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config import Settings


class Level(str, Enum):
    """Severity of a console report, with its style and emoji prefix."""

    INFO = "info"
    ERROR = "error"

    @property
    def style(self) -> str:
        return "cyan" if self is Level.INFO else "red"

    @property
    def prefix(self) -> str:
        return "ℹ️ " if self is Level.INFO else "❌ "


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def _cached_console(color: bool, emoji: bool, tty: bool) -> Console:
    color_system: Literal["auto"] | None = "auto" if color and tty else None
    return Console(
        color_system=color_system,
        force_terminal=tty,
        no_color=not (color and tty),
        emoji=emoji,
        soft_wrap=True,
    )


def get_console(*, color: bool, emoji: bool) -> Console:
    """Return a cached Rich console for the ``color``/``emoji`` preset and current TTY state."""

    return _cached_console(color, emoji, detect_tty())


def report(level: Level, msg: str, settings: Settings | None = None) -> None:
    """Print ``msg`` styled for ``level``.

    Args:
        level: Severity deciding the style and emoji prefix.
        msg: Message text; printed literally, never parsed as Rich markup.
        settings: Presentation preferences; without them colour follows the
            TTY and emoji are off, which is what the CLI uses before its
            settings could be loaded.
    """

    use_emoji = settings.use_emoji if settings is not None else False
    use_color = (settings.use_color if settings is not None else True) and detect_tty()
    console = get_console(color=use_color, emoji=use_emoji)
    text = Text(f"{level.prefix if use_emoji else ''}{msg}")
    if use_color:
        text.stylize(level.style)
    console.print(text)


__all__ = ["Level", "detect_tty", "get_console", "report"]
