# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import os

import pytest

from statecraft.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def _isolate_statecraft_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop ``STATECRAFT_*`` variables inherited from the invoking shell."""

    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
