"""Shared pytest fixtures.

`load_settings()` is cached process-wide; tests that change env vars must not
leak a rebuilt Settings (e.g. with strict restore on) into later tests.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from patternlab.core.settings import load_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Clear the settings cache around every test."""
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()
