"""Pytest configuration and fixtures.

Provides environment isolation so ``WRAPPERS_*`` variables never leak
into tests. All fixtures here are autouse.
"""

from __future__ import annotations

import os

import pytest

from wrappers.config import get_settings


@pytest.fixture(autouse=True)
def isolate_wrappers_env(monkeypatch):
    """Clear WRAPPERS_* env vars and the cached settings around each test."""
    for key in list(os.environ.keys()):
        if key.startswith("WRAPPERS_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
