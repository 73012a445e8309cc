"""Shared fixtures."""

import pytest

from errorlist.config import clear_settings_cache
from errorlist.observability import reset_logging


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> object:
    """Isolate each test from ERRORLIST_* environment and cached settings."""
    import os
    for key in [k for k in os.environ if k.startswith("ERRORLIST_")]:
        monkeypatch.delenv(key)
    clear_settings_cache()
    reset_logging()
    yield
    clear_settings_cache()
    reset_logging()
