# tests/conftest.py
from __future__ import annotations
import pytest

from studentbot.common import settings as s

_ENV_KEYS = ("APP_NAME", "APP_ENV", "LOG_LEVEL", "PAYLOAD__BY_ALIAS", "PAYLOAD__EXCLUDE_NONE")

@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    """
    Each test starts from default settings: no inherited env vars,
    no .env picked up from the working directory, and a cold cache.
    """
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    s.get_settings.cache_clear()
    yield
    s.get_settings.cache_clear()
