import os

import pytest

from sqltree.settings import reload_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test against default settings."""
    for key in list(os.environ):
        if key.startswith("SQLTREE_"):
            monkeypatch.delenv(key, raising=False)
    reload_settings()
    yield
    monkeypatch.undo()
    reload_settings()
