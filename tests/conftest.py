import os

import pytest

from sqlfluent.query_builder.aliases import _reset_default_alias_generator
from sqlfluent.settings import _reload_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test against default settings and a fresh alias counter."""
    for key in list(os.environ):
        if key.upper().startswith("SQLFLUENT_"):
            monkeypatch.delenv(key)
    # keep a developer's .env out of the settings under test
    monkeypatch.chdir(tmp_path)
    _reload_settings()
    _reset_default_alias_generator()
    yield
    _reset_default_alias_generator()
