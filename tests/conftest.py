import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep settings tests independent from the developer's shell."""
    for key in list(os.environ):
        if key.startswith("CMSCONFIG_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("CONFIG_FILE", raising=False)
