import os

import pytest

from busnet.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate tests from BUSNET_* variables and the cached config."""
    for key in list(os.environ):
        if key.startswith("BUSNET_"):
            monkeypatch.delenv(key)
    reset_config()
    yield
    reset_config()
