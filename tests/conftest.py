"""Root test configuration: isolate tests from ambient linediff settings"""

import os

import pytest


@pytest.fixture(autouse=True)
def clear_linediff_env(monkeypatch):
    """Remove LINEDIFF_* env vars so each test starts from Settings defaults."""
    for name in list(os.environ):
        if name.startswith("LINEDIFF_"):
            monkeypatch.delenv(name)
