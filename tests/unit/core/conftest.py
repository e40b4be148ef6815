"""Shared fixtures for core unit tests"""

import pytest


@pytest.fixture(name="six_lines")
def six_lines_fixture():
    return ["aaa", "bbb", "ccc", "ddd", "eee", "fff"]
