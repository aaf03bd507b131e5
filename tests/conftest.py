"""Pytest configuration helpers for test collection.

Ensure the project root is on sys.path so tests can import `proxy_lib`
without requiring PYTHONPATH or an editable install.
"""
import sys
from pathlib import Path

import pytest


def pytest_configure(config):
    # Insert repo root (one level up from tests/) to sys.path
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def nested():
    return {'foo': 'bar', 'zod': {'baz': 'qux'}, 'items': [1, 2, 3]}
