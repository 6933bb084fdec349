"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
load_dotenv()


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture
def data_root(tmp_path, monkeypatch):
    """Point the configured data root at a per-test temporary directory."""
    monkeypatch.setenv("LITEQUERY_DATA_ROOT", str(tmp_path))
    return tmp_path
