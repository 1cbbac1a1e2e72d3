"""Pytest configuration; ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep a developer's WORD_NUMS_* settings out of the suite."""
    monkeypatch.delenv("WORD_NUMS_SIGN_POLICY", raising=False)
    monkeypatch.delenv("WORD_NUMS_LOG_LEVEL", raising=False)
