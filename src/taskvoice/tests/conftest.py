"""
Shared fixtures for taskvoice tests.

Reference instants are fixed so relative phrases resolve deterministically.
2024-01-03 is a Wednesday.
"""
from datetime import datetime

import pytest

from taskvoice.config.vocabulary import clear_vocabulary_cache


@pytest.fixture
def wednesday():
    """Wednesday 2024-01-03 10:00 (naive)."""
    return datetime(2024, 1, 3, 10, 0)


@pytest.fixture
def monday():
    """Monday 2024-01-08 08:00 (naive)."""
    return datetime(2024, 1, 8, 8, 0)


@pytest.fixture
def late_december():
    """Saturday 2024-12-28 12:00, for year rollover."""
    return datetime(2024, 12, 28, 12, 0)


@pytest.fixture(autouse=True)
def fresh_vocabulary(monkeypatch):
    """Every test sees the bundled vocabulary."""
    monkeypatch.delenv("TASKVOICE_VOCABULARY_PATH", raising=False)
    clear_vocabulary_cache()
    yield
    clear_vocabulary_cache()
