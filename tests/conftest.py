"""
tests/conftest.py
Global pytest configuration and fixtures.
"""

import pytest
from unittest.mock import MagicMock
from poolparser.fetcher import Fetcher
from poolparser.store import KeyValueStore


@pytest.fixture(autouse=True)
def no_courtesy_pauses(monkeypatch):
    """Tests shouldn't wait on the pauses meant for third-party sites"""
    monkeypatch.setattr("poolparser.fetcher.time.sleep", lambda *args, **kwargs: None)


@pytest.fixture
def store(tmp_path):
    with KeyValueStore(tmp_path / "db") as kv_store:
        yield kv_store


@pytest.fixture
def fetcher():
    return MagicMock(spec=Fetcher)
