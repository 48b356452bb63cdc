"""Shared fixtures for Hash Links tests."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hashlinks.main import app
from hashlinks.core.store import URLStore, get_store


@pytest.fixture
def store():
    """Create an isolated URL store."""
    return URLStore()


@pytest.fixture
def client(store):
    """Create a test client bound to the isolated store."""
    app.dependency_overrides[get_store] = lambda: store

    with TestClient(app, raise_server_exceptions=False) as client:
        yield client

    app.dependency_overrides.clear()
