"""Shared fixtures for the test suite."""

import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from finance_api.app.core.store import InMemoryStore
from finance_api.app.main import create_app


@pytest.fixture
def store():
    """Freshly seeded store, not shared with any other test."""
    return InMemoryStore()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    """TestClient with startup events run (documentation already built)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def mock_response():
    """Factory for mock ``requests`` responses."""
    import requests

    def _make(status_code=200, json_data=None, text=""):
        resp = MagicMock()
        resp.status_code = status_code
        resp.json.return_value = json_data
        resp.text = text
        resp.content = b"" if json_data is None and not text else b"x"
        if status_code >= 400:
            resp.raise_for_status.side_effect = requests.HTTPError(
                f"{status_code} Error", response=resp
            )
        else:
            resp.raise_for_status.return_value = None
        return resp
    return _make
