"""
Shared fixtures for the post feed tests.

Each test gets its own store and application so no state leaks between
tests; seeding is switched off before the application module is
imported.
"""
import os

os.environ.setdefault("SEED_SAMPLE_POSTS", "false")

import pytest
from fastapi.testclient import TestClient

from post_feed_api.app.core.store import PostStore
from post_feed_api.app.main import create_app


SAMPLE_BODY = (
    '{"id":"00000000-0000-0000-0000-000000000001","title":"T","body":"B",'
    '"author":{"name":"A"},"created_at":"2024-01-01T00:00:00Z"}'
)


@pytest.fixture
def store():
    """Fixture that creates an empty post store."""
    return PostStore()


@pytest.fixture
def client(store):
    """Fixture that serves a fresh application over the given store."""
    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_body():
    """Fixture returning a valid post in its JSON wire format."""
    return SAMPLE_BODY
