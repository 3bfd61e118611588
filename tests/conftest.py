"""Shared fixtures for the relay test suite."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from user_relay.main import app
from user_relay.shared.security.rate_limiting import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits() -> Iterator[None]:
    """Every test starts with an empty rate limit window."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Test client with the app lifespan (and its upstream client) running."""
    with TestClient(app) as test_client:
        yield test_client
