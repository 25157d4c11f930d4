"""Fixtures for HTTP-level tests."""

import pytest
from fastapi.testclient import TestClient

from mockapi.application import create_app


@pytest.fixture
def client():
    """Create test client."""
    app = create_app()
    return TestClient(app)
