"""Pytest configuration and shared fixtures."""

import pytest
from unittest.mock import MagicMock


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically skip integration tests if not explicitly requested."""
    if config.getoption("-m") and "integration" in config.getoption("-m"):
        # Integration tests are explicitly requested, don't skip
        return

    # Skip integration tests by default
    skip_integration = pytest.mark.skip(reason="Integration tests skipped by default. Run with -m integration to enable.")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def mock_session():
    """A mock requests.Session with real header storage."""
    session = MagicMock()
    session.headers = {}
    return session


@pytest.fixture
def ok_status():
    return {
        "timestamp": "2024-05-01T12:00:00.000Z",
        "error_code": 0,
        "error_message": None,
        "elapsed": 10,
        "credit_count": 1,
    }
