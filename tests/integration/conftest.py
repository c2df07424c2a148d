"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_SEARCHBASE_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_SEARCHBASE_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_SEARCHBASE_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def test_index() -> str:
    return os.environ.get("SEARCHBASE_TEST_INDEX", "test-index")
