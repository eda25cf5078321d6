"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_ALIDNS_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_ALIDNS_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_ALIDNS_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def credentials():
    key_id = os.environ.get("ALIDNS_KEY_ID")
    key_secret = os.environ.get("ALIDNS_KEY_SECRET")
    if not key_id or not key_secret:
        pytest.skip("Please set ALIDNS_KEY_ID and ALIDNS_KEY_SECRET environment variables.")
    return key_id, key_secret
