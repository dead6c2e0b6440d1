"""
Pytest configuration and shared fixtures
"""

from unittest.mock import Mock

import pytest

from apiharness.config import Config


@pytest.fixture
def configuration():
    """Config pointing at the example host"""
    return Config({"app": {"host": "http://example.com"}})


@pytest.fixture
def response():
    """Successful response with a plain-text body"""
    return Mock(status_code=200, text="foo")


@pytest.fixture
def transport(response):
    """Transport double whose verb methods all return the success response"""
    mock_transport = Mock()
    for verb in ("get", "post", "put", "delete"):
        getattr(mock_transport, verb).return_value = response
    return mock_transport
