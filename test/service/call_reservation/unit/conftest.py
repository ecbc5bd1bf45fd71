"""
Unit test configuration for the call reservation service.

Overrides autouse fixtures from parent conftest to enable pure unit testing
without infrastructure dependencies (database, HTTP client).
"""

from collections.abc import Generator
from unittest.mock import MagicMock

from fastapi.testclient import TestClient
import pytest


@pytest.fixture(scope='function')
def clean_database() -> Generator[None, None, None]:
    """No-op override for unit tests - no real database needed"""
    yield


@pytest.fixture(scope='session')
def client() -> Generator[MagicMock, None, None]:
    """Mock client for unit tests - prevents TestClient/lifespan from being created"""
    mock_client = MagicMock(spec=TestClient)
    yield mock_client
