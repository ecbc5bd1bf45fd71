"""
Test Configuration and Fixtures

This module provides:
- A throwaway SQLite database file per test session
- Table cleanup between integration tests
- The session-scoped TestClient (runs the real app lifespan)

Architecture:
- Unit tests (test/**/unit/): Override fixtures with no-ops in their own conftest.py
- Integration tests: Use the real SQLite store with cleanup between tests
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time (src.platform.config.core_setting)
# =============================================================================
import os
from pathlib import Path


_TEST_DIR = Path(__file__).parent
_TEST_DB_PATH = _TEST_DIR / 'test_log' / 'call_reservation_test.db'


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = _TEST_DIR / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{_TEST_DB_PATH}'
    os.environ['TIMEZONE'] = 'UTC'
    os.environ['ADMIN_EMAIL'] = 'admin@example.com'
    # Tests trigger scans explicitly; no background loop, no broker
    os.environ['REMINDER_SCHEDULER_ENABLED'] = 'false'
    os.environ['REMINDER_GRACE_MINUTES'] = '0'
    os.environ['KAFKA_ENABLED'] = 'false'


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from typing import Deque  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import create_engine, text  # noqa: E402

from src.platform.database.orm_db_setting import Base  # noqa: E402
import src.service.call_reservation.driven_adapter.model  # noqa: E402, F401


_SYNC_DB_URL = f'sqlite:///{_TEST_DB_PATH}'


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_sessionstart(session: pytest.Session) -> None:
    """Recreate the schema in a fresh database file"""
    _TEST_DB_PATH.unlink(missing_ok=True)
    engine = create_engine(_SYNC_DB_URL)
    Base.metadata.create_all(engine)
    engine.dispose()


def pytest_sessionfinish(session: pytest.Session, exitstatus: int) -> None:
    _TEST_DB_PATH.unlink(missing_ok=True)


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames.append('clean_database')


# =============================================================================
# Integration Test Fixtures
# =============================================================================
def _clean_all_tables() -> None:
    engine = create_engine(_SYNC_DB_URL)
    try:
        with engine.begin() as conn:
            for table in reversed(Base.metadata.sorted_tables):
                conn.execute(text(f'DELETE FROM "{table.name}"'))
    finally:
        engine.dispose()


@pytest.fixture(scope='function')
def clean_database() -> Generator[None, None, None]:
    _clean_all_tables()
    yield


@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    from src.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def email_outbox(client: TestClient) -> Generator[Deque[dict], None, None]:
    """Messages captured by the in-memory e-mail notifier during one test"""
    from src.platform.config.di import container

    outbox = container.email_notifier().sent_emails
    outbox.clear()
    yield outbox
    outbox.clear()
