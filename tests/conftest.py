"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Database connection pool (skips tests when PostgreSQL is unreachable)
- Table cleanup between tests
- Repository mock factories
"""

from collections.abc import Generator
from unittest.mock import Mock

import pytest
from psycopg_pool import ConnectionPool, PoolTimeout

from reviewer_signup.adapters.repository.postgres import run_migrations
from reviewer_signup.config.settings import get_settings


@pytest.fixture(scope="session")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create migrated connection pool for database-backed tests."""
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=True,
    )
    try:
        pool.wait(timeout=5.0)
    except PoolTimeout:
        pool.close()
        pytest.skip(f"PostgreSQL not reachable at {settings.database_url}")

    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Clean reviewer_account table before each test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM reviewer_account")
        conn.commit()
    yield


@pytest.fixture
def empty_repository() -> Mock:
    """Repository mock with no stored accounts that accepts every insert."""
    repo = Mock()
    repo.find_by_username.return_value = None
    repo.insert.return_value = True
    return repo
