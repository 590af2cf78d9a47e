"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for race condition tests.
"""

from unittest.mock import Mock

import pytest
from psycopg_pool import ConnectionPool

from reviewer_signup.adapters.repository.postgres import PostgresAccountRepository
from reviewer_signup.domain.signup import SignUpService


@pytest.fixture
def repository(pool: ConnectionPool, clean_database: None) -> PostgresAccountRepository:
    """Create repository instance on a clean table for each test."""
    return PostgresAccountRepository(pool)


@pytest.fixture
def blind_service(repository: PostgresAccountRepository) -> SignUpService:
    """
    Service whose uniqueness lookup never sees stored rows.

    Reproduces the window where concurrent signups all pass the lookup
    before any of them inserts.
    """
    blind = Mock(wraps=repository)
    blind.find_by_username.return_value = None
    return SignUpService(repository=blind, bcrypt_cost=4)
