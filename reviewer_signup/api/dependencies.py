"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from reviewer_signup.adapters.repository.postgres import PostgresAccountRepository
from reviewer_signup.config.settings import get_settings
from reviewer_signup.domain.signup import SignUpService


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresAccountRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresAccountRepository(pool)


def get_signup_service(request: Request) -> SignUpService:
    """
    Create signup service with injected dependencies.

    Wires the repository and the configured bcrypt cost into the domain service.
    """
    repository = get_repository(request)
    return SignUpService(repository=repository, bcrypt_cost=get_settings().bcrypt_cost)
