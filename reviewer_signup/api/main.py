"""
reviewer-signup application entry point.

Builds the FastAPI app that serves the signup endpoint under
/api/authentication. The lifespan owns the only PostgreSQL pool in the
process; routes reach it through app.state via the dependency factories.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from reviewer_signup.adapters.repository.postgres import run_migrations
from reviewer_signup.api.authentication import router as authentication_router
from reviewer_signup.config.settings import get_settings

logger = logging.getLogger(__name__)

tags_metadata = [
    {
        "name": "authentication",
        "description": "Reviewer account signup",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the account store before serving and release it afterwards.

    The reviewer_account table is created (or confirmed) by the bundled
    migrations before the first signup can reach it.
    """
    settings = get_settings()

    logger.info(
        "Opening account store pool (min=%d, max=%d)",
        settings.pool_min_size,
        settings.pool_max_size,
    )
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )

    run_migrations(pool)
    app.state.pool = pool
    logger.info("Signup service ready")

    try:
        yield
    finally:
        pool.close()
        logger.info("Account store pool closed")


app = FastAPI(
    title="reviewer-signup",
    description="Reviewer account signup API - Validates, hashes and stores new accounts",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(authentication_router, prefix="/api/authentication")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """
    Report whether the account store answers queries.

    Returns {"status": "healthy"} after a SELECT 1 on the pool; a database
    failure propagates as an HTTP 500.
    """
    with request.app.state.pool.connection() as conn:
        conn.execute("SELECT 1")

    return {"status": "healthy"}
