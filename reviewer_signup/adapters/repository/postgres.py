"""
PostgreSQL repository adapter - Implements AccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Column names are upper-snake-case and therefore quoted in every statement.
The USERNAME column carries a UNIQUE constraint; insert() relies on it via
ON CONFLICT DO NOTHING so that the lookup-then-insert sequence in the
domain cannot produce duplicate accounts under concurrency.
"""

import logging
from pathlib import Path

from psycopg_pool import ConnectionPool

from reviewer_signup.domain.ports import AccountRecord

logger = logging.getLogger(__name__)

ACCOUNT_TABLE = "reviewer_account"

MIGRATIONS_DIR = Path(__file__).parent / "migrations"


class PostgresAccountRepository:
    """
    Implements AccountRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def find_by_username(self, username: str) -> AccountRecord | None:
        """
        Fetch the account whose USERNAME equals the given value exactly.

        Args:
            username: Username to match

        Returns:
            AccountRecord if a row matches, None otherwise
        """
        sql = f"""
            SELECT "FULL_NAME", "EMAIL_ADDRESS", "USERNAME", "PASSWORD", "PROF_AREA"
            FROM {ACCOUNT_TABLE}
            WHERE "USERNAME" = %s
            LIMIT 1
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (username,))
            row = cursor.fetchone()

        if row is None:
            return None

        return AccountRecord(
            full_name=row[0],
            email_address=row[1],
            username=row[2],
            password_hash=row[3],
            professional_area=row[4],
        )

    def insert(self, record: AccountRecord) -> bool:
        """
        Insert a new account row.

        Uses INSERT ... ON CONFLICT DO NOTHING on the USERNAME unique
        constraint, so a concurrent signup for the same username is
        rejected atomically instead of raising.

        Args:
            record: Normalized account with hashed password

        Returns:
            True if the row was inserted, False if the username already exists
        """
        sql = f"""
            INSERT INTO {ACCOUNT_TABLE} ("FULL_NAME", "EMAIL_ADDRESS", "USERNAME", "PASSWORD", "PROF_AREA")
            VALUES (%s, %s, %s, %s, %s)
            ON CONFLICT ("USERNAME") DO NOTHING
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(
                sql,
                (
                    record.full_name,
                    record.email_address,
                    record.username,
                    record.password_hash,
                    record.professional_area,
                ),
            )
            conn.commit()
            return cursor.rowcount == 1


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    if not MIGRATIONS_DIR.exists():
        logger.warning(f"Migrations directory not found: {MIGRATIONS_DIR}")
        return

    sql_files = sorted(MIGRATIONS_DIR.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
