"""
Shared fixtures for integration tests.

Provides a real PostgreSQL connection pool with the schema migrated.
Tests that use the pool are skipped when the database is unreachable.
"""

from collections.abc import Generator

import pytest
from psycopg_pool import ConnectionPool, PoolTimeout

from onboard.adapters.repository.postgres import run_migrations
from onboard.config.settings import get_settings


@pytest.fixture(scope="session")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool for integration tests."""
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
    """Empty the customers table before a test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM customers")
        conn.commit()
    yield
