"""
PostgreSQL repository adapter - Implements CustomerRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Driver errors never leave this module as psycopg types: every
psycopg.Error is re-raised as the domain's PersistenceError, with the
original exception chained for logs.
"""

import logging
from pathlib import Path

import psycopg
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb
from psycopg_pool import ConnectionPool

from onboard.domain.customer import Customer
from onboard.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)

_COLUMNS = (
    "full_name, email, phone_number, gender, date_of_birth, address, "
    "password, latitude, longitude, device_info"
)


class PostgresCustomerRepository:
    """
    Implements CustomerRepository protocol via psycopg3.

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

    def insert(self, customer: Customer) -> Customer:
        """
        Insert a customer row.

        Args:
            customer: Customer to store; id and created_at are ignored

        Returns:
            The stored customer, with database-assigned id and created_at

        Raises:
            PersistenceError: On any database error
        """
        sql = f"""
            INSERT INTO customers ({_COLUMNS})
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
            RETURNING id, {_COLUMNS}, created_at
        """
        device_info = Jsonb(customer.device_info) if customer.device_info is not None else None
        params = (
            customer.full_name,
            customer.email,
            customer.phone_number,
            customer.gender,
            customer.date_of_birth,
            customer.address,
            customer.password,
            customer.latitude,
            customer.longitude,
            device_info,
        )

        try:
            with self._pool.connection() as conn, conn.cursor(row_factory=dict_row) as cursor:
                cursor.execute(sql, params)
                row = cursor.fetchone()
                conn.commit()
        except psycopg.Error as e:
            logger.error("Customer insert failed: %s", e)
            raise PersistenceError(str(e)) from e

        return _row_to_customer(row)

    def find_by_phone(self, phone_number: str) -> Customer | None:
        """
        Fetch the earliest customer registered with this exact phone number.

        Args:
            phone_number: Phone number, compared verbatim

        Returns:
            Matching customer, or None if no row matches

        Raises:
            PersistenceError: On any database error
        """
        sql = f"""
            SELECT id, {_COLUMNS}, created_at
            FROM customers
            WHERE phone_number = %s
            ORDER BY id
            LIMIT 1
        """

        try:
            with self._pool.connection() as conn, conn.cursor(row_factory=dict_row) as cursor:
                cursor.execute(sql, (phone_number,))
                row = cursor.fetchone()
        except psycopg.Error as e:
            logger.error("Customer lookup failed: %s", e)
            raise PersistenceError(str(e)) from e

        if row is None:
            return None
        return _row_to_customer(row)


def _row_to_customer(row: dict) -> Customer:
    return Customer(
        id=row["id"],
        full_name=row["full_name"],
        email=row["email"],
        phone_number=row["phone_number"],
        gender=row["gender"],
        date_of_birth=row["date_of_birth"],
        address=row["address"],
        password=row["password"],
        latitude=row["latitude"],
        longitude=row["longitude"],
        device_info=row["device_info"],
        created_at=row["created_at"],
    )


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Shipped as package data: onboard/adapters/repository/postgres.py -> onboard/migrations/
    migrations_dir = Path(__file__).parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

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
