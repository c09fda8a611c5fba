"""
db/connection.py
----------------
Connection Provider for the PostgreSQL store.
Uses psycopg2's ThreadedConnectionPool so independent threads can share
one pool. The DAO only ever sees the `ConnectionProvider` interface.
"""

from typing import Optional, Protocol

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from utils.logger import get_logger

logger = get_logger(__name__)


class ConnectionProvider(Protocol):
    """Supplies live connections on demand and takes them back."""

    def acquire(self):
        """Return a live connection. Raises ConnectionError on failure."""
        ...

    def release(self, conn) -> None:
        """Give a connection previously returned by acquire() back."""
        ...


class PooledConnectionProvider:
    """ConnectionProvider backed by a psycopg2 ThreadedConnectionPool."""

    def __init__(self, dsn: str, min_conn: int = 1, max_conn: int = 5):
        """
        Open the pool.

        Args:
            dsn: libpq connection string or URL.
            min_conn: Minimum number of connections to keep open.
            max_conn: Maximum number of connections allowed.

        Raises:
            ConnectionError: If the database is unreachable.
        """
        try:
            self._pool = pool.ThreadedConnectionPool(min_conn, max_conn, dsn)
        except psycopg2.Error as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise ConnectionError(f"Unable to open connection pool: {e}") from e
        logger.info(f"Database connection pool initialized ({min_conn}-{max_conn} connections).")

    def acquire(self):
        try:
            return self._pool.getconn()
        except (psycopg2.Error, pool.PoolError) as e:
            logger.error(f"Failed to acquire a connection: {e}")
            raise ConnectionError(f"Unable to acquire a connection: {e}") from e

    def release(self, conn) -> None:
        self._pool.putconn(conn)

    def close(self) -> None:
        """Close all connections in the pool."""
        self._pool.closeall()
        logger.info("Database connection pool closed.")


_provider: Optional[PooledConnectionProvider] = None


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX) -> PooledConnectionProvider:
    """
    Initialize the application-wide connection pool (idempotent).

    Returns:
        The shared PooledConnectionProvider.
    """
    global _provider
    if _provider is None:
        _provider = PooledConnectionProvider(DATABASE_URL, min_conn, max_conn)
    return _provider


def get_provider() -> PooledConnectionProvider:
    """
    Get the application-wide provider.

    Raises:
        RuntimeError: If the pool has not been initialized.
    """
    if _provider is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    return _provider


def close_pool() -> None:
    """Close the application-wide pool, if open."""
    global _provider
    if _provider is not None:
        _provider.close()
        _provider = None
