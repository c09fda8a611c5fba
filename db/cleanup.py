"""
db/cleanup.py
-------------
Helpers that release per-call resources without letting a failed release
hide the error that is already propagating.
"""

from contextlib import contextmanager

from utils.logger import get_logger

logger = get_logger(__name__)


def close_quietly(*resources) -> None:
    """
    Close each resource in the given order, skipping ``None``.

    A failure is logged and the remaining resources are still closed.
    """
    for resource in resources:
        if resource is None:
            continue
        try:
            resource.close()
        except Exception as e:
            logger.warning(f"Failed to close {type(resource).__name__}: {e}")


def rollback_quietly(conn) -> None:
    """Roll back the current transaction, logging any failure."""
    try:
        conn.rollback()
    except Exception as e:
        logger.warning(f"Rollback failed: {e}")


@contextmanager
def connection_scope(provider):
    """
    Acquire one connection for the duration of the block.

    The connection is always handed back to the provider, never closed.
    """
    conn = provider.acquire()
    try:
        yield conn
    finally:
        try:
            provider.release(conn)
        except Exception as e:
            logger.warning(f"Failed to return connection to the provider: {e}")
