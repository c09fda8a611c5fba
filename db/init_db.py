"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.cleanup import connection_scope, rollback_quietly
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Employees table: one row per employee, id generated by the database
CREATE TABLE IF NOT EXISTS employees (
    id              TEXT PRIMARY KEY DEFAULT gen_random_uuid()::text,
    name            TEXT,
    firstname       TEXT,
    homephone       TEXT,
    mobilephone     TEXT,
    workphone       TEXT,
    address         TEXT,
    postalcode      TEXT,
    city            TEXT,
    email           TEXT
);
"""


def create_tables(provider) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    with connection_scope(provider) as conn:
        try:
            with conn.cursor() as cur:
                cur.execute(SCHEMA_SQL)
            conn.commit()
            logger.info("Database schema initialized successfully.")
        except Exception as e:
            rollback_quietly(conn)
            logger.error(f"Failed to initialize schema: {e}")
            raise


if __name__ == "__main__":
    from db.connection import close_pool, init_pool
    create_tables(init_pool())
    close_pool()
    print("Database schema created successfully.")
