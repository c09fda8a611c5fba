"""
main.py
-------
Entry point wiring the employee data-access layer.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Report the employee records currently stored.
    - Close the pool on exit.
"""

import psycopg2

from db.connection import close_pool, init_pool
from db.init_db import create_tables
from repositories.employee_repo import EmployeeRepository
from repositories.errors import DAOError
from utils.logger import get_logger

logger = get_logger(__name__)


def main() -> int:
    """Initialize the store and list its employees. Returns an exit code."""
    logger.info("Initializing database...")
    try:
        provider = init_pool()
    except ConnectionError as e:
        logger.error(f"Database unavailable: {e}")
        return 1

    try:
        create_tables(provider)
        repo = EmployeeRepository(provider)
        employees = repo.find_all()
        logger.info(f"{len(employees)} employee record(s) stored.")
        for employee in employees:
            logger.info(str(employee))
        return 0
    except DAOError as e:
        logger.error(f"Could not list employees ({e.kind.value}): {e}")
        return 1
    except psycopg2.Error as e:
        logger.error(f"Failed to initialize schema: {e}")
        return 1
    finally:
        close_pool()


if __name__ == "__main__":
    raise SystemExit(main())
