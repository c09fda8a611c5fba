"""
repositories/employee_repo.py
-----------------------------
Data access layer for employee records.
All SQL queries related to the `employees` table live here.
"""

from typing import Optional

import psycopg2

from db.cleanup import close_quietly, connection_scope, rollback_quietly
from db.connection import ConnectionProvider
from db.statement import prepare_statement
from models.employee import Employee
from repositories.employee_mapper import COLUMNS, VALUE_COLUMNS, row_to_employee
from repositories.errors import DAOError
from utils.logger import get_logger

logger = get_logger(__name__)

# Failures of the store or of the provider; anything else is a bug and propagates as is.
_STORE_ERRORS = (psycopg2.Error, ConnectionError)

_SELECT_COLUMNS = ", ".join(COLUMNS)
_VALUE_COLUMNS = ", ".join(VALUE_COLUMNS)

SQL_SELECT_BY_ID = f"SELECT {_SELECT_COLUMNS} FROM employees WHERE id = %s;"
SQL_SELECT_ALL = f"SELECT {_SELECT_COLUMNS} FROM employees;"
SQL_INSERT_ONE = (
    f"INSERT INTO employees ({_VALUE_COLUMNS}) "
    f"VALUES ({', '.join(['%s'] * len(VALUE_COLUMNS))}) RETURNING id;"
)
SQL_UPDATE_ONE = (
    f"UPDATE employees SET {', '.join(f'{c} = %s' for c in VALUE_COLUMNS)} "
    f"WHERE id = %s;"
)
SQL_DELETE_ONE = "DELETE FROM employees WHERE id = %s;"


class EmployeeRepository:
    """Repository for CRUD operations on the employees table."""

    def __init__(self, provider: ConnectionProvider):
        self._provider = provider

    # ── CREATE ────────────────────────────────────────────

    def create(self, employee: Employee) -> str:
        """
        Insert a new employee record.

        Args:
            employee: The Employee to persist. Must not carry an id.

        Returns:
            The identifier generated by the store. ``employee`` itself is
            left untouched.

        Raises:
            DAOError: VALIDATION if the employee is missing or already has
                an id, ZERO_ROWS if the insert returned no row,
                INFRASTRUCTURE on any database failure.
        """
        if employee is None:
            raise DAOError.validation("Cannot create a record from no employee")
        if employee.has_id():
            raise DAOError.validation(
                f"Cannot create a record for employee #{employee.id}: the id is generated by the database"
            )

        try:
            with connection_scope(self._provider) as conn:
                statement = None
                try:
                    statement = prepare_statement(conn, SQL_INSERT_ONE, *employee.values())
                    row = statement.fetch_one()
                    conn.commit()
                except Exception:
                    rollback_quietly(conn)
                    raise
                finally:
                    close_quietly(statement)
        except _STORE_ERRORS as e:
            logger.error(f"Failed to create employee: {e}")
            raise DAOError.infrastructure(e) from e

        if row is None:
            logger.warning("Insert of employee returned no id, 0 rows affected")
            raise DAOError.zero_rows("Unable to create employee record, 0 rows affected")

        new_id = str(row[0])
        logger.info(f"Created employee #{new_id}")
        return new_id

    # ── READ ──────────────────────────────────────────────

    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        """
        Fetch a single employee by id.

        Returns:
            The Employee, or None if no record has this id.

        Raises:
            DAOError: VALIDATION on an empty id, INFRASTRUCTURE on any
                database failure.
        """
        if not employee_id:
            raise DAOError.validation("Cannot look up an employee without its id")
        rows = self._query(SQL_SELECT_BY_ID, employee_id, limit=1)
        return rows[0] if rows else None

    def require_by_id(self, employee_id: str) -> Employee:
        """Like find_by_id, but a missing record raises DAOError(NOT_FOUND)."""
        employee = self.find_by_id(employee_id)
        if employee is None:
            raise DAOError.not_found(f"No employee with id {employee_id}")
        return employee

    def find_all(self) -> list[Employee]:
        """
        Fetch every employee, in the order the database returns them.

        Returns:
            List of Employee objects (empty if the table is empty).
        """
        return self._query(SQL_SELECT_ALL)

    # ── UPDATE ────────────────────────────────────────────

    def update(self, employee: Employee) -> None:
        """
        Overwrite all nine attributes of an existing record.

        Raises:
            DAOError: VALIDATION if the employee has no id (the database is
                not contacted), ZERO_ROWS if no record has that id,
                INFRASTRUCTURE on any database failure.
        """
        self._require_id(employee, "update")
        affected = self._execute_write(SQL_UPDATE_ONE, *employee.values(), employee.id)
        if affected == 0:
            logger.warning(f"Update of employee #{employee.id} affected 0 rows")
            raise DAOError.zero_rows(
                f"Unable to update employee #{employee.id}, 0 rows affected"
            )
        logger.info(f"Updated employee #{employee.id}")

    # ── DELETE ────────────────────────────────────────────

    def delete(self, employee: Employee) -> None:
        """
        Delete an existing record.

        Raises:
            DAOError: same kinds as update().
        """
        self._require_id(employee, "delete")
        affected = self._execute_write(SQL_DELETE_ONE, employee.id)
        if affected == 0:
            logger.warning(f"Delete of employee #{employee.id} affected 0 rows")
            raise DAOError.zero_rows(
                f"Unable to delete employee #{employee.id}, 0 rows affected"
            )
        logger.info(f"Deleted employee #{employee.id}")

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _require_id(employee: Optional[Employee], action: str) -> None:
        if employee is None or not employee.has_id():
            raise DAOError.validation(f"Cannot {action} a database record without its id")

    def _execute_write(self, sql: str, *args) -> int:
        """Run one write statement in its own transaction; return the affected row count."""
        try:
            with connection_scope(self._provider) as conn:
                statement = None
                try:
                    statement = prepare_statement(conn, sql, *args)
                    affected = statement.execute_update()
                    conn.commit()
                    return affected
                except Exception:
                    rollback_quietly(conn)
                    raise
                finally:
                    close_quietly(statement)
        except _STORE_ERRORS as e:
            logger.error(f"Failed to write employee record: {e}")
            raise DAOError.infrastructure(e) from e

    def _query(self, sql: str, *args, limit: Optional[int] = None) -> list[Employee]:
        """Run one query and map up to ``limit`` rows."""
        employees: list[Employee] = []
        try:
            with connection_scope(self._provider) as conn:
                statement = result = None
                try:
                    statement = prepare_statement(conn, sql, *args)
                    result = statement.execute_query()
                    for row in result:
                        employees.append(row_to_employee(row, result.columns))
                        if limit is not None and len(employees) >= limit:
                            break
                finally:
                    close_quietly(result, statement)
        except _STORE_ERRORS as e:
            logger.error(f"Failed to read employee records: {e}")
            raise DAOError.infrastructure(e) from e
        return employees
