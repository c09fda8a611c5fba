"""
db/statement.py
---------------
Statement Builder: binds an ordered argument sequence to the positional
``%s`` placeholders of a query template, on a connection owned by the caller.
"""

import re
from decimal import Decimal
from typing import Any, Iterator, Optional

from utils.logger import get_logger

logger = get_logger(__name__)

# `%%` is psycopg2's escape for a literal percent sign.
_PLACEHOLDER = re.compile(r"%%|%s")


class StatementError(ValueError):
    """Raised when a statement is built incorrectly (a programming error)."""


def count_placeholders(sql: str) -> int:
    """Return the number of positional placeholders in ``sql``."""
    return sum(1 for m in _PLACEHOLDER.finditer(sql) if m.group() == "%s")


def _bind_value(position: int, value: Any) -> Any:
    """Dispatch on value type: text, numeric or NULL."""
    if value is None:
        return None
    # bool is an int subclass, and is not a supported column type here
    if isinstance(value, bool):
        raise StatementError(f"Argument {position} has unsupported type bool")
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, Decimal)):
        return value
    raise StatementError(
        f"Argument {position} has unsupported type {type(value).__name__}"
    )


class ResultSet:
    """Forward-only view over the rows a query produced."""

    def __init__(self, cursor):
        self._cursor = cursor
        self.columns: list[str] = [d[0] for d in (cursor.description or [])]
        self.closed = False

    def next(self) -> Optional[tuple]:
        """Advance to the next row; None once the rows are exhausted."""
        if self.closed:
            raise StatementError("Result set is closed")
        return self._cursor.fetchone()

    def __iter__(self) -> Iterator[tuple]:
        while True:
            row = self.next()
            if row is None:
                return
            yield row

    def close(self) -> None:
        # marks the rows as consumed; the cursor itself is freed by Statement.close()
        self.closed = True


class Statement:
    """A query template with its arguments bound, ready to execute."""

    def __init__(self, conn, sql: str, params: tuple):
        self.sql = sql
        self.params = params
        self._cursor = conn.cursor()

    def execute_update(self) -> int:
        """Execute a write statement and return the affected row count."""
        self._cursor.execute(self.sql, self.params)
        return self._cursor.rowcount

    def execute_query(self) -> ResultSet:
        """Execute a read statement and return its result set."""
        self._cursor.execute(self.sql, self.params)
        return ResultSet(self._cursor)

    def fetch_one(self) -> Optional[tuple]:
        """Execute and return the first row (for ``RETURNING`` writes)."""
        self._cursor.execute(self.sql, self.params)
        return self._cursor.fetchone()

    def close(self) -> None:
        self._cursor.close()


def prepare_statement(conn, sql: str, *args: Any) -> Statement:
    """
    Build a statement bound to ``conn``.

    Args:
        conn: A DB-API connection. It is never closed by the statement.
        sql: Query template with positional ``%s`` placeholders.
        *args: One value per placeholder, in order.

    Raises:
        StatementError: If the argument count does not match the
            placeholder count, or an argument has an unsupported type.
    """
    expected = count_placeholders(sql)
    if expected != len(args):
        raise StatementError(
            f"Statement expects {expected} argument(s), got {len(args)}"
        )
    params = tuple(_bind_value(i, v) for i, v in enumerate(args, start=1))
    logger.debug(f"Prepared statement with {len(params)} argument(s): {sql}")
    return Statement(conn, sql, params)
