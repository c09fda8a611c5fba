import sys
from pathlib import Path

import psycopg2
import pytest

# Ensure project root on sys.path
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from repositories import employee_repo  # noqa: E402
from models.employee import Employee  # noqa: E402

_COLUMNS = [(c,) for c in employee_repo.COLUMNS]


class FakeCursor:
    """DB-API cursor over the in-memory employees table."""

    def __init__(self, conn):
        self.conn = conn
        self.close_calls = 0
        self.executed = []
        self.description = None
        self.rowcount = -1
        self._rows = []

    def execute(self, sql, params=()):
        store = self.conn.provider
        if "execute" in store.fail_on:
            raise psycopg2.OperationalError("server closed the connection unexpectedly")
        self.executed.append((sql, params))
        self._rows = []
        self.description = None
        if sql == employee_repo.SQL_SELECT_BY_ID:
            row = store.rows.get(params[0])
            self._rows = ([row] if row else []) + store.shadow_rows.get(params[0], [])
            self.description = _COLUMNS
        elif sql == employee_repo.SQL_SELECT_ALL:
            self._rows = list(store.rows.values())
            self.description = _COLUMNS
        elif sql == employee_repo.SQL_INSERT_ONE:
            self.description = [("id",)]
            # a BEFORE INSERT trigger returning NULL skips the row silently
            if "suppress_insert" in store.fail_on:
                self.rowcount = 0
                return
            store.next_id += 1
            new_id = f"emp-{store.next_id}"
            store.rows[new_id] = (new_id,) + tuple(params)
            self._rows = [(new_id,)]
            self.rowcount = 1
        elif sql == employee_repo.SQL_UPDATE_ONE:
            key = params[-1]
            self.rowcount = 0
            if key in store.rows:
                store.rows[key] = (key,) + tuple(params[:-1])
                self.rowcount = 1
        elif sql == employee_repo.SQL_DELETE_ONE:
            self.rowcount = 1 if store.rows.pop(params[0], None) else 0
        else:
            store.other_statements.append(sql)

    def fetchone(self):
        return self._rows.pop(0) if self._rows else None

    def close(self):
        self.close_calls += 1
        self.conn.provider.events.append("cursor closed")
        if "close" in self.conn.provider.fail_on:
            raise psycopg2.InterfaceError("cursor already closed")

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


class FakeConnection:
    def __init__(self, provider):
        self.provider = provider
        self.cursors = []
        self.commits = 0
        self.rollbacks = 0

    def cursor(self):
        cur = FakeCursor(self)
        self.cursors.append(cur)
        return cur

    def commit(self):
        if "commit" in self.provider.fail_on:
            raise psycopg2.OperationalError("could not commit")
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1


class FakeConnectionProvider:
    """
    In-memory stand-in for the pooled provider.

    Records every acquire/release so tests can assert that each call hands
    its connection back exactly once.
    """

    def __init__(self):
        self.rows = {}
        # rows returned by select-by-id after the stored one, keyed by id
        self.shadow_rows = {}
        self.events = []
        self.next_id = 0
        self.other_statements = []
        self.fail_on = set()
        self.acquired = 0
        self.released = 0
        self.connections = []
        self.outstanding = []

    def acquire(self):
        if "acquire" in self.fail_on:
            raise ConnectionError("connection pool exhausted")
        conn = FakeConnection(self)
        self.acquired += 1
        self.connections.append(conn)
        self.outstanding.append(conn)
        return conn

    def release(self, conn):
        assert conn in self.outstanding, "connection released twice or never acquired"
        self.outstanding.remove(conn)
        self.released += 1
        self.events.append("released")

    @property
    def cursors(self):
        return [cur for conn in self.connections for cur in conn.cursors]

    def assert_balanced(self):
        assert self.acquired == self.released
        assert not self.outstanding
        for cur in self.cursors:
            assert cur.close_calls == 1


@pytest.fixture()
def provider():
    return FakeConnectionProvider()


@pytest.fixture()
def repo(provider):
    return employee_repo.EmployeeRepository(provider)


@pytest.fixture()
def alice():
    return Employee(
        name="Martin",
        first_name="Alice",
        home_phone="0102030405",
        mobile_phone="0607080910",
        work_phone="0199887766",
        address="12 rue de la Paix",
        postal_code="75002",
        city="Paris",
        email="alice.martin@example.com",
    )
