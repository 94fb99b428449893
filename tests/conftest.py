"""Shared fixtures: an in-memory DB-API connection answering catalog queries."""

import pytest


class FakeCursor:
    """Cursor returning canned results for the first matching SQL fragment."""

    def __init__(self, connection):
        self.connection = connection
        self.description = None
        self._rows = []

    def execute(self, sql):
        self.connection.executed.append(sql)
        columns, rows = self.connection.lookup(sql)
        self.description = [(name, None, None, None, None, None, None) for name in columns] or None
        self._rows = list(rows)

    def fetchone(self):
        if not self._rows:
            return None
        return self._rows.pop(0)

    def fetchall(self):
        rows, self._rows = self._rows, []
        return rows

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class FakeConnection:
    """DB-API connection stand-in recording every statement it runs."""

    def __init__(self):
        self.responses = []
        self.executed = []
        self.rollbacks = 0

    def add(self, fragment, columns, rows=()):
        self.responses.append((fragment, list(columns), list(rows)))
        return self

    def fail(self, fragment, error):
        self.responses.append((fragment, error, None))
        return self

    def lookup(self, sql):
        for fragment, columns, rows in self.responses:
            if fragment in sql:
                if isinstance(columns, Exception):
                    raise columns
                return columns, rows
        return [], []

    def cursor(self):
        return FakeCursor(self)

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        pass


@pytest.fixture
def fake_connection():
    return FakeConnection()
