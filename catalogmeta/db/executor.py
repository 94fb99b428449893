"""Catalog query execution over a DB-API connection."""

import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

from ..models.catalog_models import Database

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TRUE_STRINGS = {"1", "true", "t", "yes", "y"}


class ResultCursor:
    """Forward-only view of a query result with typed, label-based accessors.

    Labels are matched case-insensitively. SQL NULL is returned as ``None``
    by every accessor.
    """

    def __init__(self, cursor):
        self._cursor = cursor
        description = cursor.description or []
        self._labels: Dict[str, int] = {}
        for position, column in enumerate(description):
            self._labels.setdefault(str(column[0]).lower(), position)
        self._row: Optional[tuple] = None

    @property
    def labels(self) -> List[str]:
        return list(self._labels.keys())

    def next(self) -> bool:
        """Advance to the next row. Returns False once the result is exhausted."""
        if not self._labels:
            self._row = None
            return False
        self._row = self._cursor.fetchone()
        return self._row is not None

    def has_label(self, label: str) -> bool:
        return label.lower() in self._labels

    def get_object(self, label: str) -> Any:
        if self._row is None:
            raise RuntimeError("Cursor is not positioned on a row")
        try:
            position = self._labels[label.lower()]
        except KeyError:
            raise KeyError(f"Result has no column labelled {label!r}") from None
        return self._row[position]

    def get_string(self, label: str) -> Optional[str]:
        value = self.get_object(label)
        if value is None:
            return None
        if isinstance(value, (bytes, bytearray)):
            return value.decode("utf-8")
        return str(value)

    def get_long(self, label: str) -> Optional[int]:
        value = self.get_object(label)
        if value is None:
            return None
        if isinstance(value, (bytes, bytearray)):
            value = value.decode("utf-8")
        return int(value)

    def get_int(self, label: str) -> Optional[int]:
        return self.get_long(label)

    def get_bool(self, label: str) -> Optional[bool]:
        value = self.get_object(label)
        if value is None:
            return None
        if isinstance(value, (bytes, bytearray)):
            value = value.decode("utf-8")
        if isinstance(value, str):
            return value.strip().lower() in _TRUE_STRINGS
        return bool(value)


class SQLExecutor:
    """Runs catalog statements and hands the results to row mappers.

    Driver errors are propagated as raised; retries and timeouts belong to
    the connection layer.
    """

    def execute(self, connection, sql: str, mapper: Callable[[ResultCursor], T]) -> T:
        """Execute ``sql`` on ``connection`` and map the result.

        Args:
            connection: DB-API connection
            sql: Catalog query or statement
            mapper: Callable receiving a ResultCursor

        Returns:
            Whatever the mapper returns
        """
        logger.debug(f"Executing catalog query: {sql}")
        with connection.cursor() as cur:
            cur.execute(sql)
            return mapper(ResultCursor(cur))

    def databases(self, connection, sql: str) -> List[Database]:
        """List databases using a statement that yields a ``Database`` column."""
        def map_databases(cursor: ResultCursor) -> List[Database]:
            databases = []
            while cursor.next():
                databases.append(Database(name=cursor.get_string("Database")))
            return databases

        return self.execute(connection, sql, map_databases)
