"""Fake DB-API objects that answer catalog queries from canned rows."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

SHOW_DATABASES = "SHOW DATABASES"
TABLES = "information_schema.tables"
PRIMARY_KEYS = "information_schema.key_column_usage"
COLUMNS = "information_schema.columns"

TABLE_COLUMNS = ["TABLE_CAT", "TABLE_NAME", "TABLE_TYPE", "REMARKS"]
PK_COLUMNS = ["TABLE_CAT", "TABLE_NAME", "COLUMN_NAME", "KEY_SEQ", "PK_NAME"]
COLUMN_COLUMNS = [
    "TABLE_CAT",
    "TABLE_NAME",
    "COLUMN_NAME",
    "DATA_TYPE",
    "COLUMN_TYPE",
    "REMARKS",
    "COLUMN_DEF",
    "IS_NULLABLE",
    "ORDINAL_POSITION",
]

# A response is (column names, rows), a callable taking the bound params and
# returning one, or an exception to raise from execute().
Response = Any


class FakeCursor:
    def __init__(self, conn: FakeConnection):
        self._conn = conn
        self.description: list[tuple[str]] | None = None
        self._rows: list[tuple[Any, ...]] = []
        self.closed = False

    def execute(self, sql: str, params: tuple[Any, ...] | None = None) -> None:
        self._conn.record(sql, params)
        for marker, response in self._conn.responses.items():
            if marker not in sql:
                continue
            if callable(response) and not isinstance(response, BaseException):
                response = response(params or ())
            if isinstance(response, BaseException):
                raise response
            columns, rows = response
            self.description = [(name,) for name in columns]
            self._rows = [tuple(row) for row in rows]
            return
        raise AssertionError(f"Unexpected SQL: {sql}")

    def fetchall(self) -> list[tuple[Any, ...]]:
        return list(self._rows)

    def close(self) -> None:
        self.closed = True


class FakeConnection:
    def __init__(self, responses: dict[str, Response] | None = None, close_error: Exception | None = None):
        self.responses = responses or {}
        self.close_error = close_error
        self.executed: list[tuple[str, tuple[Any, ...] | None]] = []
        self.closed = False
        self._lock = threading.Lock()

    def record(self, sql: str, params: tuple[Any, ...] | None) -> None:
        with self._lock:
            self.executed.append((sql, params))

    def cursor(self) -> FakeCursor:
        return FakeCursor(self)

    def close(self) -> None:
        self.closed = True
        if self.close_error is not None:
            raise self.close_error


class FakeDriver:
    """Stands in for the pymysql module; hands out one FakeConnection per connect()."""

    def __init__(
        self,
        responses: dict[str, Response] | None = None,
        connect_error: Exception | None = None,
        close_error: Exception | None = None,
    ):
        self.responses = responses or {}
        self.connect_error = connect_error
        self.close_error = close_error
        self.connections: list[FakeConnection] = []
        self._lock = threading.Lock()
        self.module = MagicMock()
        self.module.connect.side_effect = self._connect

    def _connect(self, **kwargs: Any) -> FakeConnection:
        if self.connect_error is not None:
            raise self.connect_error
        conn = FakeConnection(self.responses, close_error=self.close_error)
        with self._lock:
            self.connections.append(conn)
        return conn

    @property
    def connect_kwargs(self) -> list[dict[str, Any]]:
        return [call.kwargs for call in self.module.connect.call_args_list]

    def all_closed(self) -> bool:
        return all(conn.closed for conn in self.connections)


def databases(*names: str) -> tuple[list[str], list[tuple[str]]]:
    return ["Database"], [(name,) for name in names]


def tables(*entries: tuple[str, str]) -> tuple[list[str], list[tuple[Any, ...]]]:
    """Rows for (name, information_schema table_type) pairs."""
    return TABLE_COLUMNS, [("app", name, kind, "") for name, kind in entries]


def primary_keys(table: str, *columns: str) -> tuple[list[str], list[tuple[Any, ...]]]:
    return PK_COLUMNS, [("app", table, column, seq, "PRIMARY") for seq, column in enumerate(columns, 1)]


def columns(table: str, *entries: tuple[str, str, str, str, str]) -> tuple[list[str], list[tuple[Any, ...]]]:
    """Rows for (name, data_type, column_type, comment, is_nullable) tuples."""
    return COLUMN_COLUMNS, [
        ("app", table, name, data_type, column_type, comment, None, nullable, position)
        for position, (name, data_type, column_type, comment, nullable) in enumerate(entries, 1)
    ]


def per_table(responses: dict[str, Any]) -> Callable[[tuple[Any, ...]], Any]:
    """Route a catalog query by the table name bound as its last parameter."""

    def respond(params: tuple[Any, ...]) -> Any:
        return responses[params[-1]]

    return respond
