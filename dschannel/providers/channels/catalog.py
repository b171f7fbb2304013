"""Catalog metadata calls over a DB-API connection.

Rows are returned as dicts keyed by the JDBC ``DatabaseMetaData`` column
labels (TABLE_NAME, COLUMN_NAME, TYPE_NAME, ...), so channels read every
engine's catalog through the same shape. This module speaks the
MySQL-protocol dialect (information_schema plus SHOW statements).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

logger = logging.getLogger(__name__)

Row = dict[str, Any]

# information_schema.tables.table_type -> JDBC TABLE_TYPE
TABLE_TYPE_MAP = {
    "BASE TABLE": "TABLE",
    "VIEW": "VIEW",
    "SYSTEM VIEW": "SYSTEM TABLE",
    "SEQUENCE": "SEQUENCE",
}


class CatalogMetadata:
    """JDBC-style catalog calls bound to one open connection."""

    def __init__(self, conn: Any):
        self._conn = conn

    def _query(self, sql: str, params: tuple[Any, ...] = ()) -> list[Row]:
        logger.debug(f"Catalog query: {sql} {params!r}")
        cursor = self._conn.cursor()
        try:
            if params:
                cursor.execute(sql, params)
            else:
                cursor.execute(sql)
            columns = [col[0] for col in cursor.description or ()]
            return [dict(zip(columns, row)) for row in cursor.fetchall()]
        finally:
            cursor.close()

    def _where(self, catalog: str | None, table: str | None = None, *extra: str) -> tuple[str, tuple[Any, ...]]:
        """WHERE clause for an information_schema query.

        A ``catalog`` of None spans every schema, as a null catalog does in
        JDBC ``DatabaseMetaData``.
        """
        clauses: list[str] = []
        params: list[Any] = []
        if catalog:
            clauses.append("table_schema = %s")
            params.append(catalog)
        if table is not None:
            clauses.append("table_name = %s")
            params.append(table)
        clauses.extend(extra)
        if not clauses:
            return "", ()
        return "WHERE " + " AND ".join(clauses) + " ", tuple(params)

    def list_databases(self) -> list[str]:
        """Return database names in the order the server lists them."""
        rows = self._query("SHOW DATABASES")
        return [row.get("Database") or row.get("database") for row in rows]

    def get_tables(self, catalog: str | None, types: Iterable[str] | None = ("TABLE",)) -> list[Row]:
        """List relations, keeping only the JDBC kinds in ``types`` (None keeps all)."""
        where, params = self._where(catalog)
        rows = self._query(
            "SELECT table_schema AS TABLE_CAT, table_name AS TABLE_NAME, "
            "table_type AS TABLE_TYPE, table_comment AS REMARKS "
            "FROM information_schema.tables "
            f"{where}"
            "ORDER BY table_type, table_schema, table_name",
            params,
        )
        wanted = set(types) if types is not None else None
        tables: list[Row] = []
        for row in rows:
            kind = TABLE_TYPE_MAP.get(str(row.get("TABLE_TYPE") or "").upper(), row.get("TABLE_TYPE"))
            row["TABLE_TYPE"] = kind
            if wanted is None or kind in wanted:
                tables.append(row)
        return tables

    def get_primary_keys(self, catalog: str | None, table: str) -> list[Row]:
        """Primary key columns of ``table`` in key sequence order."""
        where, params = self._where(catalog, table, "constraint_name = 'PRIMARY'")
        return self._query(
            "SELECT table_schema AS TABLE_CAT, table_name AS TABLE_NAME, "
            "column_name AS COLUMN_NAME, ordinal_position AS KEY_SEQ, "
            "constraint_name AS PK_NAME "
            "FROM information_schema.key_column_usage "
            f"{where}"
            "ORDER BY table_schema, ordinal_position",
            params,
        )

    def get_columns(self, catalog: str | None, table: str) -> list[Row]:
        """Columns of ``table`` in ordinal order.

        TYPE_NAME is the upper-cased engine type with UNSIGNED kept, and
        IS_NULLABLE is the string "true" or "false".
        """
        where, params = self._where(catalog, table)
        rows = self._query(
            "SELECT table_schema AS TABLE_CAT, table_name AS TABLE_NAME, "
            "column_name AS COLUMN_NAME, data_type AS DATA_TYPE, "
            "column_type AS COLUMN_TYPE, column_comment AS REMARKS, "
            "column_default AS COLUMN_DEF, is_nullable AS IS_NULLABLE, "
            "ordinal_position AS ORDINAL_POSITION "
            "FROM information_schema.columns "
            f"{where}"
            "ORDER BY table_schema, ordinal_position",
            params,
        )
        for row in rows:
            row["TYPE_NAME"] = self.type_name(row.get("DATA_TYPE"), row.get("COLUMN_TYPE"))
            row["IS_NULLABLE"] = "true" if str(row.get("IS_NULLABLE") or "").upper() == "YES" else "false"
        return rows

    @staticmethod
    def type_name(data_type: Any, column_type: Any) -> str:
        name = str(data_type or "").upper()
        if column_type and "unsigned" in str(column_type).lower():
            name = f"{name} UNSIGNED"
        return name
