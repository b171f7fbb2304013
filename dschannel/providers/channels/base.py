"""Base classes for data source channels."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from concurrent.futures import Executor
from contextlib import contextmanager
from typing import Any

from dschannel.providers.channels.catalog import CatalogMetadata
from dschannel.providers.driver import import_driver_module, resolve_driver_module
from dschannel.providers.exceptions import DataSourcePluginException, MissingParameterError
from dschannel.providers.fanout import fan_out
from dschannel.providers.jdbc_url import JdbcUrl, parse_jdbc_url, replace_database
from dschannel.providers.model import ConnectionParams, TableField
from dschannel.providers.option_rules import OptionRule
from dschannel.settings import load_channel_settings

logger = logging.getLogger(__name__)

DRIVER_KEY = "driver"
URL_KEY = "url"
USER_KEY = "user"
PASSWORD_KEY = "password"


def is_not_blank(value: Any) -> bool:
    return value is not None and str(value).strip() != ""


class DataSourceChannel(ABC):
    """Metadata introspection contract implemented once per engine.

    Every operation takes the plugin name (used only to pick configuration)
    and a flat mapping of connection parameters. Nothing is kept between
    calls: each operation opens its own connection and closes it before
    returning or raising.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this engine."""
        pass

    @abstractmethod
    def get_data_source_options(self, plugin_name: str) -> OptionRule:
        """Connection parameters this engine accepts."""
        pass

    @abstractmethod
    def get_datasource_metadata_fields_by_data_source_name(self, plugin_name: str) -> OptionRule:
        """Metadata fields this engine can be queried by."""
        pass

    @abstractmethod
    def check_data_source_connectivity(self, plugin_name: str, request_params: ConnectionParams) -> bool:
        """Open and close a connection.

        Returns:
            True when the connection succeeds.

        Raises:
            DataSourcePluginException: If the connection cannot be established.
        """
        pass

    @abstractmethod
    def get_databases(self, plugin_name: str, request_params: ConnectionParams) -> list[str]:
        """User databases in catalog order, system databases excluded."""
        pass

    @abstractmethod
    def get_tables(
        self, plugin_name: str, request_params: ConnectionParams, database: str | None
    ) -> list[str]:
        """Names of relations of kind TABLE in ``database``, in catalog order."""
        pass

    @abstractmethod
    def get_table_fields(
        self, plugin_name: str, request_params: ConnectionParams, database: str, table: str
    ) -> list[TableField]:
        """Columns of one table, with the primary key column flagged."""
        pass

    def get_tables_fields(
        self,
        plugin_name: str,
        request_params: ConnectionParams,
        database: str,
        tables: Sequence[str],
        executor: Executor | None = None,
    ) -> dict[str, list[TableField]]:
        """Columns of several tables, fetched concurrently.

        Each table runs as its own unit on the shared pool (or ``executor``)
        with its own connection. A failure for any table fails the whole call.
        """
        return fan_out(
            lambda table: self.get_table_fields(plugin_name, request_params, database, table),
            tables,
            executor=executor,
        )


class JdbcDataSourceChannel(DataSourceChannel):
    """Channel for engines reached through a DB-API driver and a JDBC-style URL.

    Subclasses provide the engine's option rules, system database deny-list,
    driver aliases and how to turn a parsed URL into driver connect arguments.
    """

    option_rule: OptionRule
    metadata_rule: OptionRule
    catalog_class: type[CatalogMetadata] = CatalogMetadata

    @property
    def system_databases(self) -> frozenset[str]:
        """Set of system database names to exclude from user listings.

        Returns lowercase names for case-insensitive comparison.
        """
        return frozenset()

    @property
    def default_port(self) -> int | None:
        return None

    @property
    def driver_aliases(self) -> dict[str, str]:
        """JDBC driver class names mapped to DB-API module names."""
        return {}

    def get_data_source_options(self, plugin_name: str) -> OptionRule:
        return self.option_rule

    def get_datasource_metadata_fields_by_data_source_name(self, plugin_name: str) -> OptionRule:
        return self.metadata_rule

    def is_system_database(self, database: str) -> bool:
        return database.lower() in self.system_databases

    def rewrite_url(self, url: str, database: str | None) -> str:
        """Scope the URL template to ``database``."""
        return replace_database(url, database)

    def catalog(self, conn: Any) -> CatalogMetadata:
        return self.catalog_class(conn)

    @abstractmethod
    def connect_kwargs(self, url: JdbcUrl, request_params: ConnectionParams) -> dict[str, Any]:
        """Build driver connect() keyword arguments."""
        pass

    def _require(self, request_params: ConnectionParams, key: str, message: str | None = None) -> str:
        value = request_params.get(key)
        if not is_not_blank(value):
            raise MissingParameterError(key, message)
        return str(value)

    def connect(self, driver: str, url: str, request_params: ConnectionParams) -> Any:
        """Import the driver and open a connection to ``url``."""
        module_name = resolve_driver_module(driver, self.driver_aliases)
        dbapi = import_driver_module(module_name, driver_name=self.name)
        jdbc_url = parse_jdbc_url(url)
        kwargs = self.connect_kwargs(jdbc_url, request_params)
        logger.debug(
            f"Connecting to {self.name}: {jdbc_url.host}:{kwargs.get('port', '')}/{jdbc_url.database or ''}"
        )
        return dbapi.connect(**kwargs)

    def disconnect(self, conn: Any) -> None:
        """Close a connection if the driver exposes a close method."""
        close_fn = getattr(conn, "close", None)
        if callable(close_fn):
            close_fn()

    @contextmanager
    def open_connection(
        self,
        request_params: ConnectionParams,
        database: str | None = None,
        *,
        failure: str,
    ) -> Iterator[Any]:
        """Yield a connection that is closed on every exit path.

        Missing driver or URL raises MissingParameterError before any I/O.
        Anything that goes wrong afterwards is raised as
        DataSourcePluginException(failure, cause).
        """
        driver = self._require(request_params, DRIVER_KEY, "Jdbc driver cannot be empty")
        url = self._require(request_params, URL_KEY, "Jdbc url cannot be empty")
        try:
            conn = self.connect(driver, self.rewrite_url(url, database), request_params)
            try:
                yield conn
            finally:
                self.disconnect(conn)
                logger.debug(f"Closed {self.name} connection")
        except DataSourcePluginException:
            raise
        except Exception as e:
            logger.warning(f"{self.name}: {failure}: {e}")
            raise DataSourcePluginException(failure, e) from e

    def check_data_source_connectivity(self, plugin_name: str, request_params: ConnectionParams) -> bool:
        with self.open_connection(request_params, failure="check jdbc connectivity failed"):
            return True

    def get_databases(self, plugin_name: str, request_params: ConnectionParams) -> list[str]:
        with self.open_connection(request_params, failure="get databases failed") as conn:
            return [
                name
                for name in self.catalog(conn).list_databases()
                if is_not_blank(name) and not self.is_system_database(name)
            ]

    def get_tables(
        self, plugin_name: str, request_params: ConnectionParams, database: str | None
    ) -> list[str]:
        with self.open_connection(request_params, database, failure="get table names failed") as conn:
            rows = self.catalog(conn).get_tables(database, types=("TABLE",))
            return [row["TABLE_NAME"] for row in rows if is_not_blank(row.get("TABLE_NAME"))]

    def get_table_fields(
        self, plugin_name: str, request_params: ConnectionParams, database: str, table: str
    ) -> list[TableField]:
        with self.open_connection(request_params, database, failure="get table fields failed") as conn:
            metadata = self.catalog(conn)
            primary_key = self.get_primary_key(metadata, database, table)
            fields: list[TableField] = []
            for row in metadata.get_columns(database, table):
                column_name = row.get("COLUMN_NAME")
                if not is_not_blank(column_name):
                    continue
                fields.append(
                    TableField(
                        name=column_name,
                        type=row.get("TYPE_NAME"),
                        comment=row.get("REMARKS"),
                        nullable=str(row.get("IS_NULLABLE")) == "true",
                        primary_key=is_not_blank(primary_key) and primary_key == column_name,
                    )
                )
            return fields

    def get_primary_key(self, metadata: CatalogMetadata, database: str | None, table: str) -> str | None:
        """Name of the first primary key column, or None.

        Only the first reported column is used, so composite keys flag a
        single column.
        """
        for row in metadata.get_primary_keys(database, table):
            return row.get("COLUMN_NAME")
        return None


class MySQLBaseChannel(JdbcDataSourceChannel):
    """Base class for MySQL-protocol engines (MySQL, TiDB)."""

    @property
    def system_databases(self) -> frozenset[str]:
        return frozenset({"mysql", "information_schema", "performance_schema", "sys"})

    @property
    def default_port(self) -> int | None:
        return 3306

    @property
    def driver_aliases(self) -> dict[str, str]:
        return {
            "com.mysql.cj.jdbc.Driver": "pymysql",
            "com.mysql.jdbc.Driver": "pymysql",
        }

    def connect_kwargs(self, url: JdbcUrl, request_params: ConnectionParams) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "host": url.host,
            "port": url.port or self.default_port,
            "connect_timeout": self._connect_timeout(url),
            "charset": "utf8mb4",
        }
        if url.database:
            kwargs["database"] = url.database
        if USER_KEY in request_params:
            user = request_params.get(USER_KEY)
            password = request_params.get(PASSWORD_KEY)
        else:
            user = url.username or url.properties.get("user")
            password = url.password or url.properties.get("password")
        if user:
            kwargs["user"] = user
        if password is not None:
            kwargs["password"] = password
        return kwargs

    def _connect_timeout(self, url: JdbcUrl) -> int:
        raw = url.properties.get("connectTimeout")
        if raw and raw.isdigit() and int(raw) > 0:
            # JDBC expresses connectTimeout in milliseconds
            return max(1, -(-int(raw) // 1000))
        return load_channel_settings().connect_timeout
