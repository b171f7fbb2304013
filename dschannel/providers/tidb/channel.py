"""TiDB channel using PyMySQL (TiDB speaks the MySQL protocol)."""

from __future__ import annotations

from dschannel.providers.channels.base import MySQLBaseChannel
from dschannel.providers.tidb import schema


class TidbJdbcDataSourceChannel(MySQLBaseChannel):
    """Channel for TiDB."""

    option_rule = schema.OPTION_RULE
    metadata_rule = schema.METADATA_RULE

    @property
    def name(self) -> str:
        return "TiDB"

    @property
    def system_databases(self) -> frozenset[str]:
        return frozenset({"information_schema", "mysql", "performance_schema", "metrics_schema"})

    @property
    def default_port(self) -> int | None:
        return 4000
