"""MySQL channel using PyMySQL."""

from __future__ import annotations

from dschannel.providers.channels.base import MySQLBaseChannel
from dschannel.providers.mysql import schema


class MysqlJdbcDataSourceChannel(MySQLBaseChannel):
    option_rule = schema.OPTION_RULE
    metadata_rule = schema.METADATA_RULE

    @property
    def name(self) -> str:
        return "MySQL"
