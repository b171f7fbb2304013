"""Base channel types."""

from .base import DataSourceChannel, JdbcDataSourceChannel, MySQLBaseChannel
from .catalog import CatalogMetadata

__all__ = [
    "CatalogMetadata",
    "DataSourceChannel",
    "JdbcDataSourceChannel",
    "MySQLBaseChannel",
]
