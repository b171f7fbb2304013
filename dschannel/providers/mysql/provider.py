"""Provider registration."""

from dschannel.providers.model import ProviderSpec
from dschannel.providers.registry import register_provider

SPEC = ProviderSpec(
    plugin_name="JDBC-Mysql",
    channel_path=("dschannel.providers.mysql.channel", "MysqlJdbcDataSourceChannel"),
    schema_path=("dschannel.providers.mysql.schema", "OPTION_RULE"),
    aliases=("mysql",),
)

register_provider(SPEC)
