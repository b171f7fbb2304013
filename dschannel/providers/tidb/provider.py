"""Provider registration."""

from dschannel.providers.model import ProviderSpec
from dschannel.providers.registry import register_provider

SPEC = ProviderSpec(
    plugin_name="JDBC-TiDB",
    channel_path=("dschannel.providers.tidb.channel", "TidbJdbcDataSourceChannel"),
    schema_path=("dschannel.providers.tidb.schema", "OPTION_RULE"),
    aliases=("tidb",),
)

register_provider(SPEC)
