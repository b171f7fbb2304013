"""Data source channel interfaces and registry."""

from dschannel.providers.channels.base import DataSourceChannel, JdbcDataSourceChannel, MySQLBaseChannel
from dschannel.providers.exceptions import (
    DataSourcePluginException,
    MissingDriverError,
    MissingParameterError,
    UnknownPluginError,
)
from dschannel.providers.fanout import fan_out, get_shared_executor, shutdown_shared_executor
from dschannel.providers.model import ConnectionParams, ProviderSpec, TableField
from dschannel.providers.option_rules import ConnectionOption, OptionRule, OptionType
from dschannel.providers.registry import (
    get_channel,
    get_option_rule,
    get_provider_spec,
    get_supported_plugins,
    register_provider,
)

__all__ = [
    "ConnectionOption",
    "ConnectionParams",
    "DataSourceChannel",
    "DataSourcePluginException",
    "JdbcDataSourceChannel",
    "MissingDriverError",
    "MissingParameterError",
    "MySQLBaseChannel",
    "OptionRule",
    "OptionType",
    "ProviderSpec",
    "TableField",
    "UnknownPluginError",
    "fan_out",
    "get_channel",
    "get_option_rule",
    "get_provider_spec",
    "get_shared_executor",
    "get_supported_plugins",
    "register_provider",
    "shutdown_shared_executor",
]
