"""dschannel - uniform metadata introspection over relational data sources."""

from dschannel.providers import (
    DataSourceChannel,
    DataSourcePluginException,
    MissingParameterError,
    OptionRule,
    TableField,
    UnknownPluginError,
    get_channel,
    get_supported_plugins,
)

__version__ = "0.1.0"

__all__ = [
    "DataSourceChannel",
    "DataSourcePluginException",
    "MissingParameterError",
    "OptionRule",
    "TableField",
    "UnknownPluginError",
    "get_channel",
    "get_supported_plugins",
]
