"""Unit tests for the data source plugin registry."""

from __future__ import annotations

import pytest

from dschannel.providers.exceptions import UnknownPluginError
from dschannel.providers.registry import (
    get_channel,
    get_channel_class,
    get_option_rule,
    get_provider_spec,
    get_supported_plugins,
)


def test_supported_plugins_include_tidb_and_mysql():
    plugins = get_supported_plugins()
    assert "JDBC-TiDB" in plugins
    assert "JDBC-Mysql" in plugins
    assert "tidb" not in plugins


@pytest.mark.parametrize("name", ["JDBC-TiDB", "jdbc-tidb", " tidb "])
def test_lookup_by_name_or_alias(name):
    from dschannel.providers.tidb.channel import TidbJdbcDataSourceChannel

    assert get_provider_spec(name).plugin_name == "JDBC-TiDB"
    assert get_channel_class(name) is TidbJdbcDataSourceChannel


def test_channel_is_shared():
    assert get_channel("JDBC-TiDB") is get_channel("tidb")
    assert get_channel("JDBC-TiDB") is not get_channel("JDBC-Mysql")


def test_option_rule_matches_channel():
    assert get_option_rule("JDBC-TiDB") is get_channel("JDBC-TiDB").get_data_source_options("JDBC-TiDB")


def test_unknown_plugin():
    with pytest.raises(UnknownPluginError) as exc_info:
        get_channel("JDBC-Oracle")

    assert exc_info.value.plugin_name == "JDBC-Oracle"
    assert "JDBC-TiDB" in str(exc_info.value)


def test_mysql_channel_deny_list():
    channel = get_channel("mysql")
    assert channel.name == "MySQL"
    assert channel.is_system_database("SYS")
    assert not channel.is_system_database("metrics_schema")
    assert channel.default_port == 3306


def test_spec_locates_channel_and_rule():
    from dschannel.providers.model import ProviderSpec

    assert get_provider_spec("tidb") == ProviderSpec(
        plugin_name="JDBC-TiDB",
        channel_path=("dschannel.providers.tidb.channel", "TidbJdbcDataSourceChannel"),
        schema_path=("dschannel.providers.tidb.schema", "OPTION_RULE"),
        aliases=("tidb",),
    )
    assert get_channel("tidb").default_port == 4000
