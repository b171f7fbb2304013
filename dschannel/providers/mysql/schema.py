"""Option rules for MySQL."""

from dschannel.providers.option_rules import (
    METADATA_RULE,
    OptionRule,
    _driver_option,
    _password_option,
    _url_option,
    _user_option,
)

URL = _url_option("jdbc:mysql://localhost:3306/test")
DRIVER = _driver_option("com.mysql.cj.jdbc.Driver", "pymysql")
USER = _user_option()
PASSWORD = _password_option()

OPTION_RULE = OptionRule.builder().required(URL, DRIVER).optional(USER, PASSWORD).build()

__all__ = ["DRIVER", "METADATA_RULE", "OPTION_RULE", "PASSWORD", "URL", "USER"]
