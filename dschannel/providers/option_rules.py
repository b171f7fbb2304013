"""Option rule descriptors shared by provider schemas.

Rule definitions live in each provider's schema.py module.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dschannel.dynamicforms import FormOption, FormOptionBuilder, SelectOption


class OptionType(Enum):
    TEXT = "text"
    PASSWORD = "password"
    SELECT = "select"


@dataclass(frozen=True)
class ConnectionOption:
    key: str
    label: str
    option_type: OptionType = OptionType.TEXT
    default: str = ""
    description: str = ""
    choices: tuple[SelectOption, ...] = ()

    def form_option(self) -> FormOption:
        builder = FormOptionBuilder.builder().with_label(self.label).with_field(self.key)
        if self.option_type is OptionType.SELECT:
            return builder.static_select_option_builder().add_select_options(*self.choices).form_static_select_option()
        if self.option_type is OptionType.PASSWORD:
            return builder.input_option_builder().form_password_input_option()
        return builder.input_option_builder().form_text_input_option()


@dataclass(frozen=True)
class OptionRule:
    """Required and optional parameter keys for one engine."""

    required: tuple[ConnectionOption, ...] = ()
    optional: tuple[ConnectionOption, ...] = ()

    @classmethod
    def builder(cls) -> OptionRuleBuilder:
        return OptionRuleBuilder()

    @property
    def options(self) -> tuple[ConnectionOption, ...]:
        return self.required + self.optional

    def keys(self) -> list[str]:
        return [option.key for option in self.options]

    def required_keys(self) -> list[str]:
        return [option.key for option in self.required]

    def option(self, key: str) -> ConnectionOption:
        for option in self.options:
            if option.key == key:
                return option
        raise KeyError(key)

    def form_options(self) -> list[FormOption]:
        return [option.form_option() for option in self.options]


class OptionRuleBuilder:
    def __init__(self) -> None:
        self._required: list[ConnectionOption] = []
        self._optional: list[ConnectionOption] = []

    def required(self, *options: ConnectionOption) -> OptionRuleBuilder:
        self._required.extend(options)
        return self

    def optional(self, *options: ConnectionOption) -> OptionRuleBuilder:
        self._optional.extend(options)
        return self

    def build(self) -> OptionRule:
        keys = [option.key for option in self._required + self._optional]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise ValueError(f"Duplicate option keys: {', '.join(duplicates)}")
        return OptionRule(required=tuple(self._required), optional=tuple(self._optional))


# Common option templates

def _url_option(placeholder: str) -> ConnectionOption:
    return ConnectionOption(
        key="url",
        label="Url",
        default=placeholder,
        description=f"jdbc url, eg: {placeholder}",
    )


def _driver_option(*drivers: str) -> ConnectionOption:
    return ConnectionOption(
        key="driver",
        label="Driver",
        option_type=OptionType.SELECT,
        default=drivers[0] if drivers else "",
        description="driver class or DB-API module name",
        choices=tuple(SelectOption(label=driver, value=driver) for driver in drivers),
    )


def _user_option() -> ConnectionOption:
    return ConnectionOption(key="user", label="User", description="jdbc user")


def _password_option() -> ConnectionOption:
    return ConnectionOption(
        key="password",
        label="Password",
        option_type=OptionType.PASSWORD,
        description="jdbc password",
    )


def _database_option() -> ConnectionOption:
    return ConnectionOption(key="database", label="Database", description="database name")


def _table_option() -> ConnectionOption:
    return ConnectionOption(key="table", label="Table", description="table name")


METADATA_RULE = OptionRule.builder().required(_database_option(), _table_option()).build()
