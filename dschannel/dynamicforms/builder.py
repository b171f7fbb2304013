"""Display metadata for data source configuration forms.

Usage:
    FormOptionBuilder.builder().with_label("Url").with_field("url") \\
        .input_option_builder().form_text_input_option()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

I18N_PREFIX = "i18n_"


class InputType(Enum):
    TEXT = "text"
    PASSWORD = "password"
    TEXTAREA = "textarea"


@dataclass(frozen=True)
class SelectOption:
    """An option for a select field."""

    label: str
    value: str


@dataclass(frozen=True)
class FormOption:
    label: str
    field: str


@dataclass(frozen=True)
class FormInputOption(FormOption):
    input_type: InputType = InputType.TEXT


@dataclass(frozen=True)
class StaticSelectOption(FormOption):
    options: tuple[SelectOption, ...] = ()


@dataclass(frozen=True)
class DynamicSelectOption(FormOption):
    select_api: str | None = None


def _require(value: str | None, name: str) -> str:
    if not value:
        raise ValueError(f"Form option {name} is required")
    return value


class FormOptionBuilder:
    def __init__(self) -> None:
        self._label: str | None = None
        self._field: str | None = None

    @classmethod
    def builder(cls) -> FormOptionBuilder:
        return cls()

    def with_label(self, label: str) -> FormOptionBuilder:
        self._label = label
        return self

    def with_i18n_label(self, label: str) -> FormOptionBuilder:
        self._label = I18N_PREFIX + label
        return self

    def with_field(self, field: str) -> FormOptionBuilder:
        self._field = field
        return self

    def input_option_builder(self) -> InputOptionBuilder:
        return InputOptionBuilder(_require(self._label, "label"), _require(self._field, "field"))

    def dynamic_select_option_builder(self) -> DynamicSelectOptionBuilder:
        return DynamicSelectOptionBuilder(_require(self._label, "label"), _require(self._field, "field"))

    def static_select_option_builder(self) -> StaticSelectOptionBuilder:
        return StaticSelectOptionBuilder(_require(self._label, "label"), _require(self._field, "field"))


@dataclass
class InputOptionBuilder:
    label: str
    field: str

    def form_text_input_option(self) -> FormInputOption:
        return FormInputOption(self.label, self.field, InputType.TEXT)

    def form_password_input_option(self) -> FormInputOption:
        return FormInputOption(self.label, self.field, InputType.PASSWORD)

    def form_textarea_input_option(self) -> FormInputOption:
        return FormInputOption(self.label, self.field, InputType.TEXTAREA)


@dataclass
class DynamicSelectOptionBuilder:
    label: str
    field: str
    select_api: str | None = None

    def with_select_api(self, select_api: str) -> DynamicSelectOptionBuilder:
        self.select_api = _require(select_api, "select_api")
        return self

    def form_dynamic_select_option(self) -> DynamicSelectOption:
        return DynamicSelectOption(self.label, self.field, self.select_api)


@dataclass
class StaticSelectOptionBuilder:
    label: str
    field: str
    options: list[SelectOption] = field(default_factory=list)

    def add_select_options(self, *select_options: SelectOption) -> StaticSelectOptionBuilder:
        self.options.extend(select_options)
        return self

    def form_static_select_option(self) -> StaticSelectOption:
        return StaticSelectOption(self.label, self.field, tuple(self.options))
