"""Form option records and their fluent builder."""

from dschannel.dynamicforms.builder import (
    DynamicSelectOption,
    FormInputOption,
    FormOption,
    FormOptionBuilder,
    InputType,
    SelectOption,
    StaticSelectOption,
)

__all__ = [
    "DynamicSelectOption",
    "FormInputOption",
    "FormOption",
    "FormOptionBuilder",
    "InputType",
    "SelectOption",
    "StaticSelectOption",
]
