"""The "custom" templated variable."""

from __future__ import annotations

from typing import Any

from grafboard.variable import constant as _constant
from grafboard.variable.constant import Option, _builder_setter, _MappedVariable
from grafboard.variable.template import ALL_TEXT, ALL_VALUE

__all__ = [
    "Custom",
    "values",
    "default",
    "label",
    "hide_label",
    "hide",
    "multi",
    "include_all",
    "all_value",
]


class Custom(_MappedVariable):
    """A "custom" templated variable."""

    _type = "custom"


def values(values: dict[str, str]) -> Option:
    """Set the possible values, as a label to value mapping."""
    return _constant.values(values)


def default(value: str) -> Option:
    """Set the default value of the variable."""
    return _constant.default(value)


def label(label: str) -> Option:
    """Set the label of the variable."""
    return _constant.label(label)


def hide_label() -> Option:
    """Keep the label of the variable from being displayed."""
    return _constant.hide_label()


def hide() -> Option:
    """Keep the variable from being displayed."""
    return _constant.hide()


def multi() -> Option:
    """Allow several values to be selected."""
    return _builder_setter("multi", True)


def include_all() -> Option:
    """Add an option selecting all values."""

    def apply(variable: Any) -> None:
        variable.builder.include_all = True
        variable.builder.add_option(ALL_TEXT, ALL_VALUE)

    return apply


def all_value(value: str) -> Option:
    """Set the value used when "All" is selected."""
    return _builder_setter("all_value", value)