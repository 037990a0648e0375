"""The "query" templated variable."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

from grafboard.variable import constant as _constant
from grafboard.variable import custom as _custom
from grafboard.variable.constant import Option, _builder_setter, _Variable
from grafboard.variable.template import ALL_TEXT, ALL_VALUE, Current

__all__ = [
    "SortOrder",
    "RefreshInterval",
    "Query",
    "data_source",
    "request",
    "sort",
    "refresh",
    "regex",
    "label",
    "hide_label",
    "hide",
    "multi",
    "include_all",
    "default_all",
    "all_value",
]


class SortOrder(IntEnum):
    """Ordering applied to the values returned by the query."""

    NONE = 0
    ALPHABETICAL_ASC = 1
    ALPHABETICAL_DESC = 2
    NUMERICAL_ASC = 3
    NUMERICAL_DESC = 4
    ALPHABETICAL_NO_CASE_ASC = 5
    ALPHABETICAL_NO_CASE_DESC = 6


class RefreshInterval(IntEnum):
    """When the query results are refreshed."""

    NEVER = 0
    DASHBOARD_LOAD = 1
    TIME_CHANGE = 2


class Query(_Variable):
    """A "query" templated variable."""

    _type = "query"

    def _defaults(self) -> Iterable[Option]:
        return (refresh(RefreshInterval.DASHBOARD_LOAD),)


def data_source(source: str) -> Option:
    """Set the data source used by the query."""
    return _builder_setter("datasource", source)


def request(request: str) -> Option:
    """Set the query to execute."""
    return _builder_setter("query", request)


def sort(order: SortOrder) -> Option:
    """Set the order in which values are sorted."""
    return _builder_setter("sort", int(order))


def refresh(refresh: RefreshInterval) -> Option:
    """Set when the values are refreshed."""
    return _builder_setter("refresh", int(refresh))


def regex(regex: str) -> Option:
    """Filter the values with a regular expression."""
    return _builder_setter("regex", regex)


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
    return _custom.multi()


def include_all() -> Option:
    """Add an option selecting all values."""
    return _custom.include_all()


def default_all() -> Option:
    """Select "All" values by default."""
    return _builder_setter("current", Current(text=[ALL_TEXT], value=ALL_VALUE))


def all_value(value: str) -> Option:
    """Set a custom value used when "All" is selected."""
    return _custom.all_value(value)