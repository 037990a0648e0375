"""The "datasource" templated variable."""

from __future__ import annotations

from typing import Iterable

from grafboard.variable import constant as _constant
from grafboard.variable import custom as _custom
from grafboard.variable import query as _query
from grafboard.variable.constant import Option, _builder_setter, _Variable

__all__ = [
    "Datasource",
    "datasource_type",
    "regex",
    "label",
    "hide_label",
    "hide",
    "multi",
    "include_all",
]

# Refresh the values every time the dashboard is loaded.
_DASHBOARD_LOAD = 1


class Datasource(_Variable):
    """A "datasource" templated variable."""

    _type = "datasource"

    def _defaults(self) -> Iterable[Option]:
        return (_builder_setter("refresh", _DASHBOARD_LOAD),)


def datasource_type(datasource_type: str) -> Option:
    """Set the data source type, e.g. "prometheus"."""
    return _builder_setter("query", datasource_type)


def regex(regex: str) -> Option:
    """Filter the values with a regular expression."""
    return _query.regex(regex)


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