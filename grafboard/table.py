"""The "table" panel."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from grafboard import timeseries as _timeseries
from grafboard.panel import Panel
from grafboard.timeseries import Option

__all__ = [
    "AggregationType",
    "Aggregation",
    "ColumnStyle",
    "Column",
    "Table",
    "hide_column",
    "time_series_to_rows",
    "time_series_to_columns",
    "as_json",
    "as_table",
    "as_annotations",
    "as_time_series_aggregations",
    "data_source",
    "span",
    "height",
    "description",
    "transparent",
]


class AggregationType(str, Enum):
    """Aggregation function applied to the values returned by a query."""

    AVG = "avg"
    COUNT = "count"
    CURRENT = "current"
    MIN = "min"
    MAX = "max"


@dataclass
class Aggregation:
    """An aggregate displayed as a table column."""

    label: str
    type: AggregationType


@dataclass
class ColumnStyle:
    """Display style of the columns whose label matches ``pattern``."""

    pattern: str
    type: str
    alias: str | None = None


@dataclass
class Column:
    """A table column computed from an aggregation."""

    text: str
    value: str


@dataclass
class _TableSettings:
    styles: list[ColumnStyle] = field(default_factory=list)
    transform: str = ""
    columns: list[Column] = field(default_factory=list)


class Table:
    """A table panel."""

    def __init__(self, title: str, *options: Option) -> None:
        settings = _TableSettings(
            styles=[ColumnStyle(pattern="/.*/", type="string", alias="")]
        )
        self.builder = Panel(title=title, type="table", is_new=False, settings=settings)
        for opt in (*_defaults(), *options):
            opt(self)

    @property
    def settings(self) -> _TableSettings:
        """The table specific part of the panel model."""
        return self.builder.settings


def _defaults() -> list[Option]:
    return [span(6), time_series_to_rows()]


def hide_column(column_label_pattern: str) -> Option:
    """Hide the columns whose label matches the given pattern."""

    def apply(table: Table) -> None:
        table.settings.styles.insert(
            0, ColumnStyle(pattern=column_label_pattern, type="hidden")
        )

    return apply


def _transform(name: str) -> Option:
    def apply(table: Table) -> None:
        table.settings.transform = name

    return apply


def time_series_to_rows() -> Option:
    """Display the data in rows."""
    return _transform("timeseries_to_rows")


def time_series_to_columns() -> Option:
    """Display the data in columns."""
    return _transform("timeseries_to_columns")


def as_json() -> Option:
    """Display the data as JSON."""
    return _transform("json")


def as_table() -> Option:
    """Display the data as a table."""
    return _transform("table")


def as_annotations() -> Option:
    """Display the data as annotations."""
    return _transform("annotations")


def as_time_series_aggregations(aggregations: Iterable[Aggregation]) -> Option:
    """Display the data using the given aggregations as columns."""
    columns = [
        Column(text=agg.label, value=AggregationType(agg.type).value)
        for agg in aggregations
    ]

    def apply(table: Table) -> None:
        table.settings.transform = "timeseries_aggregations"
        table.settings.columns = list(columns)

    return apply


def data_source(source: str) -> Option:
    """Set the data source used by the table."""
    return _timeseries.data_source(source)


def span(span: float) -> Option:
    """Set the width of the panel, in grid units (1 to 12)."""
    return _timeseries.span(span)


def height(height: str) -> Option:
    """Set the height of the panel, e.g. "400px"."""
    return _timeseries.height(height)


def description(content: str) -> Option:
    """Annotate the panel with a human-readable description."""
    return _timeseries.description(content)


def transparent() -> Option:
    """Make the panel background transparent."""
    return _timeseries.transparent()