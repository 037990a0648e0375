"""Dashboard rows and the board that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from grafboard.panel import Panel
from grafboard.singlestat import Option as SingleStatOption
from grafboard.singlestat import SingleStat
from grafboard.table import Option as TableOption
from grafboard.table import Table
from grafboard.text import Option as TextOption
from grafboard.text import Text
from grafboard.timeseries import Option as TimeSeriesOption
from grafboard.timeseries import TimeSeries

Option = Callable[["Row"], None]


@dataclass
class BoardRow:
    """A row of a dashboard model, holding panels."""

    title: str
    show_title: bool = False
    collapse: bool = False
    repeat: str | None = None
    panels: list[Panel] = field(default_factory=list)

    def add(self, panel: Panel) -> None:
        """Append a panel to the row."""
        self.panels.append(panel)


@dataclass
class Board:
    """A dashboard model made of rows."""

    title: str
    rows: list[BoardRow] = field(default_factory=list)

    def add_row(self, title: str) -> BoardRow:
        """Create a new row at the end of the board and return it."""
        row = BoardRow(title=title)
        self.rows.append(row)
        return row


class Row:
    """A dashboard row, configured through options."""

    def __init__(self, board: Board, title: str, *options: Option) -> None:
        self.builder = board.add_row(title)
        for opt in (*_defaults(), *options):
            opt(self)


def _defaults() -> list[Option]:
    return [show_title()]


def with_time_series(title: str, *args: TimeSeriesOption) -> Option:
    """Add a time series panel to the row."""

    def apply(row: Row) -> None:
        row.builder.add(TimeSeries(title, *args).builder)

    return apply


def with_single_stat(title: str, *args: SingleStatOption) -> Option:
    """Add a single stat panel to the row."""

    def apply(row: Row) -> None:
        row.builder.add(SingleStat(title, *args).builder)

    return apply


def with_table(title: str, *args: TableOption) -> Option:
    """Add a table panel to the row."""

    def apply(row: Row) -> None:
        row.builder.add(Table(title, *args).builder)

    return apply


def with_text(title: str, *args: TextOption) -> Option:
    """Add a text panel to the row."""

    def apply(row: Row) -> None:
        row.builder.add(Text(title, *args).builder)

    return apply


def show_title() -> Option:
    """Display the title of the row."""

    def apply(row: Row) -> None:
        row.builder.show_title = True

    return apply


def hide_title() -> Option:
    """Do not display the title of the row."""

    def apply(row: Row) -> None:
        row.builder.show_title = False

    return apply


def repeat_for(variable: str) -> Option:
    """Repeat the row for every value of the given variable."""

    def apply(row: Row) -> None:
        row.builder.repeat = variable

    return apply


def collapse() -> Option:
    """Collapse the row by default."""

    def apply(row: Row) -> None:
        row.builder.collapse = True

    return apply