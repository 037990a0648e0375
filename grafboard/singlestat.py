"""The "singlestat" panel."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Sequence

from grafboard.panel import Panel

Option = Callable[["SingleStat"], None]

VALUE_TO_TEXT_MAPPING = 1
RANGE_TO_TEXT_MAPPING = 2


class StatType(str, Enum):
    """Function reducing a whole series into a single value."""

    MIN = "min"
    MAX = "max"
    AVG = "avg"
    CURRENT = "current"
    TOTAL = "total"
    FIRST = "first"
    DELTA = "delta"
    DIFF = "diff"
    RANGE = "range"
    NAME = "name"


@dataclass
class ValueMap:
    """Maps a value into explicit text."""

    value: str
    text: str


@dataclass
class RangeMap:
    """Maps a range of values into explicit text."""

    from_: str
    to: str
    text: str


@dataclass
class SparkLineSettings:
    """Spark line shown alongside the single stat."""

    show: bool = False
    full: bool = False
    line_color: str | None = None
    fill_color: str | None = None
    y_min: float | None = None
    y_max: float | None = None


@dataclass
class _SingleStatSettings:
    mapping_type: int = VALUE_TO_TEXT_MAPPING
    mapping_types: list[dict[str, Any]] = field(
        default_factory=lambda: [
            {"name": "value to text", "value": VALUE_TO_TEXT_MAPPING},
            {"name": "range to text", "value": RANGE_TO_TEXT_MAPPING},
        ]
    )
    spark_line: SparkLineSettings = field(default_factory=SparkLineSettings)
    format: str = ""
    decimals: int = 0
    value_name: str = ""
    value_font_size: str = ""
    prefix: str | None = None
    prefix_font_size: str | None = None
    postfix: str | None = None
    postfix_font_size: str | None = None
    color_value: bool = False
    color_background: bool = False
    thresholds: str = ""
    colors: list[str] = field(default_factory=list)
    value_maps: list[dict[str, str]] = field(default_factory=list)
    range_maps: list[dict[str, str]] = field(default_factory=list)


class SingleStat:
    """A single stat panel."""

    def __init__(self, title: str, *options: Option) -> None:
        self.builder = Panel(
            title=title,
            type="singlestat",
            is_new=False,
            settings=_SingleStatSettings(),
        )
        for opt in (*_defaults(), *options):
            opt(self)

    @property
    def settings(self) -> _SingleStatSettings:
        """The single stat specific part of the panel model."""
        return self.builder.settings


def _defaults() -> list[Option]:
    return [
        span(6),
        value_font_size("100%"),
        value_type(StatType.AVG),
        colors(("#299c46", "rgba(237, 129, 40, 0.89)", "#d44a3a")),
        values_to_text([ValueMap(value="null", text="N/A")]),
        spark_line_color("rgb(31, 120, 193)"),
        spark_line_fill_color("rgba(31, 118, 189, 0.18)"),
    ]


def data_source(source: str) -> Option:
    """Set the data source used by the panel."""

    def apply(stat: SingleStat) -> None:
        stat.builder.datasource = source

    return apply


def span(span: float) -> Option:
    """Set the width of the panel, in grid units (1 to 12)."""

    def apply(stat: SingleStat) -> None:
        stat.builder.span = float(span)

    return apply


def height(height: str) -> Option:
    """Set the height of the panel, e.g. "400px"."""

    def apply(stat: SingleStat) -> None:
        stat.builder.height = height

    return apply


def description(content: str) -> Option:
    """Set a human-readable description of the panel."""

    def apply(stat: SingleStat) -> None:
        stat.builder.description = content

    return apply


def transparent() -> Option:
    """Make the panel background transparent."""

    def apply(stat: SingleStat) -> None:
        stat.builder.transparent = True

    return apply


def unit(unit: str) -> Option:
    """Set the unit of the displayed value."""

    def apply(stat: SingleStat) -> None:
        stat.settings.format = unit

    return apply


def decimals(count: int) -> Option:
    """Set the number of decimals displayed."""

    def apply(stat: SingleStat) -> None:
        stat.settings.decimals = count

    return apply


def spark_line() -> Option:
    """Display a spark line summary of the series."""

    def apply(stat: SingleStat) -> None:
        stat.settings.spark_line.show = True
        stat.settings.spark_line.full = False

    return apply


def full_spark_line() -> Option:
    """Display a full height spark line summary of the series."""

    def apply(stat: SingleStat) -> None:
        stat.settings.spark_line.show = True
        stat.settings.spark_line.full = True

    return apply


def spark_line_color(color: str) -> Option:
    """Set the line color of the spark line."""

    def apply(stat: SingleStat) -> None:
        stat.settings.spark_line.line_color = color

    return apply


def spark_line_fill_color(color: str) -> Option:
    """Set the fill color of the spark line."""

    def apply(stat: SingleStat) -> None:
        stat.settings.spark_line.fill_color = color

    return apply


def spark_line_y_min(value: float) -> Option:
    """Set the smallest value expected on the spark line's Y axis."""

    def apply(stat: SingleStat) -> None:
        stat.settings.spark_line.y_min = float(value)

    return apply


def spark_line_y_max(value: float) -> Option:
    """Set the largest value expected on the spark line's Y axis."""

    def apply(stat: SingleStat) -> None:
        stat.settings.spark_line.y_max = float(value)

    return apply


def value_type(value_type: StatType) -> Option:
    """Set how the series is reduced to a single value."""

    def apply(stat: SingleStat) -> None:
        stat.settings.value_name = StatType(value_type).value

    return apply


def value_font_size(size: str) -> Option:
    """Set the font size of the value, e.g. "100%"."""

    def apply(stat: SingleStat) -> None:
        stat.settings.value_font_size = size

    return apply


def prefix(prefix: str) -> Option:
    """Set the text shown before the value."""

    def apply(stat: SingleStat) -> None:
        stat.settings.prefix = prefix

    return apply


def prefix_font_size(size: str) -> Option:
    """Set the font size of the prefix, e.g. "110%"."""

    def apply(stat: SingleStat) -> None:
        stat.settings.prefix_font_size = size

    return apply


def postfix(postfix: str) -> Option:
    """Set the text shown after the value."""

    def apply(stat: SingleStat) -> None:
        stat.settings.postfix = postfix

    return apply


def postfix_font_size(size: str) -> Option:
    """Set the font size of the postfix, e.g. "110%"."""

    def apply(stat: SingleStat) -> None:
        stat.settings.postfix_font_size = size

    return apply


def color_value() -> Option:
    """Show the threshold colors on the value itself."""

    def apply(stat: SingleStat) -> None:
        stat.settings.color_value = True

    return apply


def color_background() -> Option:
    """Show the threshold colors in the background."""

    def apply(stat: SingleStat) -> None:
        stat.settings.color_background = True

    return apply


def thresholds(values: Sequence[str]) -> Option:
    """Set the two threshold values delimiting the three color ranges."""
    low, high = _exactly(values, 2, "thresholds")

    def apply(stat: SingleStat) -> None:
        stat.settings.thresholds = f"{low},{high}"

    return apply


def colors(values: Sequence[str]) -> Option:
    """Set the three colors applied according to the thresholds."""
    chosen = _exactly(values, 3, "colors")

    def apply(stat: SingleStat) -> None:
        stat.settings.colors = list(chosen)

    return apply


def values_to_text(mapping: Iterable[ValueMap]) -> Option:
    """Translate specific values into explicit text."""
    value_maps = [{"op": "=", "text": entry.text, "value": entry.value} for entry in mapping]

    def apply(stat: SingleStat) -> None:
        stat.settings.mapping_type = VALUE_TO_TEXT_MAPPING
        stat.settings.value_maps = [dict(entry) for entry in value_maps]

    return apply


def ranges_to_text(mapping: Iterable[RangeMap]) -> Option:
    """Translate ranges of values into explicit text."""
    range_maps = [
        {"from": entry.from_, "to": entry.to, "text": entry.text} for entry in mapping
    ]

    def apply(stat: SingleStat) -> None:
        stat.settings.mapping_type = RANGE_TO_TEXT_MAPPING
        stat.settings.range_maps = [dict(entry) for entry in range_maps]

    return apply


def repeat(repeat: str) -> Option:
    """Repeat the panel for every value of a variable."""

    def apply(stat: SingleStat) -> None:
        stat.builder.repeat = repeat

    return apply


def _exactly(values: Sequence[str], count: int, what: str) -> tuple[str, ...]:
    items = tuple(values)
    if len(items) != count:
        raise ValueError(f"{what} expects exactly {count} values, got {len(items)}")
    return items