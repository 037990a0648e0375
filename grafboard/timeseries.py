"""The "timeseries" panel, and the options shared by panels."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Callable

from grafboard import axis as _axis
from grafboard.axis import FieldConfig
from grafboard.panel import Panel

Option = Callable[[Any], None]


class TooltipMode(str, Enum):
    """Which series are shown in the tooltip."""

    SINGLE_SERIES = "single"
    ALL_SERIES = "multi"
    NO_SERIES = "none"


class LineInterpolationMode(str, Enum):
    """How points are joined when drawn as lines."""

    LINEAR = "linear"
    SMOOTH = "smooth"
    STEP_BEFORE = "stepBefore"
    STEP_AFTER = "stepAfter"


class BarAlignment(IntEnum):
    """How bars are aligned around their point."""

    ALIGN_CENTER = 0
    ALIGN_BEFORE = -1
    ALIGN_AFTER = 1


class GradientType(str, Enum):
    """Mode of the gradient fill."""

    NO_GRADIENT = "none"
    OPACITY = "opacity"
    HUE = "hue"
    SCHEME = "scheme"


class LegendOption(IntEnum):
    """What the legend displays, and how."""

    HIDE = 0
    AS_TABLE = 1
    AS_LIST = 2
    BOTTOM = 3
    TO_THE_RIGHT = 4
    MIN = 5
    MAX = 6
    AVG = 7
    FIRST = 8
    FIRST_NON_NULL = 9
    LAST = 10
    LAST_NON_NULL = 11
    TOTAL = 12
    COUNT = 13
    RANGE = 14


@dataclass
class LegendOptions:
    """Legend settings of a time series panel."""

    display_mode: str = "list"
    placement: str = "bottom"
    calcs: list[str] = field(default_factory=list)


@dataclass
class _TimeSeriesSettings:
    field_config: FieldConfig = field(default_factory=FieldConfig)
    legend: LegendOptions = field(default_factory=LegendOptions)
    tooltip_mode: str = ""


_DISPLAY_MODES = {
    LegendOption.HIDE: "hidden",
    LegendOption.AS_LIST: "list",
    LegendOption.AS_TABLE: "table",
}
_PLACEMENTS = {
    LegendOption.TO_THE_RIGHT: "right",
    LegendOption.BOTTOM: "bottom",
}
_CALCS = {
    LegendOption.FIRST: "first",
    LegendOption.FIRST_NON_NULL: "firstNotNull",
    LegendOption.LAST: "last",
    LegendOption.LAST_NON_NULL: "lastNotNull",
    LegendOption.MIN: "min",
    LegendOption.MAX: "max",
    LegendOption.AVG: "mean",
    LegendOption.COUNT: "count",
    LegendOption.TOTAL: "sum",
    LegendOption.RANGE: "range",
}


class TimeSeries:
    """A time series panel."""

    def __init__(self, title: str, *options: Option) -> None:
        self.builder = Panel(
            title=title, type="timeseries", is_new=False, settings=_TimeSeriesSettings()
        )
        for opt in (*_defaults(), *options):
            opt(self)

    @property
    def settings(self) -> Any:
        """The time series specific part of the panel model."""
        return self.builder.settings


def _defaults() -> list[Option]:
    return [
        span(6),
        line_width(1),
        fill_opacity(25),
        point_size(5),
        tooltip(TooltipMode.SINGLE_SERIES),
        legend(LegendOption.BOTTOM, LegendOption.AS_LIST),
        lines(LineInterpolationMode.LINEAR),
        gradient_mode(GradientType.OPACITY),
        axis(
            _axis.placement(_axis.PlacementMode.AUTO),
            _axis.scale(_axis.ScaleMode.LINEAR),
        ),
    ]


def _builder_setter(attribute: str, value: Any) -> Option:
    """Return an option setting one attribute of a panel's builder."""

    def apply(panel: Any) -> None:
        setattr(panel.builder, attribute, value)

    return apply


def _custom_setter(**attributes: Any) -> Option:
    """Return an option setting custom field attributes of the series."""

    def apply(ts: TimeSeries) -> None:
        custom = ts.settings.field_config.defaults.custom
        for name, value in attributes.items():
            setattr(custom, name, value)

    return apply


def data_source(source: str) -> Option:
    """Set the data source used by the panel."""
    return _builder_setter("datasource", source)


def tooltip(mode: TooltipMode) -> Option:
    """Configure which series the tooltip shows."""
    mode_value = TooltipMode(mode).value

    def apply(ts: TimeSeries) -> None:
        ts.settings.tooltip_mode = mode_value

    return apply


def line_width(value: int) -> Option:
    """Set the width of series lines."""
    return _custom_setter(line_width=value)


def fill_opacity(value: int) -> Option:
    """Set the fill opacity of series."""
    return _custom_setter(fill_opacity=value)


def point_size(value: int) -> Option:
    """Set the size of points."""
    return _custom_setter(point_size=value)


def lines(mode: LineInterpolationMode) -> Option:
    """Draw series as lines with the given interpolation."""
    interpolation = LineInterpolationMode(mode).value

    def apply(ts: TimeSeries) -> None:
        custom = ts.settings.field_config.defaults.custom
        custom.line_interpolation = interpolation
        custom.draw_style = "line"
        custom.line_style = {"fill": "solid"}

    return apply


def bars(alignment: BarAlignment) -> Option:
    """Draw series as bars with the given alignment."""
    return _custom_setter(bar_alignment=int(alignment), draw_style="bars")


def points() -> Option:
    """Draw series as points."""
    return _custom_setter(draw_style="points")


def gradient_mode(mode: GradientType) -> Option:
    """Set the mode of the gradient fill."""
    return _custom_setter(gradient_mode=GradientType(mode).value)


def axis(*args: _axis.Option) -> Option:
    """Configure the axis of the panel."""

    def apply(ts: TimeSeries) -> None:
        _axis.Axis(ts.settings.field_config, *args)

    return apply


def legend(*args: LegendOption) -> Option:
    """Define what the legend shows."""

    def apply(ts: TimeSeries) -> None:
        result = LegendOptions()
        for opt in args:
            if opt in _DISPLAY_MODES:
                result.display_mode = _DISPLAY_MODES[opt]
            elif opt in _PLACEMENTS:
                result.placement = _PLACEMENTS[opt]
            elif opt in _CALCS:
                result.calcs.append(_CALCS[opt])
        ts.settings.legend = result

    return apply


def span(span: float) -> Option:
    """Set the width of the panel, in grid units (1 to 12)."""
    return _builder_setter("span", float(span))


def height(height: str) -> Option:
    """Set the height of the panel, e.g. "400px"."""
    return _builder_setter("height", height)


def description(content: str) -> Option:
    """Set a human-readable description of the panel."""
    return _builder_setter("description", content)


def transparent() -> Option:
    """Make the panel background transparent."""
    return _builder_setter("transparent", True)


def repeat(repeat: str) -> Option:
    """Repeat the panel for every value of a variable."""
    return _builder_setter("repeat", repeat)