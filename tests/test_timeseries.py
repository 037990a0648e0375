import pytest

from grafboard import axis as axis_options
from grafboard.timeseries import (
    BarAlignment,
    GradientType,
    LegendOption,
    LineInterpolationMode,
    TimeSeries,
    axis,
    bars,
    data_source,
    description,
    fill_opacity,
    gradient_mode,
    height,
    legend,
    line_width,
    lines,
    point_size,
    points,
    repeat,
    span,
    transparent,
)


def test_new_time_series_panels_can_be_created():
    panel = TimeSeries("TimeSeries panel")

    assert panel.builder.is_new is False
    assert panel.builder.title == "TimeSeries panel"
    assert panel.builder.span == 6


def test_defaults_are_applied():
    panel = TimeSeries("")
    custom = panel.settings.field_config.defaults.custom

    assert custom.line_width == 1
    assert custom.fill_opacity == 25
    assert custom.point_size == 5
    assert custom.draw_style == "line"
    assert custom.line_interpolation == "linear"
    assert custom.gradient_mode == "opacity"
    assert custom.axis_placement == "auto"
    assert custom.scale_distribution.type == "linear"
    assert panel.settings.tooltip_mode == "single"
    assert panel.settings.legend.display_mode == "list"
    assert panel.settings.legend.placement == "bottom"
    assert panel.settings.legend.calcs == []


def test_time_series_panel_width_can_be_configured():
    panel = TimeSeries("", span(6))

    assert panel.builder.span == 6


def test_time_series_panel_height_can_be_configured():
    panel = TimeSeries("", height("400px"))

    assert panel.builder.height == "400px"


def test_time_series_panel_background_can_be_transparent():
    panel = TimeSeries("", transparent())

    assert panel.builder.transparent is True


def test_time_series_panel_description_can_be_set():
    panel = TimeSeries("", description("lala"))

    assert panel.builder.description == "lala"


def test_time_series_panel_data_source_can_be_configured():
    panel = TimeSeries("", data_source("prometheus-default"))

    assert panel.builder.datasource == "prometheus-default"


def test_line_width_can_be_configured():
    panel = TimeSeries("", line_width(3))

    assert panel.settings.field_config.defaults.custom.line_width == 3


def test_fill_opacity_can_be_configured():
    panel = TimeSeries("", fill_opacity(10))

    assert panel.settings.field_config.defaults.custom.fill_opacity == 10


def test_point_size_can_be_configured():
    panel = TimeSeries("", point_size(3))

    assert panel.settings.field_config.defaults.custom.point_size == 3


def test_repeat_can_be_configured():
    panel = TimeSeries("", repeat("ds"))

    assert panel.builder.repeat == "ds"


def test_legend_can_be_hidden():
    panel = TimeSeries("", legend(LegendOption.HIDE))

    assert panel.settings.legend.display_mode == "hidden"


def test_legend_can_be_displayed_as_a_table():
    panel = TimeSeries("", legend(LegendOption.AS_TABLE))

    assert panel.settings.legend.display_mode == "table"


def test_legend_can_be_displayed_as_a_list():
    panel = TimeSeries("", legend(LegendOption.AS_LIST))

    assert panel.settings.legend.display_mode == "list"


def test_legend_can_be_shown_to_the_right():
    panel = TimeSeries("", legend(LegendOption.TO_THE_RIGHT))

    assert panel.settings.legend.placement == "right"


def test_legend_can_be_shown_to_the_bottom():
    panel = TimeSeries("", legend(LegendOption.BOTTOM))

    assert panel.settings.legend.placement == "bottom"


@pytest.mark.parametrize(
    "option, expected",
    [
        (LegendOption.MIN, "min"),
        (LegendOption.MAX, "max"),
        (LegendOption.AVG, "mean"),
        (LegendOption.TOTAL, "sum"),
        (LegendOption.COUNT, "count"),
        (LegendOption.RANGE, "range"),
        (LegendOption.FIRST, "first"),
        (LegendOption.FIRST_NON_NULL, "firstNotNull"),
        (LegendOption.LAST, "last"),
        (LegendOption.LAST_NON_NULL, "lastNotNull"),
    ],
)
def test_legend_can_show_calculated_data(option, expected):
    panel = TimeSeries("", legend(option))

    assert expected in panel.settings.legend.calcs


def test_legend_calcs_keep_their_order():
    panel = TimeSeries("", legend(LegendOption.MAX, LegendOption.MIN))

    assert panel.settings.legend.calcs == ["max", "min"]


@pytest.mark.parametrize(
    "mode, expected",
    [
        (LineInterpolationMode.LINEAR, "linear"),
        (LineInterpolationMode.SMOOTH, "smooth"),
        (LineInterpolationMode.STEP_BEFORE, "stepBefore"),
        (LineInterpolationMode.STEP_AFTER, "stepAfter"),
    ],
)
def test_line_interpolation_can_be_configured(mode, expected):
    panel = TimeSeries("", lines(mode))
    custom = panel.settings.field_config.defaults.custom

    assert custom.line_interpolation == expected
    assert custom.draw_style == "line"


@pytest.mark.parametrize(
    "mode, expected",
    [
        (BarAlignment.ALIGN_CENTER, 0),
        (BarAlignment.ALIGN_BEFORE, -1),
        (BarAlignment.ALIGN_AFTER, 1),
    ],
)
def test_bars_alignment_can_be_configured(mode, expected):
    panel = TimeSeries("", bars(mode))
    custom = panel.settings.field_config.defaults.custom

    assert custom.bar_alignment == expected
    assert custom.draw_style == "bars"


def test_series_can_be_displayed_as_points():
    panel = TimeSeries("", points())

    assert panel.settings.field_config.defaults.custom.draw_style == "points"


def test_axis_can_be_configured():
    panel = TimeSeries("", axis(axis_options.decimals(2)))

    assert panel.settings.field_config.defaults.decimals == 2


@pytest.mark.parametrize(
    "mode, expected",
    [
        (GradientType.NO_GRADIENT, "none"),
        (GradientType.OPACITY, "opacity"),
        (GradientType.HUE, "hue"),
        (GradientType.SCHEME, "scheme"),
    ],
)
def test_gradient_mode_can_be_configured(mode, expected):
    panel = TimeSeries("", gradient_mode(mode))

    assert panel.settings.field_config.defaults.custom.gradient_mode == expected