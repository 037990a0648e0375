# grafboard

Describe Grafana dashboards in plain Python. Rows, panels and templated
variables are built from small option functions. The options are applied in
order, so a dashboard reads as a list of what it should contain.

## Modules

- `grafboard.row` provides the dashboard structure. A `Board` holds
  `BoardRow`s. A `Row` adds itself to a board and can hold time series,
  single stat, table and text panels (`with_time_series`,
  `with_single_stat`, `with_table`, `with_text`). It can also repeat for a
  variable, hide its title or start collapsed (`show_title`, `hide_title`,
  `repeat_for`, `collapse`).
- `grafboard.timeseries` builds time series panels. Its options cover:
  - tooltip mode
  - line width, fill opacity and point size
  - lines, bars or points (`lines`, `bars`, `points`)
  - gradient mode
  - legend content (`LegendOption`)
  - axis settings
  - data source, span, height, description, transparency and repeat
- `grafboard.axis` sets axis options on a `FieldConfig`:
  - placement
  - soft limits (`soft_min`, `soft_max`) and hard limits (`minimum`, `maximum`)
  - unit and decimals
  - scale: linear, log2 or log10
  - label
- `grafboard.singlestat` builds single stat panels. Its options cover:
  - spark lines
  - thresholds and colors
  - prefixes and postfixes and their font sizes
  - value to text mappings (`values_to_text` with `ValueMap`)
  - range to text mappings (`ranges_to_text` with `RangeMap`)
- `grafboard.table` builds table panels. Its options cover:
  - hidden columns (`hide_column`)
  - transforms: `time_series_to_rows`, `time_series_to_columns`, `as_json`,
    `as_table`, `as_annotations` and `as_time_series_aggregations`
- `grafboard.text` builds text panels with HTML or markdown content.
- `grafboard.panel` defines `Panel`, the model shared by every panel kind.
- `grafboard.variable` provides the templated variables:
  - `constant.Constant`
  - `custom.Custom`
  - `datasource.Datasource`
  - `interval.Interval`
  - `query.Query`

  All of them build a `template.TemplateVar`.

## How options work

Every building block takes a title or name, followed by any number of
options. An option is a plain callable returned by one of the module's
functions. Options are applied after the block's defaults, so a later option
overrides an earlier one. Each block exposes the model it fills in as
`.builder`. Panels also expose their type-specific part as `.settings`.

```python
from grafboard import axis, text, timeseries
from grafboard.row import Board, Row, repeat_for, with_text, with_time_series

board = Board("Service overview")

Row(
    board,
    "HTTP",
    repeat_for("service"),
    with_time_series(
        "Request rate",
        timeseries.line_width(2),
        timeseries.legend(timeseries.LegendOption.AS_TABLE, timeseries.LegendOption.MAX),
        timeseries.axis(axis.unit("reqps"), axis.decimals(2)),
    ),
    with_text("Notes", text.markdown("*Rates are per second.*")),
)

row = board.rows[0]
assert row.repeat == "service"
assert [panel.type for panel in row.panels] == ["timeseries", "text"]
```

Templated variables follow the same pattern:

```python
from grafboard.variable import interval, query

window = interval.Interval(
    "interval",
    interval.values(["12h", "30s", "5m"]),  # sorted by duration
    interval.default("5m"),
)
assert window.builder.query == "30s,5m,12h"

status = query.Query(
    "status",
    query.data_source("prometheus-default"),
    query.request("label_values(prometheus_http_requests_total, code)"),
    query.sort(query.SortOrder.NUMERICAL_ASC),
    query.include_all(),
    query.default_all(),
)
```

`interval.parse_duration` accepts durations made of the units `y`, `w`, `d`,
`h`, `m`, `s` and `ms`, such as `"1h30m"`, and returns a `timedelta`. It
raises `ValueError` on anything else. Values that cannot be parsed sort as a
zero duration.

## Defaults worth knowing

- Rows show their title.
- Time series, single stat, table and text panels are 6 grid units wide
  unless `span` says otherwise.
- Time series panels start with:
  - single-series tooltips
  - a legend shown as a list at the bottom
  - linear lines of width 1
  - 25% fill opacity and point size 5
  - an opacity gradient
  - an auto-placed linear axis
- Tables transform time series to rows. They carry a default string style
  for every column, and `hide_column` styles are placed before it.
- Single stats:
  - reduce the series to its average
  - map `null` to `N/A`
  - use the colors `#299c46`, `rgba(237, 129, 40, 0.89)` and `#d44a3a`
  - `thresholds` needs exactly two values and `colors` needs exactly three;
    any other count raises `ValueError`
- Query and datasource variables refresh when the dashboard loads.
- `hide_label()` sets a variable's `hide` to 1 and `hide()` sets it to 2.

## What it does not do

grafboard only builds an in-memory model of a dashboard:

- It does not serialise the model to JSON.
- It does not talk to a Grafana server.
- It has no command-line tool.
- There are no graph, heatmap or logs panels.
- There are no helpers for building data source queries (Prometheus,
  Graphite, InfluxDB, Stackdriver). A panel's `targets` list stays empty
  unless you fill it yourself.
- There are no alerts.