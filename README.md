# grafboard

Describe Grafana dashboard building blocks (rows, panels and template
variables) with plain Python objects and small option functions.

Every builder takes a title or a name followed by any number of options.
An option is a callable that configures the object it is given; options are
applied in order, after the builder's defaults, so a later option overrides
an earlier one.

## Installation

```
pip install grafboard
```

Run the test suite with:

```
pip install grafboard[test]
pytest
```

## Panels

```python
from grafboard.graph import Graph, DrawMode, LegendOption, draw, legend, series_override
from grafboard.panel import span, height, description, data_source
from grafboard.series import alias, color

graph = Graph(
    "HTTP rate",
    data_source("prometheus-default"),
    span(12),
    height("400px"),
    description("Requests per second"),
    draw(DrawMode.LINES, DrawMode.POINTS),
    legend(LegendOption.AS_TABLE, LegendOption.AVG),
    series_override(alias("Error - .*"), color("red")),
)

graph.lines, graph.points, graph.bars   # True, True, False
graph.legend.avg, graph.legend.values   # True, True
```

A new `Graph` draws lines, spans 6 grid units, has a fill of 1, a line width
of 1, shows null values as zero, and hides all-zero and all-null series from
its legend. `legend()` replaces the whole legend configuration each time it
is applied. `line_width()` raises `ValueError` for a negative width.

The options in `grafboard.panel` (`span`, `height`, `description`,
`transparent`, `data_source`, `repeat`) work with any panel.

Other panel types follow the same pattern:

- `grafboard.text.Text` with `html()` or `markdown()` content;
- `grafboard.heatmap.Heatmap` with `data_format()`, `legend()`,
  `show_zero_buckets()` / `hide_zero_buckets()`, `highlight_cards()` /
  `no_highlight_cards()`, `reverse_y_buckets()`, `hide_tooltip()`,
  `hide_tooltip_histogram()`, `tooltip_decimals()`, `hide_x_axis()` and
  `y_axis()`, the last built from `grafboard.heatmap_axis` options
  (`unit()`, `decimals()`, `min_value()`, `max_value()`; bounds are stored as
  strings such as `"1.000000"`);
- `grafboard.table.Table` with `hide_column()`, `time_series_to_rows()`
  (the default), `time_series_to_columns()`, `as_json()`, `as_table()`,
  `as_annotations()` and `as_time_series_aggregations()`;
- `grafboard.singlestat.SingleStat` with `unit()`, `decimals()`,
  `value_type()`, `value_font_size()`, `prefix()`, `postfix()`,
  `thresholds()`, `colors()`, `color_value()`, `color_background()`, the
  `spark_line*()` options, `values_to_text()` and `ranges_to_text()`.
  `thresholds()` takes exactly two values and `colors()` exactly three;
  anything else raises `ValueError`.

```python
from grafboard.table import Table, Aggregation, AggregationType, hide_column, as_time_series_aggregations

table = Table(
    "Latency",
    hide_column("Time.*"),
    as_time_series_aggregations([Aggregation("Average", AggregationType.AVG)]),
)
table.transform        # "timeseries_aggregations"
table.styles[0].type   # "hidden"
```

## Rows

```python
from grafboard.row import Row, with_graph, with_text, collapse
from grafboard.text import markdown

row = Row(
    "Overview",
    with_graph("HTTP rate"),
    with_text("Notes", markdown("*All good*")),
    collapse(),
)
len(row.panels)   # 2
```

A row shows its title unless `hide_title()` is given; `repeat_for()` repeats
it for every value of a variable. `with_single_stat()`, `with_table()` and
`with_heatmap()` add the other panel types.

## Template variables

Every variable is a `grafboard.variable.TemplateVar`, with its selectable
entries in `options`, its query in `query` and its selected value in
`current`. The options in `grafboard.variable` (`label`, `hide_label`,
`hide`, `multi`, `include_all`, `all_value`, `regex`) apply to any of them.

```python
from grafboard.query import Query, request, refresh, RefreshInterval
from grafboard.interval import Interval, values, default
from grafboard.variable import include_all, multi

status = Query(
    "status",
    request("label_values(prometheus_http_requests_total, code)"),
    refresh(RefreshInterval.TIME_CHANGE),
    multi(),
    include_all(),
)

step = Interval("interval", values(["12h", "30s", "5m"]), default("5m"))
step.query   # "30s,5m,12h"
```

Interval values are ordered by duration; `grafboard.interval.parse_duration`
reads durations such as `"1h30m"` or `"30d"` into a `timedelta` and raises
`ValueError` for anything else (values it cannot read sort as zero).

`grafboard.constant.Constant` and `grafboard.custom.Custom` take their values
as a label-to-value mapping through their `values()` option, and `default()`
picks the matching label as the displayed text.
`grafboard.datasource.Datasource` lists data sources of the type given by
`datasource_type()`.

## What this package does not do

grafboard only builds these objects in memory. It has no dashboard object
grouping rows and variables, does not serialise anything to Grafana's JSON
format, and does not talk to a Grafana server. Panels have a `targets` list,
but no option here creates query targets, and graph panels have no axis or
alert options.