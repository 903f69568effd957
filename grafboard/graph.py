"""Graph panels drawing time series as lines, bars or points."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from grafboard.panel import Panel, span
from grafboard.series import OverrideOption, SeriesOverride

GraphOption = Callable[["Graph"], None]


class DrawMode(Enum):
    """How series are drawn in the graph."""

    BARS = "bars"
    LINES = "lines"
    POINTS = "points"


class NullValue(str, Enum):
    """How null values are displayed."""

    AS_ZERO = "null as zero"
    AS_NULL = "null"
    CONNECTED = "connected"


class LegendOption(Enum):
    """What the legend of a graph shows, and how."""

    HIDE = "hide"
    AS_TABLE = "as_table"
    TO_THE_RIGHT = "to_the_right"
    MIN = "min"
    MAX = "max"
    AVG = "avg"
    CURRENT = "current"
    TOTAL = "total"
    NO_NULL_SERIES = "no_null_series"
    NO_ZERO_SERIES = "no_zero_series"


@dataclass
class Legend:
    """Legend settings of a graph panel."""

    show: bool = True
    align_as_table: bool = False
    right_side: bool = False
    min: bool = False
    max: bool = False
    avg: bool = False
    current: bool = False
    total: bool = False
    values: bool = False
    hide_empty: bool = False
    hide_zero: bool = False


class Graph(Panel):
    """A graph panel."""

    type = "graph"

    def __init__(self, title: str, *args: GraphOption) -> None:
        super().__init__(title)
        self.alias_colors: dict[str, Any] = {}
        self.tooltip_sort = 2
        self.tooltip_shared = True
        self.bars = False
        self.lines = False
        self.points = False
        self.fill = 0
        self.line_width = 0
        self.stepped_line = False
        self.point_radius = 5.0
        self.null_point_mode = ""
        self.legend = Legend()
        self.series_overrides: list[SeriesOverride] = []
        self.x_axis_shown = True
        self.y_axis_shown = True
        self._apply(
            (
                draw(DrawMode.LINES),
                span(6),
                fill(1),
                null(NullValue.AS_ZERO),
                line_width(1),
                legend(LegendOption.NO_ZERO_SERIES, LegendOption.NO_NULL_SERIES),
                *args,
            )
        )


def draw(*args: DrawMode) -> GraphOption:
    """Select the draw modes of the graph; the others are turned off."""
    modes = set(args)

    def apply(graph: Graph) -> None:
        graph.bars = DrawMode.BARS in modes
        graph.lines = DrawMode.LINES in modes
        graph.points = DrawMode.POINTS in modes

    return apply


def fill(value: int) -> GraphOption:
    """Set the amount of color fill of series (0 is none, 10 is the maximum)."""

    def apply(graph: Graph) -> None:
        graph.fill = value

    return apply


def line_width(value: int) -> GraphOption:
    """Set the width of series lines (0 is none, 10 is the maximum)."""
    if value < 0:
        raise ValueError("line width must not be negative")

    def apply(graph: Graph) -> None:
        graph.line_width = value

    return apply


def staircase() -> GraphOption:
    """Draw adjacent points as a staircase."""

    def apply(graph: Graph) -> None:
        graph.stepped_line = True

    return apply


def point_radius(value: float) -> GraphOption:
    """Set the size of points when points are drawn."""

    def apply(graph: Graph) -> None:
        graph.point_radius = float(value)

    return apply


def null(mode: NullValue) -> GraphOption:
    """Configure how null values are displayed."""

    def apply(graph: Graph) -> None:
        graph.null_point_mode = NullValue(mode).value

    return apply


def series_override(*args: OverrideOption) -> GraphOption:
    """Add an override altering how the matched series are drawn."""

    def apply(graph: Graph) -> None:
        override = SeriesOverride()
        for option in args:
            option(override)
        graph.series_overrides.append(override)

    return apply


def legend(*args: LegendOption) -> GraphOption:
    """Define what the legend shows; replaces any previous legend settings."""

    def apply(graph: Graph) -> None:
        result = Legend()
        for option in args:
            if option is LegendOption.HIDE:
                result.show = False
            elif option is LegendOption.AS_TABLE:
                result.align_as_table = True
            elif option is LegendOption.TO_THE_RIGHT:
                result.right_side = True
            elif option is LegendOption.MIN:
                result.min = result.values = True
            elif option is LegendOption.MAX:
                result.max = result.values = True
            elif option is LegendOption.AVG:
                result.avg = result.values = True
            elif option is LegendOption.CURRENT:
                result.current = result.values = True
            elif option is LegendOption.TOTAL:
                result.total = result.values = True
            elif option is LegendOption.NO_NULL_SERIES:
                result.hide_empty = True
            elif option is LegendOption.NO_ZERO_SERIES:
                result.hide_zero = True
        graph.legend = result

    return apply