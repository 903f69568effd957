"""Heatmap panels."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from grafboard.heatmap_axis import AxisOption, YAxis
from grafboard.panel import Panel, span

HeatmapOption = Callable[["Heatmap"], None]


class DataFormatMode(str, Enum):
    """How the data of a heatmap is interpreted."""

    TIME_SERIES_BUCKETS = "tsbuckets"
    TIME_SERIES = "timeseries"


class LegendOption(Enum):
    """What the legend of a heatmap shows."""

    HIDE = "hide"


class Heatmap(Panel):
    """A heatmap panel."""

    type = "heatmap"

    def __init__(self, title: str, *args: HeatmapOption) -> None:
        super().__init__(title)
        self.card_padding: float | None = None
        self.card_round: float | None = None
        self.card_color = "#b4ff00"
        self.color_scale = "sqrt"
        self.color_scheme = "interpolateSpectral"
        self.color_exponent = 0.5
        self.color_min: float | None = None
        self.color_max: float | None = None
        self.color_mode = "spectrum"
        self.legend_show = True
        self.tooltip_show = True
        self.tooltip_show_histogram = True
        self.tooltip_decimals = 0
        self.x_axis_show = True
        self.y_bucket_bound = "auto"
        self.data_format = ""
        self.hide_zero_buckets = False
        self.highlight_cards = False
        self.reverse_y_buckets = False
        self.y_axis = YAxis()
        self._apply(
            (
                span(6),
                data_format(DataFormatMode.TIME_SERIES_BUCKETS),
                hide_zero_buckets(),
                highlight_cards(),
                y_axis(),
                *args,
            )
        )


def data_format(mode: DataFormatMode) -> HeatmapOption:
    """Set how the data should be interpreted."""

    def apply(heatmap: Heatmap) -> None:
        heatmap.data_format = DataFormatMode(mode).value

    return apply


def legend(*args: LegendOption) -> HeatmapOption:
    """Define what the legend shows."""

    def apply(heatmap: Heatmap) -> None:
        if LegendOption.HIDE in args:
            heatmap.legend_show = False

    return apply


def show_zero_buckets() -> HeatmapOption:
    """Display "zero" buckets."""

    def apply(heatmap: Heatmap) -> None:
        heatmap.hide_zero_buckets = False

    return apply


def hide_zero_buckets() -> HeatmapOption:
    """Hide "zero" buckets."""

    def apply(heatmap: Heatmap) -> None:
        heatmap.hide_zero_buckets = True

    return apply


def highlight_cards() -> HeatmapOption:
    """Highlight bucket cards."""

    def apply(heatmap: Heatmap) -> None:
        heatmap.highlight_cards = True

    return apply


def no_highlight_cards() -> HeatmapOption:
    """Disable the highlighting of bucket cards."""

    def apply(heatmap: Heatmap) -> None:
        heatmap.highlight_cards = False

    return apply


def reverse_y_buckets() -> HeatmapOption:
    """Reverse the order of buckets on the Y axis."""

    def apply(heatmap: Heatmap) -> None:
        heatmap.reverse_y_buckets = True

    return apply


def hide_tooltip() -> HeatmapOption:
    """Keep the tooltip from being displayed."""

    def apply(heatmap: Heatmap) -> None:
        heatmap.tooltip_show = False

    return apply


def hide_tooltip_histogram() -> HeatmapOption:
    """Keep histograms from being displayed in tooltips."""

    def apply(heatmap: Heatmap) -> None:
        heatmap.tooltip_show_histogram = False

    return apply


def tooltip_decimals(count: int) -> HeatmapOption:
    """Set the number of decimals displayed in tooltips."""

    def apply(heatmap: Heatmap) -> None:
        heatmap.tooltip_decimals = count

    return apply


def hide_x_axis() -> HeatmapOption:
    """Keep the X axis from being displayed."""

    def apply(heatmap: Heatmap) -> None:
        heatmap.x_axis_show = False

    return apply


def y_axis(*args: AxisOption) -> HeatmapOption:
    """Configure the Y axis."""

    def apply(heatmap: Heatmap) -> None:
        heatmap.y_axis = YAxis(*args)

    return apply