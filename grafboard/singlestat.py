"""Single stat panels reducing a series to one value."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from grafboard.panel import Panel, span

SingleStatOption = Callable[["SingleStat"], None]

VALUE_TO_TEXT_MAPPING = 1
RANGE_TO_TEXT_MAPPING = 2


class StatType(str, Enum):
    """Function reducing the whole query to a single value."""

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


@dataclass(frozen=True)
class ValueMap:
    """Maps a value to an explicit text."""

    value: str
    text: str
    op: str = "="


@dataclass(frozen=True)
class RangeMap:
    """Maps a range of values to an explicit text."""

    from_value: str
    to_value: str
    text: str


@dataclass
class SparkLine:
    """Settings of the spark line drawn under the value."""

    show: bool = False
    full: bool = False
    line_color: str | None = None
    fill_color: str | None = None
    y_min: float | None = None
    y_max: float | None = None


class SingleStat(Panel):
    """A single stat panel."""

    type = "singlestat"

    def __init__(self, title: str, *args: SingleStatOption) -> None:
        super().__init__(title)
        self.format = ""
        self.decimals = 0
        self.spark_line = SparkLine()
        self.value_name = ""
        self.value_font_size = ""
        self.prefix: str | None = None
        self.prefix_font_size: str | None = None
        self.postfix: str | None = None
        self.postfix_font_size: str | None = None
        self.color_value = False
        self.color_background = False
        self.thresholds = ""
        self.colors: list[str] = []
        self.mapping_type = VALUE_TO_TEXT_MAPPING
        self.mapping_types: dict[str, int] = {
            "value to text": VALUE_TO_TEXT_MAPPING,
            "range to text": RANGE_TO_TEXT_MAPPING,
        }
        self.value_maps: list[ValueMap] = []
        self.range_maps: list[RangeMap] = []
        self._apply(
            (
                span(6),
                value_font_size("100%"),
                value_type(StatType.AVG),
                colors(("#299c46", "rgba(237, 129, 40, 0.89)", "#d44a3a")),
                values_to_text([ValueMap(value="null", text="N/A")]),
                spark_line_color("rgb(31, 120, 193)"),
                spark_line_fill_color("rgba(31, 118, 189, 0.18)"),
                *args,
            )
        )


def unit(value: str) -> SingleStatOption:
    """Set the unit of the displayed value."""

    def apply(stat: SingleStat) -> None:
        stat.format = value

    return apply


def decimals(count: int) -> SingleStatOption:
    """Set the number of decimals displayed."""

    def apply(stat: SingleStat) -> None:
        stat.decimals = count

    return apply


def spark_line() -> SingleStatOption:
    """Display a spark line summary of the series under the value."""

    def apply(stat: SingleStat) -> None:
        stat.spark_line.show = True
        stat.spark_line.full = False

    return apply


def full_spark_line() -> SingleStatOption:
    """Display a full height spark line summary of the series."""

    def apply(stat: SingleStat) -> None:
        stat.spark_line.show = True
        stat.spark_line.full = True

    return apply


def spark_line_color(color: str) -> SingleStatOption:
    """Set the line color of the spark line."""

    def apply(stat: SingleStat) -> None:
        stat.spark_line.line_color = color

    return apply


def spark_line_fill_color(color: str) -> SingleStatOption:
    """Set the fill color of the spark line."""

    def apply(stat: SingleStat) -> None:
        stat.spark_line.fill_color = color

    return apply


def spark_line_y_min(value: float) -> SingleStatOption:
    """Set the smallest value expected on the spark line's Y axis."""

    def apply(panel: SingleStat) -> None:
        panel.spark_line.y_min = float(value)

    return apply


def spark_line_y_max(value: float) -> SingleStatOption:
    """Set the largest value expected on the spark line's Y axis."""

    def apply(panel: SingleStat) -> None:
        panel.spark_line.y_max = float(value)

    return apply


def value_type(stat: StatType) -> SingleStatOption:
    """Set how the series is reduced to a single value."""
    name = StatType(stat).value

    def apply(panel: SingleStat) -> None:
        panel.value_name = name

    return apply


def value_font_size(size: str) -> SingleStatOption:
    """Set the font size of the value, for instance "100%"."""

    def apply(stat: SingleStat) -> None:
        stat.value_font_size = size

    return apply


def prefix(text: str) -> SingleStatOption:
    """Set the text shown before the value."""

    def apply(stat: SingleStat) -> None:
        stat.prefix = text

    return apply


def prefix_font_size(size: str) -> SingleStatOption:
    """Set the font size of the prefix, for instance "110%"."""

    def apply(stat: SingleStat) -> None:
        stat.prefix_font_size = size

    return apply


def postfix(text: str) -> SingleStatOption:
    """Set the text shown after the value."""

    def apply(stat: SingleStat) -> None:
        stat.postfix = text

    return apply


def postfix_font_size(size: str) -> SingleStatOption:
    """Set the font size of the postfix, for instance "110%"."""

    def apply(stat: SingleStat) -> None:
        stat.postfix_font_size = size

    return apply


def color_value() -> SingleStatOption:
    """Show the threshold colors on the value itself."""

    def apply(stat: SingleStat) -> None:
        stat.color_value = True

    return apply


def color_background() -> SingleStatOption:
    """Show the threshold colors in the background."""

    def apply(stat: SingleStat) -> None:
        stat.color_background = True

    return apply


def thresholds(values: Sequence[str]) -> SingleStatOption:
    """Set the two thresholds delimiting the three color ranges."""
    bounds = list(values)
    if len(bounds) != 2:
        raise ValueError("exactly two thresholds are expected")
    joined = ",".join(bounds)

    def apply(stat: SingleStat) -> None:
        stat.thresholds = joined

    return apply


def colors(values: Sequence[str]) -> SingleStatOption:
    """Set the three colors applied according to the thresholds."""
    palette = list(values)
    if len(palette) != 3:
        raise ValueError("exactly three colors are expected")

    def apply(stat: SingleStat) -> None:
        stat.colors = list(palette)

    return apply


def values_to_text(mapping: Iterable[ValueMap]) -> SingleStatOption:
    """Translate values of the summary stat into explicit text."""
    entries = [ValueMap(value=entry.value, text=entry.text) for entry in mapping]

    def apply(stat: SingleStat) -> None:
        stat.mapping_type = VALUE_TO_TEXT_MAPPING
        stat.value_maps = list(entries)

    return apply


def ranges_to_text(mapping: Iterable[RangeMap]) -> SingleStatOption:
    """Translate ranges of the summary stat into explicit text."""
    entries = list(mapping)

    def apply(stat: SingleStat) -> None:
        stat.mapping_type = RANGE_TO_TEXT_MAPPING
        stat.range_maps = list(entries)

    return apply