"""Y axis configuration of heatmap panels."""

from __future__ import annotations

from collections.abc import Callable

AxisOption = Callable[["YAxis"], None]


class YAxis:
    """The Y axis of a heatmap."""

    def __init__(self, *args: AxisOption) -> None:
        self.decimals: int | None = None
        self.format = "short"
        self.log_base = 1
        self.show = True
        self.max: str | None = None
        self.min: str | None = None
        self.split_factor: float | None = None
        for option in args:
            option(self)

    def __repr__(self) -> str:
        return f"YAxis(format={self.format!r}, min={self.min!r}, max={self.max!r})"


def unit(value: str) -> AxisOption:
    """Set the unit of the data displayed on the axis."""

    def apply(axis: YAxis) -> None:
        axis.format = value

    return apply


def decimals(count: int) -> AxisOption:
    """Set the number of decimals displayed on the axis."""

    def apply(axis: YAxis) -> None:
        axis.decimals = count

    return apply


def min_value(value: float) -> AxisOption:
    """Set the minimum value expected on the axis."""

    def apply(axis: YAxis) -> None:
        axis.min = f"{float(value):f}"

    return apply


def max_value(value: float) -> AxisOption:
    """Set the maximum value expected on the axis."""

    def apply(axis: YAxis) -> None:
        axis.max = f"{float(value):f}"

    return apply