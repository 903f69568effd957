"""Overrides altering how individual graph series are drawn."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

OverrideOption = Callable[["SeriesOverride"], None]


@dataclass
class SeriesOverride:
    """Display settings applied to the series matching an alias or regex."""

    alias: str = ""
    color: str | None = None
    dashes: bool | None = None
    lines: bool | None = None
    fill: int | None = None
    line_width: int | None = None


def alias(value: str) -> OverrideOption:
    """Set the alias or regex identifying the series to override."""

    def apply(series: SeriesOverride) -> None:
        series.alias = value

    return apply


def color(value: str) -> OverrideOption:
    """Override the color of the matched series."""

    def apply(series: SeriesOverride) -> None:
        series.color = value

    return apply


def dashes(enabled: bool) -> OverrideOption:
    """Enable or disable drawing the series with dashes."""

    def apply(series: SeriesOverride) -> None:
        series.dashes = enabled

    return apply


def lines(enabled: bool) -> OverrideOption:
    """Enable or disable drawing the series with lines."""

    def apply(series: SeriesOverride) -> None:
        series.lines = enabled

    return apply


def fill(opacity: int) -> OverrideOption:
    """Set the fill opacity of the series."""

    def apply(series: SeriesOverride) -> None:
        series.fill = opacity

    return apply


def line_width(width: int) -> OverrideOption:
    """Set the line width of the series."""

    def apply(series: SeriesOverride) -> None:
        series.line_width = width

    return apply