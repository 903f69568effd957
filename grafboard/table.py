"""Table panels."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from grafboard.panel import Panel, span

TableOption = Callable[["Table"], None]


class AggregationType(str, Enum):
    """Aggregation function applied to the values returned by a query."""

    AVG = "avg"
    COUNT = "count"
    CURRENT = "current"
    MIN = "min"
    MAX = "max"


@dataclass(frozen=True)
class Aggregation:
    """An aggregate column displayed in the table."""

    label: str
    type: AggregationType


@dataclass
class ColumnStyle:
    """Style applied to columns whose label matches a pattern."""

    pattern: str
    type: str
    alias: str | None = None


@dataclass
class Column:
    """A column of a time series aggregation table."""

    text: str
    value: str


class Table(Panel):
    """A table panel."""

    type = "table"

    def __init__(self, title: str, *args: TableOption) -> None:
        super().__init__(title)
        self.styles: list[ColumnStyle] = [
            ColumnStyle(pattern="/.*/", type="string", alias="")
        ]
        self.transform = ""
        self.columns: list[Column] = []
        self._apply((span(6), time_series_to_rows(), *args))


def hide_column(pattern: str) -> TableOption:
    """Hide the columns whose label matches the given pattern."""

    def apply(table: Table) -> None:
        table.styles.insert(0, ColumnStyle(pattern=pattern, type="hidden"))

    return apply


def _transform(name: str) -> TableOption:
    def apply(table: Table) -> None:
        table.transform = name

    return apply


def time_series_to_rows() -> TableOption:
    """Display the data in rows."""
    return _transform("timeseries_to_rows")


def time_series_to_columns() -> TableOption:
    """Display the data in columns."""
    return _transform("timeseries_to_columns")


def as_json() -> TableOption:
    """Display the data as JSON."""
    return _transform("json")


def as_table() -> TableOption:
    """Display the data as a table."""
    return _transform("table")


def as_annotations() -> TableOption:
    """Display the data as annotations."""
    return _transform("annotations")


def as_time_series_aggregations(aggregations: Iterable[Aggregation]) -> TableOption:
    """Display the data aggregated by the given methods."""
    columns = [
        Column(text=aggregation.label, value=AggregationType(aggregation.type).value)
        for aggregation in aggregations
    ]

    def apply(table: Table) -> None:
        table.transform = "timeseries_aggregations"
        table.columns = list(columns)

    return apply