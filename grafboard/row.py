"""Dashboard rows holding panels."""

from __future__ import annotations

from collections.abc import Callable

from grafboard.graph import Graph, GraphOption
from grafboard.heatmap import Heatmap, HeatmapOption
from grafboard.panel import Panel
from grafboard.singlestat import SingleStat, SingleStatOption
from grafboard.table import Table, TableOption
from grafboard.text import Text, TextOption

RowOption = Callable[["Row"], None]


class Row:
    """A row of a dashboard, holding a list of panels."""

    def __init__(self, title: str, *args: RowOption) -> None:
        self.title = title
        self.show_title = False
        self.repeat: str | None = None
        self.collapse = False
        self.panels: list[Panel] = []
        for option in (show_title(), *args):
            option(self)

    def __repr__(self) -> str:
        return f"Row(title={self.title!r}, panels={len(self.panels)})"


def _add(factory: Callable[..., Panel], title: str, options: tuple) -> RowOption:
    def apply(row: Row) -> None:
        row.panels.append(factory(title, *options))

    return apply


def with_graph(title: str, *args: GraphOption) -> RowOption:
    """Add a graph panel to the row."""
    return _add(Graph, title, args)


def with_single_stat(title: str, *args: SingleStatOption) -> RowOption:
    """Add a single stat panel to the row."""
    return _add(SingleStat, title, args)


def with_table(title: str, *args: TableOption) -> RowOption:
    """Add a table panel to the row."""
    return _add(Table, title, args)


def with_text(title: str, *args: TextOption) -> RowOption:
    """Add a text panel to the row."""
    return _add(Text, title, args)


def with_heatmap(title: str, *args: HeatmapOption) -> RowOption:
    """Add a heatmap panel to the row."""
    return _add(Heatmap, title, args)


def show_title() -> RowOption:
    """Display the title of the row."""

    def apply(row: Row) -> None:
        row.show_title = True

    return apply


def hide_title() -> RowOption:
    """Keep the title of the row from being displayed."""

    def apply(row: Row) -> None:
        row.show_title = False

    return apply


def repeat_for(variable: str) -> RowOption:
    """Repeat the row for every value of the given variable."""

    def apply(row: Row) -> None:
        row.repeat = variable

    return apply


def collapse() -> RowOption:
    """Collapse the row by default."""

    def apply(row: Row) -> None:
        row.collapse = True

    return apply