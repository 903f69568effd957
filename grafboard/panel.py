"""Attributes and options shared by every dashboard panel."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

PanelOption = Callable[["Panel"], None]


class Panel:
    """A dashboard panel with the attributes common to every panel type."""

    type = ""

    def __init__(self, title: str) -> None:
        self.title = title
        self.span: float = 6.0
        self.height: str | None = None
        self.description: str | None = None
        self.transparent = False
        self.datasource: str | None = None
        self.repeat: str | None = None
        self.is_new = False
        self.targets: list[Any] = []

    def _apply(self, options: Iterable[Callable[[Any], None]]) -> None:
        for option in options:
            option(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(title={self.title!r})"


def span(value: float) -> PanelOption:
    """Set the width of the panel in grid units (1 to 12)."""

    def apply(panel: Panel) -> None:
        panel.span = float(value)

    return apply


def height(value: str) -> PanelOption:
    """Set the height of the panel, for instance "400px"."""

    def apply(panel: Panel) -> None:
        panel.height = value

    return apply


def description(content: str) -> PanelOption:
    """Annotate the panel with a human-readable description."""

    def apply(panel: Panel) -> None:
        panel.description = content

    return apply


def transparent() -> PanelOption:
    """Make the panel background transparent."""

    def apply(panel: Panel) -> None:
        panel.transparent = True

    return apply


def data_source(source: str) -> Callable[[Any], None]:
    """Set the data source used by a panel or a query variable."""

    def apply(target: Any) -> None:
        target.datasource = source

    return apply


def repeat(variable: str) -> PanelOption:
    """Repeat the panel for every value of the given variable."""

    def apply(panel: Panel) -> None:
        panel.repeat = variable

    return apply