"""Templated dashboard variables and the options they share."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

Option = Callable[["TemplateVar"], None]

ALL_TEXT = "All"
ALL_VALUE = "$__all"


@dataclass
class Current:
    """The value currently selected for a variable."""

    text: list[str]
    value: str


@dataclass
class VariableOption:
    """One selectable entry of a variable."""

    text: str
    value: str


@dataclass
class TemplateVar:
    """A templated variable of a dashboard."""

    name: str
    type: str
    label: str = ""
    query: str = ""
    options: list[VariableOption] = field(default_factory=list)
    current: Current | None = None
    hide: int = 0
    multi: bool = False
    include_all: bool = False
    all_value: str = ""
    regex: str = ""
    datasource: str | None = None
    sort: int = 0
    refresh: int | None = None


def label(text: str) -> Option:
    """Set the label of the variable."""

    def apply(variable: TemplateVar) -> None:
        variable.label = text

    return apply


def hide_label() -> Option:
    """Keep the variable's label from being displayed."""

    def apply(variable: TemplateVar) -> None:
        variable.hide = 1

    return apply


def hide() -> Option:
    """Keep the variable from being displayed."""

    def apply(variable: TemplateVar) -> None:
        variable.hide = 2

    return apply


def multi() -> Option:
    """Allow several values to be selected."""

    def apply(variable: TemplateVar) -> None:
        variable.multi = True

    return apply


def include_all() -> Option:
    """Add an option selecting all values."""

    def apply(variable: TemplateVar) -> None:
        variable.include_all = True
        variable.options.append(VariableOption(text=ALL_TEXT, value=ALL_VALUE))

    return apply


def all_value(value: str) -> Option:
    """Set the value used when the "All" option is selected."""

    def apply(variable: TemplateVar) -> None:
        variable.all_value = value

    return apply


def regex(pattern: str) -> Option:
    """Filter the values returned by the query with a regex."""

    def apply(variable: TemplateVar) -> None:
        variable.regex = pattern

    return apply