"""Query templated variables."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

from grafboard.variable import ALL_TEXT, ALL_VALUE, Current, TemplateVar

QueryOption = Callable[["Query"], None]


class SortOrder(IntEnum):
    """Ordering applied to the values returned by a query."""

    NONE = 0
    ALPHABETICAL_ASC = 1
    ALPHABETICAL_DESC = 2
    NUMERICAL_ASC = 3
    NUMERICAL_DESC = 4
    ALPHABETICAL_NO_CASE_ASC = 5
    ALPHABETICAL_NO_CASE_DESC = 6


class RefreshInterval(IntEnum):
    """When the results of a query are refreshed."""

    NEVER = 0
    DASHBOARD_LOAD = 1
    TIME_CHANGE = 2


class Query(TemplateVar):
    """A "query" templated variable, refreshed on dashboard load by default."""

    def __init__(self, name: str, *args: QueryOption) -> None:
        super().__init__(name=name, type="query", label=name)
        for option in (refresh(RefreshInterval.DASHBOARD_LOAD), *args):
            option(self)


def request(text: str) -> QueryOption:
    """Set the query to execute."""

    def apply(query: Query) -> None:
        query.query = text

    return apply


def sort(order: SortOrder) -> QueryOption:
    """Set the order in which the values are sorted."""

    def apply(query: Query) -> None:
        query.sort = int(order)

    return apply


def refresh(interval: RefreshInterval) -> QueryOption:
    """Set when the values are refreshed."""

    def apply(query: Query) -> None:
        query.refresh = int(interval)

    return apply


def default_all() -> QueryOption:
    """Select all values by default."""

    def apply(query: Query) -> None:
        query.current = Current(text=[ALL_TEXT], value=ALL_VALUE)

    return apply