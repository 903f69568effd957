"""Datasource templated variables."""

from __future__ import annotations

from collections.abc import Callable

from grafboard.variable import TemplateVar

DatasourceOption = Callable[["Datasource"], None]

_DASHBOARD_LOAD = 1


class Datasource(TemplateVar):
    """A "datasource" templated variable, refreshed on dashboard load."""

    def __init__(self, name: str, *args: DatasourceOption) -> None:
        super().__init__(
            name=name, type="datasource", label=name, refresh=_DASHBOARD_LOAD
        )
        for option in args:
            option(self)


def datasource_type(name: str) -> DatasourceOption:
    """Set the datasource type, for instance "prometheus"."""

    def apply(variable: Datasource) -> None:
        variable.query = name

    return apply