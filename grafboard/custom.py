"""Custom templated variables."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from grafboard.variable import Current, TemplateVar, VariableOption

CustomOption = Callable[["Custom"], None]


class Custom(TemplateVar):
    """A "custom" templated variable."""

    def __init__(self, name: str, *args: CustomOption) -> None:
        super().__init__(name=name, type="custom", label=name)
        self._values: dict[str, str] = {}
        for option in args:
            option(self)


def values(mapping: Mapping[str, str]) -> CustomOption:
    """Set the possible values, as a label to value mapping."""

    def apply(custom: Custom) -> None:
        custom.options.extend(
            VariableOption(text=text, value=value) for text, value in mapping.items()
        )
        custom._values = dict(mapping)
        custom.query = ",".join(sorted(mapping.values()))

    return apply


def default(value: str) -> CustomOption:
    """Set the default value of the variable."""

    def apply(custom: Custom) -> None:
        text = next(
            (text for text, val in custom._values.items() if val == value), value
        )
        custom.current = Current(text=[text], value=value)

    return apply