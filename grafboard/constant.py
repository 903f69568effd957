"""Constant templated variables."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from grafboard.variable import Current, TemplateVar, VariableOption

ConstantOption = Callable[["Constant"], None]


class Constant(TemplateVar):
    """A "constant" templated variable."""

    def __init__(self, name: str, *args: ConstantOption) -> None:
        super().__init__(name=name, type="constant", label=name)
        self._values: dict[str, str] = {}
        for option in args:
            option(self)


def values(mapping: Mapping[str, str]) -> ConstantOption:
    """Set the possible values, as a label to value mapping."""

    def apply(constant: Constant) -> None:
        constant.options.extend(
            VariableOption(text=text, value=value) for text, value in mapping.items()
        )
        constant._values = dict(mapping)
        constant.query = ",".join(sorted(mapping.values()))

    return apply


def default(value: str) -> ConstantOption:
    """Set the default value of the variable."""

    def apply(constant: Constant) -> None:
        text = next(
            (text for text, val in constant._values.items() if val == value), value
        )
        constant.current = Current(text=[text], value=value)

    return apply