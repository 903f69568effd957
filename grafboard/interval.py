"""Interval templated variables."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from datetime import timedelta

from grafboard.variable import Current, TemplateVar, VariableOption

IntervalOption = Callable[["Interval"], None]

_DURATION_RE = re.compile(
    r"(?:([0-9]+)y)?(?:([0-9]+)w)?(?:([0-9]+)d)?(?:([0-9]+)h)?"
    r"(?:([0-9]+)m)?(?:([0-9]+)s)?(?:([0-9]+)ms)?"
)

_UNIT_MILLISECONDS = (
    365 * 24 * 3600 * 1000,
    7 * 24 * 3600 * 1000,
    24 * 3600 * 1000,
    3600 * 1000,
    60 * 1000,
    1000,
    1,
)


class Interval(TemplateVar):
    """An "interval" templated variable."""

    def __init__(self, name: str, *args: IntervalOption) -> None:
        super().__init__(name=name, type="interval", label=name)
        for option in args:
            option(self)


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as "1h30m" or "30d"; raise ValueError if invalid."""
    if text == "0":
        return timedelta(0)
    if text == "":
        raise ValueError("empty duration string")
    match = _DURATION_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"not a valid duration string: {text!r}")
    total = sum(
        int(amount) * factor
        for amount, factor in zip(match.groups(), _UNIT_MILLISECONDS)
        if amount is not None
    )
    try:
        return timedelta(milliseconds=total)
    except OverflowError as exc:
        raise ValueError(f"duration out of range: {text!r}") from exc


def _duration_or_zero(text: str) -> timedelta:
    try:
        return parse_duration(text)
    except ValueError:
        return timedelta(0)


def values(values: Iterable[str]) -> IntervalOption:
    """Set the possible values, ordered by increasing duration."""
    ordered = sorted(values, key=_duration_or_zero)

    def apply(interval: Interval) -> None:
        interval.options.extend(VariableOption(text=v, value=v) for v in ordered)
        interval.query = ",".join(ordered)

    return apply


def default(value: str) -> IntervalOption:
    """Set the default value of the variable."""

    def apply(interval: Interval) -> None:
        interval.current = Current(text=[value], value=value)

    return apply