"""The "interval" templated variable."""

from __future__ import annotations

import re
from datetime import timedelta
from typing import Any, Iterable

from grafboard.variable import constant as _constant
from grafboard.variable.constant import Option, _Variable
from grafboard.variable.template import Current

__all__ = [
    "Interval",
    "parse_duration",
    "values",
    "default",
    "label",
    "hide_label",
    "hide",
]

_DURATION_RE = re.compile(
    r"^(?:(\d+)y)?(?:(\d+)w)?(?:(\d+)d)?(?:(\d+)h)?"
    r"(?:(\d+)m)?(?:(\d+)s)?(?:(\d+)ms)?$"
)
_UNIT_MS = (
    365 * 24 * 3600 * 1000,
    7 * 24 * 3600 * 1000,
    24 * 3600 * 1000,
    3600 * 1000,
    60 * 1000,
    1000,
    1,
)
_MAX_MS = (2**63 - 1) // 1_000_000


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as "1h30m" (units y, w, d, h, m, s, ms)."""
    if text == "0":
        return timedelta(0)
    if text == "":
        raise ValueError("empty duration string")
    match = _DURATION_RE.match(text)
    if match is None:
        raise ValueError(f"not a valid duration string: {text!r}")
    total = 0
    for amount, unit in zip(match.groups(), _UNIT_MS):
        if amount is None:
            continue
        total += int(amount) * unit
        if total > _MAX_MS:
            raise ValueError("duration out of range")
    return timedelta(milliseconds=total)


def _sort_key(value: str) -> timedelta:
    try:
        return parse_duration(value)
    except ValueError:
        return timedelta(0)


class Interval(_Variable):
    """An "interval" templated variable."""

    _type = "interval"


def values(values: Iterable[str]) -> Option:
    """Set the possible values, ordered by duration."""

    def apply(interval: Any) -> None:
        ordered = sorted(values, key=_sort_key)
        for value in ordered:
            interval.builder.add_option(value, value)
        interval.builder.query = ",".join(ordered)

    return apply


def default(value: str) -> Option:
    """Set the default value of the variable."""

    def apply(interval: Any) -> None:
        interval.builder.current = Current(text=[value], value=value)

    return apply


def label(label: str) -> Option:
    """Set the label of the variable."""
    return _constant.label(label)


def hide_label() -> Option:
    """Keep the label of the variable from being displayed."""
    return _constant.hide_label()


def hide() -> Option:
    """Keep the variable from being displayed."""
    return _constant.hide()