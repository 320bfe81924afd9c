"""Shared type aliases and the closed set of date units.

``Optional`` mirrors a value that may be missing; Python has a single
missing sentinel (``None``), so there is no separate "null" case.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Annotated, Any, TypeAlias, TypeVar

T = TypeVar("T")

Optional: TypeAlias = T | None
Complete: TypeAlias = Annotated[T, "defined"]
AnyFunction: TypeAlias = Callable[..., T]


class DateUnit(StrEnum):
    """Granularities used for shifting, diffing and truncating dates."""

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


def is_date_unit(value: Any) -> bool:
    """Check whether *value* names a member of :class:`DateUnit`."""
    return isinstance(value, str) and value in DateUnit
