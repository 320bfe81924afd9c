"""Date helpers: unit-based shifting, diffing, truncation and formatting.

Instants are :class:`datetime.datetime` values, naive or aware. Arithmetic
is wall-clock arithmetic on the value as given; no timezone conversion
happens. Plain :class:`datetime.date` inputs are treated as midnight.

Month and year shifts keep the day-of-month and let it overflow into the
following month, so January 31 plus one month is March 3 (or March 2 in a
leap year) and February 29 plus one year is March 1.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, time, timedelta
from datetime import date as date_type
from typing import Any

from babel import dates as babel_dates

from utilkit.config.settings import get_settings, resolve_locale
from utilkit.errors import InvalidArgumentError, UnsupportedUnitError
from utilkit.types import DateUnit, is_date_unit

logger = logging.getLogger(__name__)

ONE_MILLISECOND = timedelta(milliseconds=1)

MILLISECONDS_IN: dict[DateUnit, int] = {
    DateUnit.MILLISECOND: 1,
    DateUnit.SECOND: 1000,
    DateUnit.MINUTE: 1000 * 60,
    DateUnit.HOUR: 1000 * 60 * 60,
    DateUnit.DAY: 1000 * 60 * 60 * 24,
    DateUnit.WEEK: 1000 * 60 * 60 * 24 * 7,
}

MONTHS_IN_YEAR = 12

_CLEAR_TIME: dict[str, int] = {"hour": 0, "minute": 0, "second": 0, "microsecond": 0}

# Fields reset by start_of for units with a fixed truncation.
_TRUNCATE: dict[DateUnit, dict[str, int]] = {
    DateUnit.SECOND: {"microsecond": 0},
    DateUnit.MINUTE: {"second": 0, "microsecond": 0},
    DateUnit.HOUR: {"minute": 0, "second": 0, "microsecond": 0},
    DateUnit.DAY: _CLEAR_TIME,
    DateUnit.MONTH: {"day": 1, **_CLEAR_TIME},
    DateUnit.YEAR: {"month": 1, "day": 1, **_CLEAR_TIME},
}


def _unit(unit: DateUnit | str) -> DateUnit:
    if isinstance(unit, DateUnit):
        return unit
    if is_date_unit(unit):
        return DateUnit(unit)
    msg = f"Unsupported DateUnit: {unit!r}"
    logger.debug("rejected date unit %r", unit)
    raise UnsupportedUnitError(msg)


def _unreachable(unit: Any) -> Any:
    msg = f"Unsupported DateUnit: {unit!r}"
    raise UnsupportedUnitError(msg)


def _as_datetime(value: date_type) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time())


def _add_months(value: datetime, months: float) -> datetime:
    total = value.year * MONTHS_IN_YEAR + (value.month - 1) + int(months)
    year, month_index = divmod(total, MONTHS_IN_YEAR)
    first = value.replace(year=year, month=month_index + 1, day=1)
    return first + timedelta(days=value.day - 1)


def _shift(value: datetime, amount: float, unit: DateUnit) -> datetime:
    if unit in MILLISECONDS_IN:
        return value + timedelta(milliseconds=amount * MILLISECONDS_IN[unit])
    if unit is DateUnit.MONTH:
        return _add_months(value, amount)
    if unit is DateUnit.YEAR:
        return _add_months(value, int(amount) * MONTHS_IN_YEAR)
    return _unreachable(unit)


def _milliseconds_between(start: datetime, end: datetime) -> float:
    return (end - start) / ONE_MILLISECOND


def _diff_in_months(start: datetime, end: datetime) -> float:
    if start == end:
        return 0.0

    sign = 1 if end > start else -1
    months = (end.year - start.year) * MONTHS_IN_YEAR + (end.month - start.month)
    anchor = _add_months(start, months)
    if (sign > 0 and end < anchor) or (sign < 0 and end > anchor):
        months -= sign

    anchor = _add_months(start, months)
    following = _add_months(anchor, sign)
    interval = _milliseconds_between(anchor, following)
    if interval == 0:
        return float(months)

    return months + (_milliseconds_between(anchor, end) / interval) * sign


def now() -> datetime:
    """Current instant in the configured timezone, or naive local time."""
    return datetime.now(get_settings().tzinfo)


def modify_date(value: float, unit: DateUnit | str, date: date_type | None = None) -> datetime:
    """Return *date* (default: :func:`now`) shifted by *value* units.

    Fixed-length units accept fractional values. Month and year shifts
    truncate *value* toward zero and follow calendar overflow.

    Raises:
        UnsupportedUnitError: If *unit* is not a :class:`DateUnit`.
    """
    resolved = _unit(unit)
    base = now() if date is None else _as_datetime(date)
    return _shift(base, value, resolved)


def date_diff(start: date_type, end: date_type, unit: DateUnit | str) -> float:
    """Signed distance from *start* to *end* expressed in *unit*.

    Fixed-length units divide the exact millisecond difference. ``month``
    counts whole calendar months and adds the elapsed fraction of the
    month in progress; ``year`` is the month difference divided by 12.
    """
    resolved = _unit(unit)
    start, end = _as_datetime(start), _as_datetime(end)

    if resolved in MILLISECONDS_IN:
        return _milliseconds_between(start, end) / MILLISECONDS_IN[resolved]
    if resolved is DateUnit.MONTH:
        return _diff_in_months(start, end)
    if resolved is DateUnit.YEAR:
        return _diff_in_months(start, end) / MONTHS_IN_YEAR
    return _unreachable(resolved)


def start_of(date: date_type, unit: DateUnit | str) -> datetime:
    """Truncate *date* to the beginning of *unit*.

    ``millisecond`` drops sub-millisecond precision. Weeks start on Sunday.
    """
    resolved = _unit(unit)
    value = _as_datetime(date)

    if resolved is DateUnit.MILLISECOND:
        return value.replace(microsecond=value.microsecond // 1000 * 1000)
    if resolved is DateUnit.WEEK:
        day_start = start_of(value, DateUnit.DAY)
        days_since_sunday = (day_start.weekday() + 1) % 7
        return _shift(day_start, -days_since_sunday, DateUnit.DAY)
    if resolved in _TRUNCATE:
        return value.replace(**_TRUNCATE[resolved])
    return _unreachable(resolved)


def end_of(date: date_type, unit: DateUnit | str) -> datetime:
    """Last millisecond of the *unit* containing *date*."""
    resolved = _unit(unit)
    if resolved is DateUnit.MILLISECOND:
        return _as_datetime(date)

    next_start = _shift(start_of(date, resolved), 1, resolved)
    return next_start - ONE_MILLISECOND


def is_same(a: date_type, b: date_type, unit: DateUnit | str) -> bool:
    """Whether *a* and *b* fall in the same *unit*."""
    return start_of(a, unit) == start_of(b, unit)


def format_date(
    date: date_type,
    locale: str | None = None,
    format: str = "medium",
    **options: Any,
) -> str:
    """Locale-aware rendering through Babel.

    Args:
        date: A datetime (date and time rendered) or a plain date.
        locale: Locale identifier; defaults to ``UTILKIT_LOCALE``.
        format: ``"short"``, ``"medium"``, ``"long"``, ``"full"`` or a
            CLDR pattern such as ``"yyyy-MM-dd HH:mm"``.
        **options: Passed through to Babel for datetime values. ``tzinfo``
            defaults to the value's own zone, so naive and aware values
            render as given.

    Raises:
        InvalidArgumentError: If options are given with a plain date.
    """
    resolved = resolve_locale(locale)
    if isinstance(date, datetime):
        options.setdefault("tzinfo", date.tzinfo or UTC)
        return babel_dates.format_datetime(date, format=format, locale=resolved, **options)
    if options:
        msg = f"Options {sorted(options)} only apply to datetime values, got a plain date"
        raise InvalidArgumentError(msg)
    return babel_dates.format_date(date, format=format, locale=resolved)
