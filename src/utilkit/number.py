"""Numeric helpers: clamping, rounding, aggregation and formatting."""

from __future__ import annotations

import logging
import math
import operator
import sys
from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal, localcontext
from functools import reduce
from typing import Any

from babel.numbers import format_currency, format_decimal, format_percent

from utilkit.config.settings import resolve_locale
from utilkit.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

MAX_FRACTION_DIGITS = 100


def clamp(value: float, lo: float, hi: float) -> float:
    """Bound *value* to ``[lo, hi]``.

    Evaluated as ``min(max(value, lo), hi)``, so ``lo > hi`` yields *hi*.
    """
    return min(max(value, lo), hi)


def round_to(value: float, precision: int = 0) -> float:
    """Round to *precision* decimal digits, ties going toward +infinity.

    Examples:
        >>> round_to(1.005, 2)
        1.0
        >>> round_to(-2.5)
        -2.0

    When the scaled value cannot be represented as a finite float, *value*
    is returned unchanged.
    """
    if not math.isfinite(value) or precision > sys.float_info.max_10_exp:
        return value
    factor = 10.0**precision
    scaled = value * factor
    if factor == 0 or not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / factor


def sum_(values: Iterable[float]) -> float:
    """Plain left-to-right addition starting at 0 (no compensated summation)."""
    return reduce(operator.add, values, 0)


total = sum_


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean.

    Raises:
        InvalidArgumentError: If *values* is empty.
    """
    if len(values) == 0:
        msg = "Cannot compute mean of an empty array"
        logger.debug("mean called with no values")
        raise InvalidArgumentError(msg)
    return sum_(values) / len(values)


def to_percentage(value: float, digits: int = 2) -> str:
    """Format a ratio as a percentage string, e.g. ``0.1234 -> "12.34%"``.

    The scaled value is rounded half away from zero on its exact binary
    representation. Non-finite input renders as ``NaN%`` or ``Infinity%``.

    Raises:
        InvalidArgumentError: If *digits* is outside ``0..100``.
    """
    if not 0 <= digits <= MAX_FRACTION_DIGITS:
        msg = f"digits must be between 0 and {MAX_FRACTION_DIGITS}, got {digits}"
        raise InvalidArgumentError(msg)
    scaled = value * 100
    if math.isnan(scaled):
        return "NaN%"
    if math.isinf(scaled):
        return "-Infinity%" if scaled < 0 else "Infinity%"
    if scaled == 0:
        # Negative zero renders unsigned.
        scaled = 0.0
    with localcontext() as ctx:
        ctx.prec = 400 + digits
        quantized = Decimal(scaled).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    return f"{quantized:f}%"


def format_number(
    value: float,
    locale: str | None = None,
    *,
    style: str = "decimal",
    currency: str | None = None,
    **options: Any,
) -> str:
    """Format *value* with locale-aware Babel number formatting.

    Args:
        value: Number to format.
        locale: Locale identifier (``"de_DE"`` or ``"de-DE"``). Defaults to
            the configured ``UTILKIT_LOCALE``.
        style: ``"decimal"``, ``"percent"`` or ``"currency"``.
        currency: ISO 4217 code, required when ``style="currency"``.
        **options: Passed through to the Babel formatter (``format``,
            ``decimal_quantization``, ...).

    Raises:
        InvalidArgumentError: On an unknown style or a missing currency.
    """
    resolved = resolve_locale(locale)
    if style == "decimal":
        return format_decimal(value, locale=resolved, **options)
    if style == "percent":
        return format_percent(value, locale=resolved, **options)
    if style == "currency":
        if currency is None:
            msg = "currency is required when style='currency'"
            raise InvalidArgumentError(msg)
        return format_currency(value, currency, locale=resolved, **options)
    msg = f"Unknown number style: {style!r}"
    raise InvalidArgumentError(msg)
