"""Core predicates, type guards, combinators and the Result contract.

Everything else in the package builds on :func:`is_defined`. The guards
answer "does this runtime value have the named shape?" and never raise.
"""

from __future__ import annotations

import enum
import inspect
import logging
import math
import re
from collections.abc import Awaitable, Callable, Sized
from datetime import date
from typing import Any, Generic, TypeGuard, TypeVar

from pydantic import BaseModel

from utilkit.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")

_SCALARS = (str, bytes, bytearray, int, float, complex)

# --- Defined-ness ---


def is_defined(value: T | None) -> TypeGuard[T]:
    """True unless *value* is the missing sentinel (``None``)."""
    return value is not None


def assert_defined(value: T | None, message: str | None = None) -> T:
    """Return *value* unchanged, or raise if it is missing.

    Raises:
        InvalidArgumentError: If *value* is ``None``.
    """
    if not is_defined(value):
        msg = message if message is not None else "Value is undefined or null"
        logger.debug("assert_defined failed: %s", msg)
        raise InvalidArgumentError(msg)
    return value


# --- Combinators ---


def identity(value: T) -> T:
    return value


def noop(*args: Any, **kwargs: Any) -> None:
    return None


def not_(predicate: Callable[..., bool]) -> Callable[..., bool]:
    """Wrap *predicate* so that it returns the opposite answer.

    All positional and keyword arguments are forwarded unchanged.
    """

    def negated(*args: Any, **kwargs: Any) -> bool:
        return not predicate(*args, **kwargs)

    return negated


# --- Type guards ---


def is_string(value: Any) -> TypeGuard[str]:
    return isinstance(value, str)


def is_number(value: Any) -> TypeGuard[int | float]:
    """Ints and floats; ``bool`` is excluded even though it subclasses ``int``."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_boolean(value: Any) -> TypeGuard[bool]:
    return isinstance(value, bool)


def is_symbol(value: Any) -> TypeGuard[enum.Enum]:
    """Enum members are the closest Python analogue of unique named markers."""
    return isinstance(value, enum.Enum)


def is_function(value: Any) -> TypeGuard[Callable[..., Any]]:
    return callable(value)


def is_date(value: Any) -> TypeGuard[date]:
    return isinstance(value, date)


def is_regexp(value: Any) -> TypeGuard[re.Pattern[Any]]:
    return isinstance(value, re.Pattern)


def is_promise(value: Any) -> TypeGuard[Awaitable[Any]]:
    return inspect.isawaitable(value)


def is_object(value: Any) -> bool:
    """True for any non-None value that is neither a scalar nor callable.

    Lists, dicts, dates, compiled patterns and class instances all count.
    """
    if value is None or isinstance(value, _SCALARS):
        return False
    return not callable(value)


def is_array(value: Any) -> TypeGuard[list[Any]]:
    return isinstance(value, list)


def is_safe_number(value: Any) -> TypeGuard[int | float]:
    """A number that is neither infinite nor NaN."""
    return is_number(value) and math.isfinite(value)


def is_empty_object(value: Any) -> bool:
    """An object without own keys: an empty container or an attribute-less instance."""
    if not is_object(value):
        return False
    if isinstance(value, Sized):
        return len(value) == 0
    return not getattr(value, "__dict__", None)


def is_plain_object(value: Any) -> TypeGuard[dict[Any, Any]]:
    """A bare ``dict``; subclasses and class instances are rejected."""
    return type(value) is dict


# --- Result ---


class Result(BaseModel, Generic[T, E]):
    """Tagged union of a success carrying ``value`` or a failure carrying ``error``.

    Build instances through :func:`ok` and :func:`err` rather than directly.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    ok: bool
    value: T | None = None
    error: E | None = None


def ok(value: T) -> Result[T, Any]:
    return Result(ok=True, value=value)


def err(error: E) -> Result[Any, E]:
    return Result(ok=False, error=error)
