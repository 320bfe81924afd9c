"""Sequence helpers: set-like operations, chunking, grouping and zipping.

Inputs may be any sequence; results are always new lists. Membership and
deduplication use value equality (``==``), so unhashable items work too.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Sequence
from typing import TypeVar

from utilkit.errors import InvalidArgumentError
from utilkit.std import is_defined

logger = logging.getLogger(__name__)

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")
K = TypeVar("K", bound=Hashable)


def unique(array: Sequence[T]) -> list[T]:
    """First occurrence of each item, in insertion order.

    Examples:
        >>> unique([1, 2, 2, 3, 1])
        [1, 2, 3]
    """
    seen: set[T] = set()
    result: list[T] = []
    for item in array:
        try:
            hash(item)
        except TypeError:
            if item not in result:
                result.append(item)
            continue
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def is_empty(array: Sequence[T] | None) -> bool:
    """True only for a present, zero-length sequence; ``None`` gives False."""
    return is_defined(array) and len(array) == 0


def without(array: Sequence[T], value: T) -> list[T]:
    return [item for item in array if item != value]


def without_all(array: Sequence[T], values: Sequence[T]) -> list[T]:
    return [item for item in array if item not in values]


def intersection(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """Items of *a* also found in *b*, keeping *a*'s order and repeats."""
    return [item for item in a if item in b]


def difference(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """Items of *a* not found in *b*, keeping *a*'s order and repeats."""
    return [item for item in a if item not in b]


def chunk(array: Sequence[T], size: int) -> list[list[T]]:
    """Split *array* into consecutive slices of *size*; the last may be shorter.

    Raises:
        InvalidArgumentError: If *size* is not greater than zero.
    """
    if size <= 0:
        msg = "chunk size must be greater than 0"
        logger.debug("chunk rejected size=%r", size)
        raise InvalidArgumentError(msg)
    return [list(array[i : i + size]) for i in range(0, len(array), size)]


def group_by(array: Sequence[T], key_fn: Callable[[T], K]) -> dict[K, list[T]]:
    """Group items under the key produced by *key_fn*.

    Groups appear in first-seen order and keep input order internally.
    """
    groups: dict[K, list[T]] = {}
    for item in array:
        groups.setdefault(key_fn(item), []).append(item)
    return groups


def partition(array: Sequence[T], predicate: Callable[[T], object]) -> tuple[list[T], list[T]]:
    """Return ``(matching, rest)`` according to *predicate* truthiness."""
    truthy: list[T] = []
    falsy: list[T] = []
    for item in array:
        if predicate(item):
            truthy.append(item)
        else:
            falsy.append(item)
    return truthy, falsy


def zip_(a: Sequence[A], b: Sequence[B]) -> list[tuple[A, B]]:
    """Pair items at matching indexes up to the shorter length."""
    length = min(len(a), len(b))
    return [(a[i], b[i]) for i in range(length)]


zip_pairs = zip_
