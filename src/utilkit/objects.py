"""Mapping helpers: clone with overrides, shallow equality, pick/omit."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from enum import Enum
from typing import Any, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def clone(obj: Mapping[K, V], overrides: Mapping[K, V] | None = None) -> dict[K, V]:
    """Shallow copy of *obj* with the keys of *overrides* applied on top."""
    return {**obj, **(overrides or {})}


# Values compared by ``==``; everything else must be the same object.
_SCALARS = (str, bytes, int, float, complex, Enum)


def _strict_equal(a: Any, b: Any) -> bool:
    if a is b:
        return True
    if isinstance(a, _SCALARS) and isinstance(b, _SCALARS):
        return bool(a == b)
    return False


def is_shallow_equal(a: Mapping[Any, Any], b: Mapping[Any, Any]) -> bool:
    """Same key set and, per key, the same value reference or equal scalar."""
    if len(a) != len(b):
        return False
    return all(key in b and _strict_equal(a[key], b[key]) for key in a)


def pick(obj: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """New mapping with only the listed keys that *obj* actually has."""
    return {key: obj[key] for key in keys if key in obj}


def omit(obj: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """New mapping without the listed keys."""
    excluded = set(keys)
    return {key: value for key, value in obj.items() if key not in excluded}


def entries_to_object(entries: Iterable[tuple[K, V]]) -> dict[K, V]:
    """Build a mapping from key/value pairs; later duplicates win."""
    result: dict[K, V] = {}
    for key, value in entries:
        result[key] = value
    return result
