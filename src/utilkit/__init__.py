"""utilkit — small pure helpers for sequences, mappings, numbers, strings and dates.

Import what you need from the top level::

    from utilkit import chunk, snake_case, start_of
"""

from utilkit.array import (
    chunk,
    difference,
    group_by,
    intersection,
    is_empty,
    partition,
    unique,
    without,
    without_all,
    zip_,
    zip_pairs,
)
from utilkit.date import (
    date_diff,
    end_of,
    format_date,
    is_same,
    modify_date,
    now,
    start_of,
)
from utilkit.errors import (
    InvalidArgumentError,
    UnsupportedEnvironmentError,
    UnsupportedUnitError,
    UtilkitError,
)
from utilkit.number import (
    clamp,
    format_number,
    mean,
    round_to,
    sum_,
    to_percentage,
    total,
)
from utilkit.objects import clone, entries_to_object, is_shallow_equal, omit, pick
from utilkit.std import (
    Result,
    assert_defined,
    err,
    identity,
    is_array,
    is_boolean,
    is_date,
    is_defined,
    is_empty_object,
    is_function,
    is_number,
    is_object,
    is_plain_object,
    is_promise,
    is_regexp,
    is_safe_number,
    is_string,
    is_symbol,
    noop,
    not_,
    ok,
)
from utilkit.string import (
    base64_decode,
    base64_encode,
    camel_case,
    capitalize,
    is_blank,
    is_not_blank,
    kebab_case,
    snake_case,
    trim,
)
from utilkit.types import AnyFunction, Complete, DateUnit, Optional

__all__ = [
    "AnyFunction",
    "Complete",
    "DateUnit",
    "InvalidArgumentError",
    "Optional",
    "Result",
    "UnsupportedEnvironmentError",
    "UnsupportedUnitError",
    "UtilkitError",
    "assert_defined",
    "base64_decode",
    "base64_encode",
    "camel_case",
    "capitalize",
    "chunk",
    "clamp",
    "clone",
    "date_diff",
    "difference",
    "end_of",
    "entries_to_object",
    "err",
    "format_date",
    "format_number",
    "group_by",
    "identity",
    "intersection",
    "is_array",
    "is_blank",
    "is_boolean",
    "is_date",
    "is_defined",
    "is_empty",
    "is_empty_object",
    "is_function",
    "is_not_blank",
    "is_number",
    "is_object",
    "is_plain_object",
    "is_promise",
    "is_regexp",
    "is_safe_number",
    "is_same",
    "is_shallow_equal",
    "is_string",
    "is_symbol",
    "kebab_case",
    "mean",
    "modify_date",
    "noop",
    "not_",
    "now",
    "ok",
    "omit",
    "partition",
    "pick",
    "round_to",
    "snake_case",
    "start_of",
    "sum_",
    "to_percentage",
    "total",
    "trim",
    "unique",
    "without",
    "without_all",
    "zip_",
    "zip_pairs",
]
