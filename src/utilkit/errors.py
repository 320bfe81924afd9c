"""Exception taxonomy.

Every helper raises synchronously to its caller; nothing here is caught
or retried inside the library.
"""

from __future__ import annotations


class UtilkitError(Exception):
    """Base class for all errors raised by utilkit helpers."""


class InvalidArgumentError(UtilkitError, ValueError):
    """An argument is outside the domain the helper accepts."""


class UnsupportedEnvironmentError(UtilkitError, RuntimeError):
    """A codec or primitive the helper relies on is not available."""


class UnsupportedUnitError(UtilkitError, ValueError):
    """A date unit outside :class:`~utilkit.types.DateUnit` was given."""
