"""Library settings — environment variables and explicit kwargs in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — passed by the embedding application
  2. Env vars     — ``UTILKIT_*`` prefix
  3. Code defaults

Only the formatting and clock helpers consult these settings; every other
helper is a pure function of its arguments.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from babel import Locale, UnknownLocaleError
from pydantic import field_validator
from pydantic_settings import BaseSettings


def _normalize_locale(value: str) -> str:
    return value.strip().replace("-", "_")


class UtilkitSettings(BaseSettings):
    """Unified settings for utilkit.

    Attributes:
        locale: Default locale for number and date formatting.
        timezone: IANA zone used by :func:`utilkit.date.now`; naive local
            time when unset.
        verbose: Enable DEBUG output from the ``utilkit`` logger.
        log_json: Render log lines as JSON instead of console text.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "UTILKIT_",
    }

    locale: str = "en_US"
    timezone: str | None = None
    verbose: bool = False
    log_json: bool = False

    @field_validator("locale")
    @classmethod
    def _validate_locale(cls, value: str) -> str:
        normalized = _normalize_locale(value)
        try:
            Locale.parse(normalized)
        except (ValueError, UnknownLocaleError) as exc:
            msg = f"Unknown locale: {value!r}"
            raise ValueError(msg) from exc
        return normalized

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            msg = f"Unknown timezone: {value!r}"
            raise ValueError(msg) from exc
        return value

    @property
    def tzinfo(self) -> ZoneInfo | None:
        return ZoneInfo(self.timezone) if self.timezone else None

    @classmethod
    def from_kwargs(cls, **kwargs: Any) -> UtilkitSettings:
        """Build settings from explicit values, dropping ``None`` so env vars still apply."""
        return cls(**{key: value for key, value in kwargs.items() if value is not None})


@lru_cache(maxsize=1)
def get_settings() -> UtilkitSettings:
    """Process-wide settings, read from the environment on first use."""
    return UtilkitSettings()


def reset_settings() -> None:
    """Forget cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()


def resolve_locale(locale: str | None) -> str:
    """Explicit *locale* in Babel form, or the configured default."""
    if locale is None:
        return get_settings().locale
    return _normalize_locale(locale)
