"""Shared pytest fixtures for utilkit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import datetime

import pytest

from utilkit.config.settings import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Isolate every test from ambient ``UTILKIT_*`` variables and cached settings."""
    for name in ("UTILKIT_LOCALE", "UTILKIT_TIMEZONE", "UTILKIT_VERBOSE", "UTILKIT_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def restore_logging() -> Generator[None]:
    """Restore root and ``utilkit`` logger state after a test reconfigures logging."""
    root = logging.getLogger()
    root_handlers = root.handlers[:]
    root_level = root.level
    lib = logging.getLogger("utilkit")
    lib_handlers = lib.handlers[:]
    lib_level = lib.level
    lib_propagate = lib.propagate
    yield
    root.handlers = root_handlers
    root.setLevel(root_level)
    lib.handlers = lib_handlers
    lib.setLevel(lib_level)
    lib.propagate = lib_propagate


@pytest.fixture
def moment() -> datetime:
    """A Wednesday afternoon with sub-second precision."""
    return datetime(2024, 3, 13, 15, 42, 17, 123456)
