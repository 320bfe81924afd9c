"""Opt-in structlog rendering for the ``utilkit`` logger.

Helpers only ever emit through ``logging.getLogger(__name__)``. An
application that wants those records rendered calls
:func:`configure_logging`, which installs one handler on the ``utilkit``
logger. The root logger and its handlers are never touched.

Two output modes:
- Human (default): console-rendered lines on stderr
- JSON (``log_json=True``): one JSON object per line on stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

from utilkit.config.settings import UtilkitSettings, get_settings

LOGGER_NAME = "utilkit"
HANDLER_NAME = "utilkit-structlog"


def _processor_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _build_handler(log_json: bool) -> logging.Handler:
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_processor_chain(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> logging.Logger:
    """Render ``utilkit`` records through structlog and return the package logger.

    Repeated calls replace the previously installed handler. Records stop
    propagating to ancestor loggers once the handler is installed, so they
    are not printed twice by the application's own handlers.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    structlog.configure(
        processors=[
            *_processor_chain(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    package_logger = logging.getLogger(LOGGER_NAME)
    for existing in [h for h in package_logger.handlers if h.get_name() == HANDLER_NAME]:
        package_logger.removeHandler(existing)
        existing.close()

    package_logger.addHandler(_build_handler(log_json))
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False
    return package_logger


def configure_from_settings(settings: UtilkitSettings | None = None) -> logging.Logger:
    """Apply the ``verbose``/``log_json`` flags of *settings* (default: cached settings)."""
    settings = settings or get_settings()
    return configure_logging(verbose=settings.verbose, log_json=settings.log_json)
