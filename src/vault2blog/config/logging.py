"""structlog setup for vault2blog.

vault2blog only logs through structlog, so there is no stdlib handler
wiring: events are filtered by level in the bound logger itself and
printed to stderr.  Modules create their logger with
``structlog.get_logger(logger_name=__name__)`` and bind the path they are
working on (``config_path`` in the store, ``note_path`` in notes).
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog output on stderr.

    Args:
        verbose: Emit DEBUG events. When False, only WARNING+.
        log_json: One JSON object per line instead of the console renderer.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    if log_json:
        renderer: structlog.typing.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
