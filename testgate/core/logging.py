"""Structured logging via structlog.

Configured once by the CLI before detection starts. Output goes to stderr
so the report on stdout stays clean when piped.

Renderer selection:
  json_logs=False: `ConsoleRenderer` for interactive use.
  json_logs=True:  `JSONRenderer` for machine-parseable logs in CI.

Detector modules log through `logging.getLogger(__name__)`; the stdlib
handler installed here routes those records through the same renderer.
"""

from __future__ import annotations

import logging
import sys

import structlog

HANDLER_NAME = "testgate"


def configure_logging(level: str = "WARNING", json_logs: bool = False) -> None:
    """Configure structlog and the stdlib bridge.

    Safe to call more than once; the last call wins.
    """
    numeric_level = logging.getLevelNamesMapping()[level.upper()]

    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors
        + [structlog.processors.format_exc_info, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors + [structlog.stdlib.add_logger_name],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(numeric_level)
