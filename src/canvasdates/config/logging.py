"""structlog configuration for canvasdates.

Log records always go to stderr so stdout carries only command output.
``--log-json`` switches the console renderer for one JSON object per line.
Modules log through ``logging.getLogger(__name__)``; structlog's
ProcessorFormatter renders those stdlib records.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "canvasdates"


def _shared_processors() -> list[structlog.types.Processor]:
    """Processors run for structlog and stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _final_processors(log_json: bool) -> list[structlog.types.Processor]:
    if log_json:
        # JSON has no traceback layout of its own.
        return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route all logging through one structlog-formatted stderr handler.

    Args:
        verbose: DEBUG for the ``canvasdates`` loggers; WARNING otherwise.
        log_json: Emit JSON lines instead of console output.
    """
    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_final_processors(log_json),
            ],
        )
    )

    # Third-party loggers stay at WARNING through the root logger.
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
