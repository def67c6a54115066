"""structlog output for the ``quasigroup`` logger tree.

Events go through stdlib logging, so the ``quasigroup`` logger's level
and handlers decide what is shown. Until :func:`configure_logging` is
called the package only carries a NullHandler and stays silent below the
application's own thresholds.

INVARIANT: the root logger and ``structlog.configure`` are never touched;
the application owns both.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "quasigroup"
_HANDLER_NAME = "quasigroup.stderr"

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the stdlib logger *name*.

    The processor chain is local to the returned logger; the global
    structlog configuration is not consulted.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *_PRE_CHAIN,
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> logging.Handler:
    """Route ``quasigroup`` events to stderr.

    Replaces any handler a previous call installed, and stops propagation
    so records are not printed twice by application handlers.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.

    Returns:
        The installed handler.
    """
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_PRE_CHAIN,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False
    return handler
