"""structlog configuration for digitlist.

Both structlog loggers (span events) and stdlib loggers (service debug
lines) end up in a single stderr handler, rendered for a terminal or,
with ``--log-json``, as one JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

PACKAGE_LOGGER = "digitlist"


def _pre_chain() -> list[Processor]:
    """Processors applied to every event, whichever API emitted it."""
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install the stderr handler and set the package log level.

    Safe to call repeatedly; the root logger always ends up with exactly
    one handler.  ``digitlist.*`` logs at DEBUG when *verbose*, other
    libraries stay at WARNING.
    """
    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    renderer: Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
