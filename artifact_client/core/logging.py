"""Structured logging via structlog.

Library modules log through `logging.getLogger(__name__)` and never touch
handlers. `configure_structlog()` is opt-in (see `create_client`): it
attaches one stdout handler to the package and httpx loggers whose
`structlog.stdlib.ProcessorFormatter` renders every stdlib record, and
points structlog's own loggers at the same handler.

Renderer selection:
  debug=True:  `ConsoleRenderer` with colours for local development.
  debug=False: `JSONRenderer`, one object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Loggers that receive the rendering handler.
LOGGER_NAMES = ("artifact_client", "httpx")


class _RenderingHandler(logging.StreamHandler):
    """Marker type so reconfiguration replaces the handler instead of stacking."""


def configure_structlog(debug: bool = False) -> None:
    """Configure structlog and the package loggers.

    Calling multiple times is safe; the last call wins.
    """
    level = logging.DEBUG if debug else logging.INFO
    shared_processors: list = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    render_chain: list = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if debug:
        render_chain.append(structlog.dev.ConsoleRenderer())
    else:
        render_chain += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handler = _RenderingHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=render_chain,
        )
    )

    for name in LOGGER_NAMES:
        target = logging.getLogger(name)
        for existing in [h for h in target.handlers if isinstance(h, _RenderingHandler)]:
            target.removeHandler(existing)
        target.addHandler(handler)
        target.setLevel(level)
        target.propagate = False
