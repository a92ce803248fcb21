"""Log routing for the typedenv CLI.

The library never configures logging itself. ``Environment`` and the
services log through plain ``logging.getLogger(__name__)`` loggers, and
only the CLI attaches a handler. That handler runs every record, stdlib
or structlog, through one structlog ProcessorFormatter so both kinds of
record look the same on stderr: key/value console lines by default,
one JSON object per line with ``--log-json``.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "typedenv"


def _pre_chain() -> list[structlog.types.Processor]:
    """Processors applied before rendering, to structlog and stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Send typedenv log records to stderr.

    Safe to call more than once; the root handler is replaced, not stacked.

    Args:
        verbose: Show ``typedenv`` debug records, such as values that were
            ignored because they did not parse. Other libraries stay at WARNING.
        log_json: Render records as JSON lines.
    """
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
