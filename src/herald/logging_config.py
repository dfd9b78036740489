"""structlog setup: every stdlib log record goes through one processor chain.

Request-scoped fields (``trace_id`` and, once authenticated, ``username``)
are bound as contextvars by the middleware and merged into each line.
"""

import logging
import sys

import structlog

# noisy libraries pinned above the application level
_QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "aiosqlite")


def configure_logging(log_level: str = "info", json_output: bool = False) -> None:
    """Route the root logger through structlog.

    Args:
        log_level: debug/info/warning/error.
        json_output: one JSON object per line (production) instead of the
            coloured console renderer used with ``HERALD_LOCAL=1``.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    pre_chain = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_output:
        # console renderer prints tracebacks itself; JSON needs them as a string field
        pre_chain.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def bind_request_context(trace_id: str, username: str | None = None) -> None:
    """Attach the trace id, and the caller when known, to log lines of this request."""
    fields = {"trace_id": trace_id}
    if username:
        fields["username"] = username
    structlog.contextvars.bind_contextvars(**fields)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
