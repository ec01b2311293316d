from __future__ import annotations

import logging
import sys
from typing import Any

import orjson
import structlog

PACKAGE_LOGGER = "rc4rng"


def _json_serializer(obj: Any, default: Any) -> str:
    """
    JSON serializer for structured logs.

    orjson keeps key order stable and is fast enough for per-call logging.
    """
    return orjson.dumps(obj, default=default).decode("utf-8")


def get_logger(name: str) -> Any:
    """
    structlog logger backed by the stdlib logger `name`.

    Events end up in stdlib logging, where the package logger only carries a
    NullHandler until configure_logging() installs a real one. Importing or
    using the library therefore writes nothing on its own.
    """
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(*, level: str = "INFO") -> None:
    """
    Configure structured logging for the process.

    Call once at startup (the CLI does this). Library code only asks for
    loggers and never configures anything itself.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors: list[Any] = [
        # Merge context variables (component, environment, etc.)
        structlog.contextvars.merge_contextvars,

        # Standard metadata
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),

        # Exception handling
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.dict_tracebacks,

        # Final JSON output
        structlog.processors.JSONRenderer(serializer=_json_serializer),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        # re-resolved per call so a later configure_logging() takes effect everywhere
        cache_logger_on_first_use=False,
    )

    # Logs go to stderr: stdout belongs to generated values
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    pkg = logging.getLogger(PACKAGE_LOGGER)
    for old in list(pkg.handlers):
        if not isinstance(old, logging.NullHandler):
            pkg.removeHandler(old)
    pkg.addHandler(handler)
    pkg.setLevel(log_level)
    pkg.propagate = False


def bind_context(**values: Any) -> None:
    """
    Bind contextual information to all future log entries.

    Example:
        bind_context(component="cli", environment="local")
    """
    structlog.contextvars.bind_contextvars(**values)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
