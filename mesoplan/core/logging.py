"""Structured logging.

Routes and middleware log through structlog; the engine modules use plain
``logging.getLogger``. Both end up on stdout as one JSON line per event, so
request context bound in the middleware shows up on engine log lines too.
"""
import logging
import sys
from typing import Any

import structlog

from mesoplan.config.settings import get_settings


def _shared_processors(app_name: str) -> list:
    def add_app_name(_, __, event_dict: dict) -> dict:
        event_dict.setdefault("app", app_name)
        return event_dict

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_app_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def configure_logging() -> None:
    """Configure structlog and the stdlib root logger to share one JSON renderer."""
    settings = get_settings()
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)
    shared = _shared_processors(settings.app_name)

    structlog.configure(
        processors=[
            *shared,
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)


def add_log_context(**kwargs: Any) -> None:
    """Add context to all future log entries."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Clear all log context."""
    structlog.contextvars.clear_contextvars()
