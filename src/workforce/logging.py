"""
structlog setup and per-request logging context
"""

import logging
import secrets
import sys
from contextvars import ContextVar
from typing import Any

import structlog

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
operation_ctx: ContextVar[str | None] = ContextVar("graphql_operation", default=None)


def add_request_context(
    _logger: Any, _method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor tagging events with the current request ID and GraphQL operation."""
    request_id = request_id_ctx.get()
    if request_id:
        event_dict["request_id"] = request_id

    operation = operation_ctx.get()
    if operation:
        event_dict["graphql_operation"] = operation

    return event_dict


def configure_logging(debug: bool = False, level: str = "INFO") -> None:
    """Route structlog through stdlib logging on stdout.

    Debug mode renders colored console lines at DEBUG level; otherwise events
    are emitted as JSON at ``level``.
    """
    logging.basicConfig(
        level="DEBUG" if debug else level.upper(),
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer: Any = (
        structlog.dev.ConsoleRenderer(colors=True) if debug else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_request_context,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def set_request_context(request_id: str | None = None, operation: str | None = None) -> str:
    """Bind the request ID (a fresh random one when not supplied) and operation.

    Returns the request ID in use so it can be echoed back to the client.
    """
    request_id = request_id or secrets.token_urlsafe(9)
    request_id_ctx.set(request_id)
    operation_ctx.set(operation)
    return request_id


def clear_request_context() -> None:
    request_id_ctx.set(None)
    operation_ctx.set(None)
