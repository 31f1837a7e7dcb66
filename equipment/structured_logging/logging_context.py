"""
Context management utilities for enhanced logging.

Binds per-request context (correlation id, acting character) so every log
entry emitted while handling a store or inventory request carries it.
"""

import uuid
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars


def bind_request_context(
    correlation_id: str | None = None,
    character_id: str | None = None,
    request_id: str | None = None,
    **kwargs,
) -> None:
    """
    Bind request context to the current logging context.

    Args:
        correlation_id: Unique correlation ID for the request (generated when omitted)
        character_id: Character performing the request, if known
        request_id: Request ID if available
        **kwargs: Additional context variables
    """
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())

    context_vars = {
        "correlation_id": correlation_id,
        "character_id": character_id,
        "request_id": request_id,
        **kwargs,
    }

    # Remove None values
    context_vars = {k: v for k, v in context_vars.items() if v is not None}

    bind_contextvars(**context_vars)


def clear_request_context() -> None:
    """Clear the current request context from logging."""
    clear_contextvars()


def get_current_context() -> dict[str, Any]:
    """Get the current logging context."""
    return structlog.contextvars.get_contextvars()
