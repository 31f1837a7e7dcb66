"""
Structlog-based logging configuration for the equipment subsystem.

This is the main entry point for the logging system. Application code obtains
loggers through ``get_logger`` and logs an event message plus keyword
context:

    logger = get_logger(__name__)
    logger.info("Item moved to store", item_id=item_id, store_id=store_id)
"""

# pylint: disable=too-few-public-methods  # Reason: Logging configuration classes with focused responsibility, minimal public interface

import json
import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.stdlib import BoundLogger, LoggerFactory

from equipment.structured_logging.logging_context import (
    bind_request_context,
    clear_request_context,
    get_current_context,
)
from equipment.structured_logging.logging_processors import sanitize_sensitive_data, strip_ansi

__all__ = [
    "bind_request_context",
    "clear_request_context",
    "configure_enhanced_structlog",
    "get_current_context",
    "get_logger",
    "is_logging_initialized",
    "log_exception_once",
    "setup_enhanced_logging",
]


class _LoggingState:
    """State container for logging initialization to avoid global statements."""

    initialized: bool = False
    signature: str | None = None


_logging_state = _LoggingState()


def _key_value_renderer(bound_logger: Any, name: str, event_dict: dict[str, Any]) -> str:
    """Render key=value pairs without ANSI escape sequences."""
    formatted = structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"])(
        bound_logger, name, event_dict
    )
    return strip_ansi(formatted)


def configure_enhanced_structlog(
    log_level: str = "INFO",
    log_format: str = "colored",
    *,
    disable_logging: bool = False,
) -> None:
    """
    Configure structlog over the standard library logging backend.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: ``json`` for JSON lines, ``human``/``colored`` for key=value output
        disable_logging: When True, install no stream handler and silence output
    """
    base_processors = [
        sanitize_sensitive_data,
        merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: Any
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer(default=str)
    else:
        renderer = _key_value_renderer

    root_logger = logging.getLogger("equipment")
    root_logger.handlers = []
    if disable_logging:
        root_logger.addHandler(logging.NullHandler())
        root_logger.setLevel(logging.CRITICAL + 1)
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(handler)
        root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root_logger.propagate = False

    structlog.configure(
        processors=base_processors + [renderer],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=False,
    )


def setup_enhanced_logging(config: dict[str, Any], *, force_reconfigure: bool = False) -> None:
    """
    Set up logging from a configuration dictionary.

    Args:
        config: Configuration dictionary with a ``logging`` section
            (see LoggingConfig.to_legacy_dict)
        force_reconfigure: When True, reconfigure even if already initialized
    """
    config_signature = json.dumps(config, sort_keys=True, default=str)

    if _logging_state.initialized and not force_reconfigure:
        get_logger("equipment.structured_logging.setup").debug(
            "setup_enhanced_logging skipped; logging system already initialized",
            config_signature=_logging_state.signature,
        )
        return

    logging_config = config.get("logging", {})
    log_level = logging_config.get("level", "INFO")
    log_format = logging_config.get("format", "colored")
    disable_logging = logging_config.get("disable_logging", False)

    configure_enhanced_structlog(log_level, log_format, disable_logging=disable_logging)

    _logging_state.initialized = True
    _logging_state.signature = config_signature

    get_logger("equipment.structured_logging.setup").info(
        "Logging system initialized",
        environment=logging_config.get("environment", "local"),
        log_level=log_level,
        log_format=log_format,
    )


def is_logging_initialized() -> bool:
    return _logging_state.initialized


def get_logger(name: str) -> Any:  # Returns BoundLogger but typed as Any for flexibility
    """
    Get a structlog logger with the specified name.

    This is the public API for obtaining loggers. All application code
    should use this function rather than calling structlog.get_logger()
    directly.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def log_exception_once(
    bound_logger: BoundLogger,
    level: str,
    message: str,
    *,
    exc: Exception | None = None,
    **kwargs: Any,
) -> None:
    """
    Log an exception once, skipping exceptions that have already been logged.

    Args:
        bound_logger: Structlog bound logger instance.
        level: Logging level to use (for example, "error" or "warning").
        message: Log message to emit.
        exc: Optional exception to include in the log entry.
        **kwargs: Additional key-value pairs for structured logging.
    """
    if exc is not None:
        if getattr(exc, "_already_logged", False):
            return
        kwargs.setdefault("error_type", type(exc).__name__)
        kwargs.setdefault("error", str(exc))
        details = getattr(exc, "details", None)
        if isinstance(details, dict):
            kwargs.setdefault("error_details", details)

    log_method = getattr(bound_logger, level.lower(), bound_logger.error)
    log_method(message, **kwargs)

    if exc is not None:
        exc._already_logged = True  # type: ignore[attr-defined]  # pylint: disable=protected-access  # Reason: marker attribute prevents duplicate logging of the same exception
