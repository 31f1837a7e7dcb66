"""
Tests for the structlog logging configuration.
"""

import logging
from unittest.mock import Mock

import pytest

from equipment.domain.exceptions import CapacityExceededError
from equipment.structured_logging.enhanced_logging_config import (
    bind_request_context,
    clear_request_context,
    get_current_context,
    is_logging_initialized,
    log_exception_once,
    setup_enhanced_logging,
)
from equipment.structured_logging.logging_processors import sanitize_sensitive_data, strip_ansi


@pytest.fixture()
def request_context():
    clear_request_context()
    yield
    clear_request_context()


def test_setup_is_idempotent_without_force():
    """A second setup call leaves the existing handler configuration alone."""
    quiet = {"logging": {"level": "INFO", "format": "json", "disable_logging": True}}
    setup_enhanced_logging(quiet, force_reconfigure=True)
    handlers = list(logging.getLogger("equipment").handlers)

    setup_enhanced_logging({"logging": {"level": "DEBUG", "disable_logging": False}})

    assert is_logging_initialized()
    assert logging.getLogger("equipment").handlers == handlers
    assert logging.getLogger("equipment").level == logging.CRITICAL + 1


def test_disabled_logging_installs_null_handler():
    setup_enhanced_logging({"logging": {"disable_logging": True}}, force_reconfigure=True)

    handlers = logging.getLogger("equipment").handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.NullHandler)


def test_bind_request_context_generates_correlation_id(request_context):
    bind_request_context(character_id="c-1", operation="buy_item")

    context = get_current_context()
    assert context["character_id"] == "c-1"
    assert context["operation"] == "buy_item"
    assert context["correlation_id"]
    assert "request_id" not in context


def test_clear_request_context(request_context):
    bind_request_context(correlation_id="abc")
    clear_request_context()

    assert get_current_context() == {}


def test_sanitize_redacts_secrets_but_keeps_mutation_tokens():
    event = {
        "event": "Container mutation rejected",
        "password": "hunter2",
        "auth": {"token": "t-1", "api_key": "k"},
        "mutation_token": "deposit-1",
        "item_id": "i-1",
    }

    sanitized = sanitize_sensitive_data(None, "info", event)

    assert sanitized["password"] == "[REDACTED]"
    assert sanitized["auth"] == {"token": "[REDACTED]", "api_key": "[REDACTED]"}
    assert sanitized["mutation_token"] == "deposit-1"
    assert sanitized["item_id"] == "i-1"


def test_strip_ansi():
    assert strip_ansi("\x1b[31mred\x1b[0m") == "red"


def test_log_exception_once_logs_a_single_time():
    bound_logger = Mock()
    exc = CapacityExceededError(attempted=21, limit=20)

    log_exception_once(bound_logger, "warning", "Move rejected", exc=exc, item_id="i-1")
    log_exception_once(bound_logger, "warning", "Move rejected", exc=exc, item_id="i-1")

    bound_logger.warning.assert_called_once()
    kwargs = bound_logger.warning.call_args.kwargs
    assert kwargs["error_type"] == "CapacityExceededError"
    assert kwargs["error_details"] == {"attempted": 21, "limit": 20}
    assert kwargs["item_id"] == "i-1"
