"""
Logging processors for structlog event processing.

Redacts sensitive fields and strips terminal escape codes from rendered
output.
"""

import re
from typing import Any

_SENSITIVE_PATTERNS = [
    re.compile(pattern)
    for pattern in (
        r"\bpassword\b",
        r"\btoken\b",
        r"\bsecret\b",
        r"_key\b",
        r"^key$",
        r"\bcredential\b",
        r"\bauthorization\b",
    )
]

# Idempotency tokens identify a mutation, not a credential.
_SAFE_FIELDS = {"mutation_token", "item_key", "slot_key"}

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def sanitize_sensitive_data(_logger: Any, _name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Remove sensitive data from log entries.

    Args:
        _logger: Logger instance (unused)
        _name: Logger name (unused)
        event_dict: Event dictionary to sanitize

    Returns:
        Sanitized event dictionary
    """

    def sanitize_dict(d: dict[str, Any]) -> dict[str, Any]:
        sanitized: dict[str, Any] = {}
        for key, value in d.items():
            if isinstance(value, dict):
                sanitized[key] = sanitize_dict(value)
                continue
            key_lower = key.lower()
            if key_lower in _SAFE_FIELDS:
                sanitized[key] = value
            elif any(pattern.search(key_lower) for pattern in _SENSITIVE_PATTERNS):
                sanitized[key] = "[REDACTED]"
            else:
                sanitized[key] = value
        return sanitized

    return sanitize_dict(event_dict)


def strip_ansi(text: str) -> str:
    return _ANSI_ESCAPE.sub("", text)
