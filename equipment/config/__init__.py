"""
Configuration module for the equipment subsystem.

Type-safe, validated configuration using Pydantic BaseSettings.

Usage:
    from equipment.config import get_config

    config = get_config()
    logger.info("Inventory capacity", slots=config.inventory.number_of_slots)
"""

import sys
import threading
from os import getenv

from .models import AppConfig, InventoryConfig, LoggingConfig

__all__ = ["get_config", "reset_config", "AppConfig", "InventoryConfig", "LoggingConfig"]

_config_instance: AppConfig | None = None
_config_lock = threading.Lock()


def _is_test_mode() -> bool:
    """Detect pytest so tests always see the current environment."""
    if "pytest" in sys.modules:
        return True
    return bool(getenv("PYTEST_CURRENT_TEST"))


def get_config() -> AppConfig:
    """
    Return the application configuration.

    Production callers share one cached instance; under pytest a fresh
    instance is built on every call so monkeypatched environment variables
    take effect.
    """
    global _config_instance  # pylint: disable=global-statement  # Reason: module-level singleton cache
    if _is_test_mode():
        return AppConfig()
    with _config_lock:
        if _config_instance is None:
            _config_instance = AppConfig()
        return _config_instance


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config_instance  # pylint: disable=global-statement  # Reason: module-level singleton cache
    with _config_lock:
        _config_instance = None
