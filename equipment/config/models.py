"""
Pydantic-based configuration models for the equipment subsystem.

Values come from the environment (``INVENTORY_*``, ``LOGGING_*``) with
defaults suitable for local play.
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from ..structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)


class InventoryConfig(BaseSettings):
    """Container capacity and starting balance."""

    number_of_slots: int = Field(default=20, ge=1, description="Slots in a character inventory")
    store_number_of_slots: int = Field(default=20, ge=1, description="Slots in a character store")
    starting_money: int = Field(default=0, ge=0, description="Balance of a freshly created inventory")

    model_config = {"env_prefix": "INVENTORY_", "case_sensitive": False, "extra": "ignore"}


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    environment: str = Field(default="local", description="Logging environment")
    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="colored", description="Log format")
    disable_logging: bool = Field(default=False, description="Disable all logging")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate logging environment."""
        valid_environments = ["local", "unit_test", "e2e_test", "production"]
        if v not in valid_environments:
            logger.error("Invalid logging environment", environment=v, valid_environments=valid_environments)
            raise ValueError(f"Environment must be one of {valid_environments}, got '{v}'")
        return v

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}, got '{v}'")
        return v_upper

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate log format."""
        valid_formats = ["json", "human", "colored"]
        if v not in valid_formats:
            raise ValueError(f"Log format must be one of {valid_formats}, got '{v}'")
        return v

    model_config = {"env_prefix": "LOGGING_", "case_sensitive": False, "extra": "ignore"}

    def to_legacy_dict(self) -> dict[str, Any]:
        """Convert to the dict shape consumed by setup_enhanced_logging."""
        return {
            "environment": self.environment,
            "level": self.level,
            "format": self.format,
            "disable_logging": self.disable_logging,
        }


class AppConfig(BaseSettings):
    """Top-level configuration composing every section."""

    inventory: InventoryConfig = Field(default_factory=InventoryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"case_sensitive": False, "extra": "ignore"}

    def to_legacy_dict(self) -> dict[str, Any]:
        return {
            "inventory": self.inventory.model_dump(),
            "logging": self.logging.to_legacy_dict(),
        }
