"""Repository implementations for container aggregates."""

from .memory import InMemoryContainerRepository

__all__ = ["InMemoryContainerRepository"]
