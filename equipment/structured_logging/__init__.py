"""
Structured logging package for the equipment subsystem.

All imports should use explicit paths like
'from equipment.structured_logging.enhanced_logging_config import get_logger'.

Named 'structured_logging' rather than 'logging' to avoid shadowing the
standard library module.
"""

__all__ = []
