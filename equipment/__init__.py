"""
Equipment subsystem.

Fixed-capacity inventories and stores holding items and money, the rules for
equipping items, and transfers and trades between containers.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
