"""
==============================================================================
Utilities Package
==============================================================================

Utility classes and functions for the catalog store.

Modules:
--------
- validators: Item value and item data validation
- logging_setup: Root logging configuration

==============================================================================
"""

from .validators import ItemDataValidator, ItemValueValidator
from .logging_setup import configure_logging

__all__ = [
    "ItemDataValidator",
    "ItemValueValidator",
    "configure_logging",
]
