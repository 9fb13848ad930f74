"""
==============================================================================
Core Package
==============================================================================

Error handling shared by the catalog store.

Usage:
------
    from catalog_store.core import AppException
    from catalog_store.core import exceptions

    raise exceptions.invalid_argument("value", "must not be blank")

==============================================================================
"""

from . import exceptions
from .exceptions import AppException

__all__ = [
    "AppException",
    "exceptions",
]
