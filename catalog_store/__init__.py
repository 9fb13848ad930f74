"""
==============================================================================
Catalog Store
==============================================================================

Bounded, lazily-initialized in-memory catalog store.

Usage:
------
    from catalog_store import CatalogStore

    store = CatalogStore()
    store.add_item("Widget-A")
    store.find_by_id("Widget")      # 'Widget-A'
    store.exists("Widget")          # False

==============================================================================
"""

from .catalog import CatalogStats, CatalogStore, get_store, init_store, reset_store
from .config import Settings, get_settings
from .core import AppException

__version__ = "1.0.0"

__all__ = [
    "AppException",
    "CatalogStats",
    "CatalogStore",
    "Settings",
    "get_settings",
    "get_store",
    "init_store",
    "reset_store",
]
