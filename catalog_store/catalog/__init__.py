"""
==============================================================================
Catalog Package - In-Memory Item Catalog
==============================================================================

Lazily-initialized catalog store with keyword search and prefix lookup.

Classes:
--------
- CatalogStore: Catalog manager with search capabilities
- CatalogStats: Pydantic snapshot of store state

==============================================================================
"""

from .models import CatalogStats
from .store import CatalogStore, get_store, init_store, reset_store

__all__ = [
    "CatalogStats",
    "CatalogStore",
    "get_store",
    "init_store",
    "reset_store",
]
