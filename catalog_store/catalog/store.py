"""
==============================================================================
Catalog Store Module
==============================================================================

Bounded, lazily-initialized in-memory catalog of string items.

Features:
---------
- Keyword search (substring matching, capped result count)
- Lookup by identifier (prefix matching, first match wins)
- Existence check (exact matching)
- Append-only insertion with one-time initialization

Matching Semantics:
------------------
find_by_id() matches by prefix while exists() matches by equality, so
exists("Widget") is False even when find_by_id("Widget") returns
"Widget-A". Both behaviors are kept as-is.

==============================================================================
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional, Tuple

from catalog_store.config import get_settings
from catalog_store.core import exceptions
from catalog_store.utils.validators import ItemDataValidator, ItemValueValidator

from .models import CatalogStats


class CatalogStore:
    """
    In-memory catalog store with lazy initialization.

    Items are kept in insertion order; duplicates are allowed. Every
    public method runs under a single re-entrant lock.

    Attributes:
        max_search_results: Upper bound on search result count
        default_page_size: Minimum length accepted by validate_item_data

    Example:
        >>> store = CatalogStore()
        >>> store.add_item("Widget-A")
        >>> store.search_by_keyword("Widget", 10)
        ['Widget-A']
    """

    # Same bounds as Settings
    SEARCH_RESULTS_RANGE = (1, 10000)
    PAGE_SIZE_RANGE = (1, 1000)

    def __init__(
        self,
        max_search_results: Optional[int] = None,
        default_page_size: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Create an empty, uninitialized store.

        Args:
            max_search_results: Search cap (uses settings if None)
            default_page_size: Data validation minimum (uses settings if None)
            logger: Logger receiving store events (module logger if None)

        Raises:
            AppException: INVALID_ARGUMENT if a limit is out of range
        """
        if max_search_results is None or default_page_size is None:
            settings = get_settings()
            if max_search_results is None:
                max_search_results = settings.max_search_results
            if default_page_size is None:
                default_page_size = settings.default_page_size

        self._check_limit("max_search_results", max_search_results, self.SEARCH_RESULTS_RANGE)
        self._check_limit("default_page_size", default_page_size, self.PAGE_SIZE_RANGE)

        self.max_search_results = max_search_results
        self.default_page_size = default_page_size

        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._lock = threading.RLock()
        self._items: List[str] = []
        self._initialized = False

        self._value_validator = ItemValueValidator()
        self._data_validator = ItemDataValidator(default_page_size)

    @staticmethod
    def _check_limit(name: str, value: int, bounds: Tuple[int, int]) -> None:
        """Reject a limit outside the inclusive bounds."""
        low, high = bounds
        if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
            raise exceptions.invalid_argument(
                name,
                f"must be an integer between {low} and {high}",
            )

    # =========================================================================
    # SEARCH METHODS
    # =========================================================================

    def search_by_keyword(self, keyword: Optional[str], limit: int) -> List[str]:
        """
        Search items containing a keyword.

        Args:
            keyword: Substring to look for (case-sensitive)
            limit: Maximum results requested; capped at max_search_results

        Returns:
            Matching items in insertion order (empty list if none)
        """
        if not keyword:
            self._logger.warning("Search keyword is empty")
            return []

        limit = min(limit, self.max_search_results)

        results: List[str] = []
        with self._lock:
            for item in self._items:
                if len(results) >= limit:
                    break
                if keyword in item:
                    results.append(item)

        return results

    def find_by_id(self, item_id: Optional[str]) -> Optional[str]:
        """
        Find the first item starting with the given identifier.

        Args:
            item_id: Identifier prefix

        Returns:
            Matching item or None
        """
        if item_id is None:
            return None

        with self._lock:
            return next(
                (item for item in self._items if item.startswith(item_id)),
                None,
            )

    def exists(self, item_id: Optional[str]) -> bool:
        """Check whether an item exactly equal to item_id is stored."""
        if item_id is None:
            return False

        with self._lock:
            return item_id in self._items

    def list_all(self) -> List[str]:
        """Get a copy of all items in insertion order."""
        with self._lock:
            return self._items.copy()

    # =========================================================================
    # MUTATION
    # =========================================================================

    def add_item(self, value: str) -> None:
        """
        Append an item, initializing the store on first use.

        Args:
            value: Item content; stored unchanged

        Raises:
            AppException: INVALID_ARGUMENT if value is None or blank
        """
        is_valid, error = self._value_validator.validate(value)
        if not is_valid:
            raise exceptions.invalid_argument("value", error)

        with self._lock:
            self._ensure_initialized()
            self._items.append(value)

        self._logger.info(f"Added item: {value}")

    def _ensure_initialized(self) -> None:
        """Run one-time initialization. Caller must hold the lock."""
        if self._initialized:
            return

        self._items.clear()
        self._initialized = True
        self._logger.info("Catalog store initialized")

    # =========================================================================
    # STATE
    # =========================================================================

    def is_initialized(self) -> bool:
        """Check whether the first insertion has happened."""
        with self._lock:
            return self._initialized

    def get_stats(self) -> CatalogStats:
        """Get a snapshot of store state."""
        with self._lock:
            return CatalogStats(
                total_items=len(self._items),
                initialized=self._initialized,
                max_search_results=self.max_search_results,
                default_page_size=self.default_page_size,
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    # =========================================================================
    # AUXILIARY VALIDATION
    # =========================================================================

    def validate_item_data(self, data: Optional[str]) -> None:
        """
        Validate raw item data against the minimum length.

        Not used by add_item.

        Args:
            data: Raw item data

        Raises:
            AppException: VALIDATION_ERROR if data is None or shorter than
                default_page_size characters
        """
        is_valid, error = self._data_validator.validate(data)
        if not is_valid:
            raise exceptions.validation_error(
                error,
                {"min_length": self.default_page_size},
            )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

_store_instance: Optional[CatalogStore] = None


def get_store() -> CatalogStore:
    """
    Get the global store instance.

    Raises:
        AppException: STORE_NOT_INITIALIZED if init_store() was not called
    """
    if _store_instance is None:
        raise exceptions.store_not_initialized()
    return _store_instance


def init_store(
    max_search_results: Optional[int] = None,
    default_page_size: Optional[int] = None,
    logger: Optional[logging.Logger] = None,
) -> CatalogStore:
    """
    Create and register the global store instance.

    Args:
        max_search_results: Search cap (uses settings if None)
        default_page_size: Data validation minimum (uses settings if None)
        logger: Logger receiving store events

    Returns:
        CatalogStore instance
    """
    global _store_instance
    _store_instance = CatalogStore(
        max_search_results=max_search_results,
        default_page_size=default_page_size,
        logger=logger,
    )
    return _store_instance


def reset_store() -> None:
    """Drop the global store instance."""
    global _store_instance
    _store_instance = None
