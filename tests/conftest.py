"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides isolated store, logger, and settings fixtures.

==============================================================================
"""

import logging
from typing import Generator, List

import pytest

from catalog_store.catalog import CatalogStore, reset_store
from catalog_store.config import get_settings


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Reload settings and drop the global store around each test."""
    get_settings.cache_clear()
    reset_store()
    yield
    get_settings.cache_clear()
    reset_store()


# ============================================================================
# STORE FIXTURES
# ============================================================================

@pytest.fixture
def store_logger(request: pytest.FixtureRequest) -> logging.Logger:
    """Logger private to the current test."""
    logger = logging.getLogger(f"tests.catalog_store.{request.node.name}")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def store(store_logger: logging.Logger) -> CatalogStore:
    """Empty store with default limits."""
    return CatalogStore(
        max_search_results=100,
        default_page_size=20,
        logger=store_logger,
    )


@pytest.fixture
def small_store(store_logger: logging.Logger) -> CatalogStore:
    """Store with a search cap of 3."""
    return CatalogStore(
        max_search_results=3,
        default_page_size=5,
        logger=store_logger,
    )


@pytest.fixture
def widgets() -> List[str]:
    """Sample catalog content."""
    return [
        "Widget-A",
        "Widget-B",
        "Gadget-A",
        "Widget-C",
        "Gizmo-Widget",
        "Widget-A",
    ]


@pytest.fixture
def filled_store(store: CatalogStore, widgets: List[str]) -> CatalogStore:
    """Store populated with the sample widgets."""
    for item in widgets:
        store.add_item(item)
    return store
