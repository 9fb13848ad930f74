"""
==============================================================================
Catalog Models Module
==============================================================================

Pydantic models describing catalog store state.

==============================================================================
"""

from pydantic import BaseModel, ConfigDict, Field


class CatalogStats(BaseModel):
    """
    Read-only snapshot of a catalog store.

    Attributes:
        total_items: Number of stored items (duplicates counted)
        initialized: Whether the first insertion has happened
        max_search_results: Search result cap in effect
        default_page_size: Minimum length used by item data validation
    """

    model_config = ConfigDict(frozen=True)

    total_items: int = Field(..., ge=0, description="Number of stored items")
    initialized: bool = Field(..., description="Initialization state")
    max_search_results: int = Field(..., ge=1, description="Search result cap")
    default_page_size: int = Field(..., ge=1, description="Minimum item data length")
