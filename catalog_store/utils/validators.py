"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation classes for catalog item input.

This module implements:
- ItemValueValidator: Validates values passed to CatalogStore.add_item
- ItemDataValidator: Minimum-length check for raw item data

Validation Rules for Item Values:
--------------------------------
- Must be a string
- Must contain at least one non-whitespace character
- Stored exactly as given (no normalization)

==============================================================================
"""

from __future__ import annotations

from typing import Any, Optional, Tuple


class ItemValueValidator:
    """
    Validator for catalog item values.

    Example:
        >>> validator = ItemValueValidator()
        >>> validator.validate("  ")
        (False, 'Item value cannot be blank')
    """

    def validate(self, value: Any) -> Tuple[bool, Optional[str]]:
        """
        Validate an item value.

        Args:
            value: Raw value to insert

        Returns:
            Tuple of (is_valid, error_message)
        """
        if value is None:
            return False, "Item value is required"

        if not isinstance(value, str):
            return False, "Item value must be a string"

        if not value.strip():
            return False, "Item value cannot be blank"

        return True, None


class ItemDataValidator:
    """
    Validator for raw item data length.

    Rejects data shorter than ``min_length`` characters.
    """

    def __init__(self, min_length: int) -> None:
        self.min_length = min_length

    def validate(self, data: Optional[str]) -> Tuple[bool, Optional[str]]:
        """
        Validate item data.

        Args:
            data: Raw item data

        Returns:
            Tuple of (is_valid, error_message)
        """
        if data is None:
            return False, "Item data is required"

        if len(data) < self.min_length:
            return False, f"Item data must be at least {self.min_length} characters"

        return True, None
