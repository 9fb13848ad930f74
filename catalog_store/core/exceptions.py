"""
Catalog Store Exception Handling

Single AppException class for all catalog errors.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Unified exception for all catalog error scenarios.

    Usage:
        raise AppException("Item value is required", "INVALID_ARGUMENT")
        raise AppException("Data is invalid", "VALIDATION_ERROR", 422, {"length": 3})

    Error Codes:
        Input:
            - INVALID_ARGUMENT (400)
            - VALIDATION_ERROR (422)

        Store:
            - STORE_NOT_INITIALIZED (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "INVALID_ARGUMENT")
            status_code: HTTP-style status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a serializable error payload."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def invalid_argument(field: str, reason: str) -> AppException:
    """Create invalid argument exception."""
    return AppException(
        f"Invalid {field}: {reason}",
        "INVALID_ARGUMENT",
        400,
        {"field": field, "reason": reason}
    )


def validation_error(reason: str, details: Optional[Dict[str, Any]] = None) -> AppException:
    """Create data validation exception."""
    return AppException(reason, "VALIDATION_ERROR", 422, details)


def store_not_initialized() -> AppException:
    """Create store not initialized exception."""
    return AppException(
        "Catalog store not initialized",
        "STORE_NOT_INITIALIZED",
        500
    )
