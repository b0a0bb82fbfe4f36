"""
Catalog Error Handling

Single CatalogError class describing every catalog failure condition.

Catalog operations do not raise these errors: they log them and hand them
back inside an OperationResult. Callers that prefer exceptions can raise
the attached error themselves.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class CatalogError(Exception):
    """
    Unified error for all catalog failure scenarios.

    Usage:
        error = CatalogError("Product not found", "PRODUCT_NOT_FOUND", {"product_id": 5})
        result = OperationResult.failure(error)

    Error Codes:
        Persistence:
            - LOAD_FAILED
            - SAVE_FAILED

        Products:
            - DUPLICATE_CODE
            - PRODUCT_NOT_FOUND
            - IMMUTABLE_FIELD
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize catalog error.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "PRODUCT_NOT_FOUND")
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to a plain dictionary."""
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

def load_failed(path: Optional[str], reason: str) -> CatalogError:
    """Create load failure error."""
    return CatalogError(
        f"Error loading products: {reason}",
        "LOAD_FAILED",
        {"path": path, "reason": reason}
    )


def save_failed(path: Optional[str], reason: str) -> CatalogError:
    """Create save failure error."""
    return CatalogError(
        f"Error saving products: {reason}",
        "SAVE_FAILED",
        {"path": path, "reason": reason}
    )


def duplicate_code(code: str) -> CatalogError:
    """Create duplicate product code error."""
    return CatalogError(
        f"Product with code '{code}' already exists",
        "DUPLICATE_CODE",
        {"code": code}
    )


def product_not_found(product_id: int) -> CatalogError:
    """Create product not found error."""
    return CatalogError(
        f"Product with id {product_id} not found",
        "PRODUCT_NOT_FOUND",
        {"product_id": product_id}
    )


def immutable_field(field: str = "id") -> CatalogError:
    """Create immutable field violation error."""
    return CatalogError(
        f"The '{field}' field cannot be updated",
        "IMMUTABLE_FIELD",
        {"field": field}
    )

