"""
==============================================================================
Core Package
==============================================================================

Cross-cutting pieces shared by the catalog.

Modules:
--------
- exceptions: CatalogError and error factory functions

==============================================================================
"""

from .exceptions import (
    CatalogError,
    duplicate_code,
    immutable_field,
    load_failed,
    product_not_found,
    save_failed,
)

__all__ = [
    "CatalogError",
    "duplicate_code",
    "immutable_field",
    "load_failed",
    "product_not_found",
    "save_failed",
]
