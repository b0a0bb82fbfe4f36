"""
==============================================================================
Catalog Package - Product Management
==============================================================================

Product catalog persisted to a single JSON file.

Classes:
--------
- Product: Pydantic model for products
- OperationResult: Success/failure outcome of catalog operations
- ProductCatalog: Catalog manager with CRUD operations

==============================================================================
"""

from .models import OperationResult, Product
from .catalog import ProductCatalog, create_catalog

__all__ = [
    "OperationResult",
    "Product",
    "ProductCatalog",
    "create_catalog",
]
