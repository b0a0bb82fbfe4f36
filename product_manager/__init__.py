"""
==============================================================================
Product Manager
==============================================================================

In-process product catalog backed by a JSON file.

Usage:
------
    from product_manager import ProductCatalog

    catalog = ProductCatalog("products.json")
    catalog.add("Mug", "Blue mug", 12, "mug.png", "MUG-1", 4)
    print(catalog.list())

==============================================================================
"""

from .catalog import OperationResult, Product, ProductCatalog, create_catalog
from .core import CatalogError

__version__ = "1.0.0"

__all__ = [
    "CatalogError",
    "OperationResult",
    "Product",
    "ProductCatalog",
    "create_catalog",
]
