"""
==============================================================================
Product Manager - Demonstration Entry Point
==============================================================================

Walks a catalog through a typical session: add, reject a duplicate code,
look products up, update, and delete.

Usage:
------
    python -m product_manager.main

    # Use another file
    PRODUCTS_FILE=productos.json python -m product_manager.main

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List, Optional

from product_manager.catalog import Product, ProductCatalog, create_catalog
from product_manager.config import Settings, get_settings


logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )


def _show(label: str, products: List[Product]) -> None:
    print(label)
    for product in products:
        print(f"  {product.to_record()}")
    if not products:
        print("  []")


def run_demo(catalog: ProductCatalog) -> List[Product]:
    """
    Run the demonstration session against a catalog.

    Args:
        catalog: Catalog to operate on (ideally backed by an empty file)

    Returns:
        Products left in the catalog at the end of the session
    """
    _show("Get products:", catalog.list())

    catalog.add("producto prueba", "Este es un producto prueba", 200, "Sin imagen", "abc123", 25)

    # Same code again: rejected
    catalog.add("producto prueba", "Este es un producto prueba", 200, "Sin imagen", "abc123", 25)

    catalog.add("otro producto prueba", "Este es otro producto prueba", 600, "Sin imagen", "xyz123", 50)

    _show("Get products:", catalog.list())

    print("Search product with id = 1:")
    found = catalog.get_by_id(1)
    if found:
        print(f"  {found.to_record()}")

    print("Search product with id = 5:")
    missing = catalog.get_by_id(5)
    if missing:
        print(f"  {missing.to_record()}")

    updated_fields = {
        "title": "Producto Actualizado",
        "description": "Nueva descripción del producto",
        "price": 150,
        "stock": 77,
    }
    catalog.update_by_id(2, updated_fields)

    # The id is dropped from the payload; the other fields still apply
    catalog.update_by_id(2, {"id": 9, **updated_fields})

    _show("Products after update:", catalog.list())

    catalog.delete_by_id(1)

    # Unknown id: nothing changes
    catalog.delete_by_id(8)

    remaining = catalog.list()
    _show("Products after delete:", remaining)
    return remaining


def main(settings: Optional[Settings] = None) -> int:
    """Console entry point."""
    settings = settings or get_settings()
    configure_logging(settings)

    logger.info("=" * 60)
    logger.info(f"Starting {settings.app_name} demo [{settings.app_env}] ({settings.products_path})")
    logger.info("=" * 60)

    catalog = create_catalog(settings)
    run_demo(catalog)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
