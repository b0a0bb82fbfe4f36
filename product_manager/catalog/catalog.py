"""
==============================================================================
Product Catalog Module
==============================================================================

JSON file backed product catalog with create/read/update/delete operations.

Features:
---------
- Whole catalog stored as one JSON array, rewritten after every mutation
- File reloaded at the start of every public operation
- Duplicate product codes rejected
- Failures logged and returned as OperationResult, never raised

JSON Structure:
--------------
[
  {
    "title": "Product Name",
    "description": "...",
    "price": 200,
    "thumbnail": "no-image.png",
    "code": "abc123",
    "stock": 25,
    "id": 1
  },
  ...
]

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from product_manager.config.settings import ID_STRATEGIES, Settings
from product_manager.core.exceptions import (
    CatalogError,
    duplicate_code,
    immutable_field,
    load_failed,
    product_not_found,
    save_failed,
)

from .models import OperationResult, Product


# Module logger
logger = logging.getLogger(__name__)


class ProductCatalog:
    """
    Product catalog manager mirrored to a JSON file.

    The file is the source of truth: every public operation reloads it
    first, and every successful mutation rewrites it completely.

    Attributes:
        products_file: Backing JSON file, or None when persistence is disabled
        id_strategy: "max" (highest id + 1) or "last" (last record's id + 1)

    Example:
        >>> catalog = ProductCatalog(Path("data/products.json"))
        >>> catalog.add("Mug", "Blue mug", 12, "mug.png", "MUG-1", 4)
        >>> product = catalog.get_by_id(1)
        >>> catalog.update_by_id(1, {"stock": 3})
        >>> catalog.delete_by_id(1)
    """

    def __init__(
        self,
        products_file: Optional[Union[Path, str]] = None,
        id_strategy: str = "max",
        json_indent: int = 2,
    ) -> None:
        """
        Initialize catalog and load the backing file.

        Args:
            products_file: Path to the catalog JSON file; empty disables loading
            id_strategy: Id assignment rule, one of ID_STRATEGIES
            json_indent: Indentation used when writing the file
        """
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"Unsupported id strategy: {id_strategy}. "
                f"Supported: {', '.join(ID_STRATEGIES)}"
            )

        self._products_file = Path(products_file) if products_file else None
        self._id_strategy = id_strategy
        self._json_indent = json_indent
        self._products: List[Product] = []

        self.load()

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products_file(self) -> Optional[Path]:
        """Get the backing file path."""
        return self._products_file

    @property
    def id_strategy(self) -> str:
        """Get the id assignment strategy."""
        return self._id_strategy

    # =========================================================================
    # PERSISTENCE
    # =========================================================================

    def load(self) -> OperationResult:
        """
        Replace the in-memory products with the backing file contents.

        A missing path, missing file or invalid content leaves the catalog
        empty. The failure is logged and returned, never raised.
        """
        self._products = []
        path = self._products_file

        if path is None:
            logger.debug("No products file configured, catalog is empty")
            return OperationResult.failure(load_failed(None, "no products file configured"))

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.warning(f"Products file not found: {path}")
            return OperationResult.failure(load_failed(str(path), "file not found"))
        except (OSError, UnicodeDecodeError) as e:
            return self._load_failure(path, f"unreadable file: {e}")
        except json.JSONDecodeError as e:
            return self._load_failure(path, f"invalid JSON: {e}")

        if not isinstance(data, list):
            return self._load_failure(path, "top-level JSON value is not a list")

        if not all(isinstance(item, dict) for item in data):
            return self._load_failure(path, "list contains non-object entries")

        products = [Product.model_validate(item) for item in data]

        self._products = products
        logger.debug(f"Loaded {len(products)} products from {path}")
        return OperationResult.ok()

    def _load_failure(self, path: Path, reason: str) -> OperationResult:
        error = load_failed(str(path), reason)
        logger.error(error.message)
        return OperationResult.failure(error)

    def save(self) -> OperationResult:
        """
        Write the whole in-memory catalog to the backing file.

        On failure the in-memory products are kept as they are, so memory and
        disk may diverge until the next successful save.
        """
        path = self._products_file

        if path is None:
            error = save_failed(None, "no products file configured")
            logger.error(error.message)
            return OperationResult.failure(error)

        try:
            payload = json.dumps(
                [product.to_record() for product in self._products],
                indent=self._json_indent,
                ensure_ascii=False,
            )
            path.write_text(payload, encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            error = save_failed(str(path), str(e))
            logger.error(error.message)
            return OperationResult.failure(error)

        logger.info(f"Products saved successfully ({len(self._products)} total)")
        return OperationResult.ok()

    # =========================================================================
    # QUERIES
    # =========================================================================

    def list(self) -> List[Product]:
        """
        Get all products as currently stored on disk.

        Returns:
            Copies of every product, in insertion order
        """
        self.load()
        return [product.model_copy(deep=True) for product in self._products]

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """
        Find product by id.

        Args:
            product_id: Catalog id to look up

        Returns:
            Copy of the product, or None if no product has this id
        """
        self.load()
        index = self._find_index(product_id)

        if index is None:
            logger.error(product_not_found(product_id).message)
            return None

        return self._products[index].model_copy(deep=True)

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def add(
        self,
        title: str,
        description: str,
        price: Union[int, float],
        thumbnail: str,
        code: str,
        stock: int,
    ) -> OperationResult:
        """
        Add a new product with the next available id.

        Args:
            title: Product title
            description: Product description
            price: Unit price
            thumbnail: Image reference or placeholder
            code: Unique product code
            stock: Units in stock

        Returns:
            Result carrying the created product
        """
        self.load()

        if any(product.code == code for product in self._products):
            error = duplicate_code(code)
            logger.error(error.message)
            return OperationResult.failure(error)

        new_id = self._next_id()
        product = Product(
            id=new_id,
            title=title,
            description=description,
            price=price,
            thumbnail=thumbnail,
            code=code,
            stock=stock,
        )

        self._products.append(product)
        saved = self.save()
        if not saved:
            return OperationResult.failure(saved.error, product.model_copy(deep=True))

        logger.info(f"Product with id {new_id} has been added.")
        return OperationResult.ok(product.model_copy(deep=True))

    def update_by_id(self, product_id: int, fields: Mapping[str, Any]) -> OperationResult:
        """
        Shallow-merge fields onto an existing product.

        The "id" key is ignored if present: ids never change. Fields that are
        not mentioned keep their current values.

        Args:
            product_id: Id of the product to update
            fields: Field values to overwrite

        Returns:
            Result carrying the updated product
        """
        self.load()

        changes = dict(fields)
        warnings: List[CatalogError] = []
        if "id" in changes:
            del changes["id"]
            warning = immutable_field("id")
            logger.warning(warning.message)
            warnings.append(warning)

        index = self._find_index(product_id)
        if index is None:
            error = product_not_found(product_id)
            logger.error(error.message)
            return OperationResult.failure(error, warnings=warnings)

        new_code = changes.get("code")
        if new_code is not None and any(
            product.code == new_code
            for position, product in enumerate(self._products)
            if position != index
        ):
            error = duplicate_code(new_code)
            logger.error(error.message)
            return OperationResult.failure(error, warnings=warnings)

        merged = {**self._products[index].to_record(), **changes}
        updated = Product.model_validate(merged)

        self._products[index] = updated
        saved = self.save()
        if not saved:
            return OperationResult.failure(
                saved.error, updated.model_copy(deep=True), warnings=warnings
            )

        logger.info(f"Product with id {product_id} has been updated.")
        return OperationResult.ok(updated.model_copy(deep=True), warnings=warnings)

    def delete_by_id(self, product_id: int) -> OperationResult:
        """
        Remove a product by id.

        Args:
            product_id: Id of the product to delete

        Returns:
            Result carrying the removed product
        """
        self.load()
        index = self._find_index(product_id)

        if index is None:
            error = product_not_found(product_id)
            logger.error(error.message)
            return OperationResult.failure(error)

        removed = self._products.pop(index)
        saved = self.save()
        if not saved:
            return OperationResult.failure(saved.error, removed)

        logger.info(f"Product with id {product_id} has been deleted.")
        return OperationResult.ok(removed)

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _find_index(self, product_id: int) -> Optional[int]:
        """Linear scan for the position of a product id."""
        if not _is_id(product_id):
            return None

        for index, product in enumerate(self._products):
            if _is_id(product.id) and product.id == product_id:
                return index
        return None

    def _next_id(self) -> int:
        """Compute the id for a new product (1 when no record has an integer id)."""
        if self._id_strategy == "last" and self._products and _is_id(self._products[-1].id):
            return self._products[-1].id + 1

        ids = [product.id for product in self._products if _is_id(product.id)]
        return max(ids) + 1 if ids else 1

    def __len__(self) -> int:
        self.load()
        return len(self._products)

    def __repr__(self) -> str:
        return (
            f"ProductCatalog(products_file={str(self._products_file)!r}, "
            f"id_strategy={self._id_strategy!r})"
        )


def create_catalog(settings: Settings) -> ProductCatalog:
    """
    Build a catalog from application settings.

    Args:
        settings: Settings providing the file path and id strategy

    Returns:
        ProductCatalog instance
    """
    return ProductCatalog(
        settings.products_path,
        id_strategy=settings.id_strategy,
        json_indent=settings.json_indent,
    )


def _is_id(value: Any) -> bool:
    """Ids are plain integers; bools are not ids."""
    return isinstance(value, int) and not isinstance(value, bool)
