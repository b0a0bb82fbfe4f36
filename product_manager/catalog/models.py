"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for product catalog items and operation outcomes.

==============================================================================
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from product_manager.core.exceptions import CatalogError


class Product(BaseModel):
    """
    Product model for catalog items.

    Values are stored exactly as given: no field is coerced or required, and
    a field missing from the file stays missing when the record is saved.

    Attributes:
        id: Catalog-assigned identifier, immutable after creation
        title: Product display name
        description: Free-text description
        price: Unit price
        thumbnail: Image reference or placeholder text
        code: Business key, unique across the catalog
        stock: Units available
    """

    model_config = ConfigDict(extra="allow")

    id: Any = Field(default=None, description="Catalog-assigned identifier")
    title: Any = Field(default=None, description="Product title")
    description: Any = Field(default=None, description="Product description")
    price: Any = Field(default=None, description="Unit price")
    thumbnail: Any = Field(default=None, description="Image reference or placeholder")
    code: Any = Field(default=None, description="Unique product code")
    stock: Any = Field(default=None, description="Units in stock")

    def to_record(self) -> Dict[str, Any]:
        """Serialize to the JSON-ready dict written to the catalog file."""
        data = self.model_dump(mode="json")
        declared = type(self).model_fields
        return {
            key: value
            for key, value in data.items()
            if key in self.model_fields_set or key not in declared
        }


class OperationResult(BaseModel):
    """
    Outcome of a catalog operation.

    Operations never raise for expected failures; they return one of these
    instead. The result is truthy only when the operation succeeded.

    Example:
        >>> result = catalog.add("Mug", "Blue mug", 12, "mug.png", "MUG-1", 4)
        >>> if not result:
        ...     print(result.code, result.message)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    success: bool
    error: Optional[CatalogError] = None
    product: Optional[Product] = None
    warnings: List[CatalogError] = Field(default_factory=list)

    @classmethod
    def ok(
        cls,
        product: Optional[Product] = None,
        warnings: Optional[List[CatalogError]] = None
    ) -> "OperationResult":
        """Create a successful result, optionally with non-fatal warnings."""
        return cls(success=True, product=product, warnings=warnings or [])

    @classmethod
    def failure(
        cls,
        error: CatalogError,
        product: Optional[Product] = None,
        warnings: Optional[List[CatalogError]] = None
    ) -> "OperationResult":
        """Create a failed result carrying the error."""
        return cls(success=False, error=error, product=product, warnings=warnings or [])

    @property
    def code(self) -> Optional[str]:
        """Machine-readable error code, None on success."""
        return self.error.code if self.error else None

    @property
    def message(self) -> Optional[str]:
        """Human-readable error message, None on success."""
        return self.error.message if self.error else None

    def raise_for_error(self) -> "OperationResult":
        """Raise the attached CatalogError if the operation failed."""
        if self.error is not None and not self.success:
            raise self.error
        return self

    def __bool__(self) -> bool:
        return self.success
