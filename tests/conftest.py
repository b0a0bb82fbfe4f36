"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides temporary catalog files and catalogs built on them.

==============================================================================
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from product_manager.catalog import ProductCatalog
from product_manager.config import get_settings


# ============================================================================
# DATA FIXTURES
# ============================================================================

@pytest.fixture
def sample_records() -> List[Dict[str, Any]]:
    """Two valid product records as stored on disk."""
    return [
        {
            "title": "producto prueba",
            "description": "Este es un producto prueba",
            "price": 200,
            "thumbnail": "Sin imagen",
            "code": "abc123",
            "stock": 25,
            "id": 1,
        },
        {
            "title": "otro producto prueba",
            "description": "Este es otro producto prueba",
            "price": 600,
            "thumbnail": "Sin imagen",
            "code": "xyz123",
            "stock": 50,
            "id": 2,
        },
    ]


# ============================================================================
# FILE FIXTURES
# ============================================================================

@pytest.fixture
def products_file(tmp_path: Path) -> Path:
    """Path to a catalog file that does not exist yet."""
    return tmp_path / "products.json"


@pytest.fixture
def seeded_file(products_file: Path, sample_records: List[Dict[str, Any]]) -> Path:
    """Catalog file pre-populated with the sample records."""
    products_file.write_text(json.dumps(sample_records, indent=2), encoding="utf-8")
    return products_file


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def catalog(products_file: Path) -> ProductCatalog:
    """Empty catalog backed by a temporary file."""
    return ProductCatalog(products_file)


@pytest.fixture
def seeded_catalog(seeded_file: Path) -> ProductCatalog:
    """Catalog backed by the sample records."""
    return ProductCatalog(seeded_file)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

