"""
==============================================================================
Demonstration Driver Tests
==============================================================================

Tests for the demo session and console entry point.

==============================================================================
"""

import json
import logging
from pathlib import Path

from product_manager.catalog import ProductCatalog
from product_manager.config import Settings
from product_manager.main import main, run_demo


class TestDemo:
    """Tests for the demonstration session."""

    def test_run_demo_final_state(self, catalog: ProductCatalog):
        """Test the session leaves only the updated second product."""
        remaining = run_demo(catalog)

        assert len(remaining) == 1
        product = remaining[0]
        assert product.id == 2
        assert product.code == "xyz123"
        assert product.title == "Producto Actualizado"
        assert product.price == 150
        assert product.stock == 77

    def test_run_demo_prints_listings(self, catalog: ProductCatalog, capsys):
        """Test the session prints each listing."""
        run_demo(catalog)

        output = capsys.readouterr().out
        assert "Get products:" in output
        assert "Products after update:" in output
        assert "Products after delete:" in output

    def test_main_writes_configured_file(self, tmp_path: Path):
        """Test the entry point runs against the configured file."""
        products_file = tmp_path / "productos.json"
        settings = Settings(_env_file=None, products_file=str(products_file))

        assert main(settings) == 0

        records = json.loads(products_file.read_text(encoding="utf-8"))
        assert [record["id"] for record in records] == [2]

    def test_main_banner_names_environment(self, tmp_path: Path, caplog):
        """Test the startup banner reports the configured environment."""
        settings = Settings(
            _env_file=None,
            app_env="staging",
            products_file=str(tmp_path / "productos.json"),
        )

        with caplog.at_level(logging.INFO, logger="product_manager.main"):
            main(settings)

        assert "demo [staging]" in caplog.text
