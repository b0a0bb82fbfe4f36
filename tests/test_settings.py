"""
==============================================================================
Settings Tests
==============================================================================

Tests for environment-driven configuration.

==============================================================================
"""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from product_manager.catalog import create_catalog
from product_manager.config import Settings, get_settings


class TestSettings:
    """Tests for Settings defaults and validation."""

    def test_defaults(self, monkeypatch):
        """Test default values without environment overrides."""
        for name in ("APP_ENV", "DEBUG", "PRODUCTS_FILE", "ID_STRATEGY", "JSON_INDENT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)
        assert settings.products_path == Path("data/products.json")
        assert settings.id_strategy == "max"
        assert settings.json_indent == 2
        assert settings.log_level == logging.INFO
        assert settings.app_env == "development"

    def test_reads_environment(self, monkeypatch, tmp_path: Path):
        """Test environment variables override defaults."""
        monkeypatch.setenv("PRODUCTS_FILE", str(tmp_path / "catalog.json"))
        monkeypatch.setenv("ID_STRATEGY", "LAST")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("APP_ENV", "Production")

        settings = Settings(_env_file=None)
        assert settings.products_path == tmp_path / "catalog.json"
        assert settings.id_strategy == "last"
        assert settings.log_level == logging.DEBUG
        assert settings.app_env == "production"

    def test_unknown_environment_falls_back(self):
        """Test unknown app_env values normalize to development."""
        settings = Settings(_env_file=None, app_env="qa")
        assert settings.app_env == "development"

    def test_invalid_id_strategy(self):
        """Test unsupported id strategies are rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, id_strategy="random")

    def test_get_settings_is_cached(self, monkeypatch, tmp_path: Path):
        """Test get_settings returns one instance and creates the data directory."""
        monkeypatch.setenv("PRODUCTS_FILE", str(tmp_path / "nested" / "products.json"))

        first = get_settings()
        assert first is get_settings()
        assert (tmp_path / "nested").is_dir()


class TestCreateCatalog:
    """Tests for building a catalog from settings."""

    def test_uses_settings(self, tmp_path: Path):
        """Test file path and id strategy come from settings."""
        settings = Settings(
            _env_file=None,
            products_file=str(tmp_path / "products.json"),
            id_strategy="last",
            json_indent=4,
        )
        catalog = create_catalog(settings)

        assert catalog.products_file == tmp_path / "products.json"
        assert catalog.id_strategy == "last"

        catalog.add("Mug", "Blue mug", 12, "mug.png", "MUG-1", 4)
        assert (tmp_path / "products.json").read_text(encoding="utf-8").startswith("[\n    {")
