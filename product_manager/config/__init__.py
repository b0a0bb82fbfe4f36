"""
==============================================================================
Configuration Package
==============================================================================

Centralized configuration management using Pydantic Settings.

Usage:
------
    from product_manager.config import get_settings, Settings

    settings = get_settings()
    print(settings.products_file)

==============================================================================
"""

from .settings import ID_STRATEGIES, Settings, get_settings

__all__ = [
    "ID_STRATEGIES",
    "Settings",
    "get_settings",
]
