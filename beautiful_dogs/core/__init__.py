"""
Core - application infrastructure.

Provides:
- ConfigManager: configuration with persistence
- Signal: synchronous observer notifications
- setup_logging: loguru sinks

Usage:
    from beautiful_dogs.core.locator import sl

    sl.init("config.json")
    sl.cart.add("Rex", 10)
"""
from .config import (
    ConfigManager,
    AppConfig,
    GeneralSettings,
    CatalogSettings,
    CartSettings,
    SupabaseSettings,
)
from .events import Signal
from .logging import setup_logging

__all__ = [
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "CatalogSettings",
    "CartSettings",
    "SupabaseSettings",
    "Signal",
    "setup_logging",
]
