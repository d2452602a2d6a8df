from typing import Optional

from loguru import logger

from .config import ConfigManager
from beautiful_dogs.cart import Cart
from beautiful_dogs.catalog import Catalog
from beautiful_dogs.services import SupabaseManager


class ServiceLocator:
    """
    Application session: owns the config, the catalog loaded at startup
    and the cart every view shares.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ServiceLocator, cls).__new__(cls)
            cls._instance.is_ready = False
        return cls._instance

    def init(self, config_path: str):
        if self.is_ready: return

        # 1. Settings
        self.config = ConfigManager(config_path)
        settings = self.config.data

        # 2. Catalog, scanned once and shared by reference
        self.catalog = Catalog.load(
            settings.catalog.media_dir,
            settings.catalog.image_extensions,
            settings.catalog.video_extensions,
        )

        # 3. Session cart
        self.cart = Cart()

        # 4. External service client (optional)
        self.supabase: Optional[SupabaseManager] = None
        if settings.supabase.configured:
            self.supabase = SupabaseManager(settings.supabase.url, settings.supabase.key)

        self.config.on_changed.connect(self._on_config_change)
        self.is_ready = True

    def reset(self):
        """Drop the session; the next init() starts from scratch."""
        if self.is_ready:
            self.config.on_changed.disconnect(self._on_config_change)
        self.is_ready = False

    def _on_config_change(self, section, key, value):
        if section == "catalog":
            # Media folder or filters changed: rescan once
            cat = self.config.data.catalog
            self.catalog = Catalog.load(cat.media_dir, cat.image_extensions, cat.video_extensions)
        elif section == "supabase":
            sb = self.config.data.supabase
            self.supabase = SupabaseManager(sb.url, sb.key) if sb.configured else None
            logger.info(f"Supabase client {'configured' if self.supabase else 'disabled'}")

# Global access
sl = ServiceLocator()
