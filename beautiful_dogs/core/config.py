from decimal import Decimal
from typing import Any, List
import json
import os
from pydantic import BaseModel, Field, field_validator
from loguru import logger
from .events import Signal

# --- Settings Models ---
class GeneralSettings(BaseModel):
    debug_mode: bool = True
    theme: str = "dark"
    log_dir: str = "logs"

    @field_validator("theme")
    @classmethod
    def _check_theme(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in ("dark", "light"):
            raise ValueError(f"theme must be 'dark' or 'light', got {value!r}")
        return value

class CatalogSettings(BaseModel):
    media_dir: str = "./Media/Dogs"
    image_extensions: List[str] = Field(default_factory=lambda: ["png", "jpg", "jpeg"])
    video_extensions: List[str] = Field(default_factory=lambda: ["mp4", "mov"])

    @field_validator("image_extensions", "video_extensions")
    @classmethod
    def _normalize_extensions(cls, value: List[str]) -> List[str]:
        # Stored without the leading dot, lower case
        return [ext.strip().lstrip(".").lower() for ext in value if ext.strip()]

class CartSettings(BaseModel):
    default_price: Decimal = Decimal("10.00")
    admin_mode: bool = False

    @field_validator("default_price")
    @classmethod
    def _check_price(cls, value: Decimal) -> Decimal:
        if value < 0:
            raise ValueError("default_price must not be negative")
        return value

class SupabaseSettings(BaseModel):
    url: str = ""
    key: str = ""

    @property
    def configured(self) -> bool:
        return bool(self.url and self.key)

class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    cart: CartSettings = Field(default_factory=CartSettings)
    supabase: SupabaseSettings = Field(default_factory=SupabaseSettings)

# --- Manager ---
class ConfigManager:
    """
    Manages application configuration with persistence and reactivity.
    """
    def __init__(self, filepath: str = "config.json"):
        self.filepath = filepath
        self._data = AppConfig()
        self.on_changed = Signal("ConfigChanged")
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic, autosave, and emit change event."""
        if section not in AppConfig.model_fields:
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if key not in type(section_obj).model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")

        # Re-validate the whole section so field validators run on the new value
        updated = type(section_obj).model_validate({**section_obj.model_dump(), key: value})
        setattr(self._data, section, updated)
        self._save()
        self.on_changed.emit(section, key, getattr(updated, key))

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def _load(self):
        """Load settings from JSON or TOML file if present; otherwise keep defaults."""
        if os.path.isfile(self.filepath):
            try:
                if self.filepath.endswith('.toml'):
                    import tomllib
                    with open(self.filepath, "rb") as f:
                        raw = tomllib.load(f)
                else:
                    with open(self.filepath, "r", encoding="utf-8") as f:
                        raw = json.load(f)
                self._data = AppConfig.model_validate(raw)
            except Exception as e:
                logger.error(f"Failed to load config from {self.filepath}: {e}")
                self._save()
        else:
            self._save()

    def _save(self):
        """Persist current config to JSON file."""
        if self.filepath.endswith('.toml'):
            # TOML is read-only; runtime changes stay in memory
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(mode="json"), f, indent=4)
        except Exception as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
