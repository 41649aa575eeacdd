from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment."""

    app_name: str = Field(default="Catalog Admin", validation_alias="APP_NAME")
    environment: str = Field(default="local", validation_alias="APP_ENV")
    version: str = Field(default="0.1.0")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Key-value storage
    storage_backend: str = Field(default="memory", validation_alias="STORAGE_BACKEND")
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        validation_alias="REDIS_URL",
    )
    storage_key_prefix: str = Field(default="", validation_alias="STORAGE_KEY_PREFIX")
    users_key: str = Field(default="ecommerce_users", validation_alias="USERS_KEY")
    products_key: str = Field(default="ecommerce_products", validation_alias="PRODUCTS_KEY")
    session_key: str = Field(default="ecommerce_current_user", validation_alias="SESSION_KEY")

    # Accounts
    default_profile_pic: str = Field(
        default="https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=150&h=150&fit=crop",
        validation_alias="DEFAULT_PROFILE_PIC",
    )

    # Dashboard / analytics
    low_stock_threshold: int = Field(default=30, validation_alias="LOW_STOCK_THRESHOLD")
    analytics_seed: int | None = Field(default=None, validation_alias="ANALYTICS_SEED")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="allow")

    def storage_key(self, name: str) -> str:
        """Return the fully-qualified storage key for a collection name."""
        return f"{self.storage_key_prefix}{name}"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
