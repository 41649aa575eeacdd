from __future__ import annotations

from src.core.config import Settings, get_settings


def test_defaults_match_browser_storage_keys() -> None:
    settings = Settings(_env_file=None)

    assert settings.users_key == "ecommerce_users"
    assert settings.products_key == "ecommerce_products"
    assert settings.session_key == "ecommerce_current_user"
    assert settings.storage_key("ecommerce_users") == "ecommerce_users"
    assert settings.low_stock_threshold == 30


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("STORAGE_BACKEND", "redis")
    monkeypatch.setenv("ANALYTICS_SEED", "11")
    monkeypatch.setenv("LOW_STOCK_THRESHOLD", "5")

    settings = Settings(_env_file=None)

    assert settings.storage_backend == "redis"
    assert settings.analytics_seed == 11
    assert settings.low_stock_threshold == 5


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
