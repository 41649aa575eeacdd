from __future__ import annotations

from src.core.config import Settings

from .store import InMemoryKeyValueStore, KeyValueStore, RedisKeyValueStore


def build_key_value_store(settings: Settings) -> KeyValueStore:
    """Create the backend named by ``settings.storage_backend``."""
    backend = settings.storage_backend.strip().lower()
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "redis":
        return RedisKeyValueStore.from_url(settings.redis_url)
    raise ValueError(f"Unsupported storage backend: {settings.storage_backend}")


__all__ = [
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "RedisKeyValueStore",
    "build_key_value_store",
]
