"""
Key-value collaborators backing the record store.

Values are whole JSON documents; there are no partial writes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import structlog

if TYPE_CHECKING:
    from redis import Redis

logger = structlog.get_logger(__name__)


class KeyValueStore(Protocol):
    """Protocol for a whole-document key-value store (allows swapping backends)."""

    def get(self, key: str) -> str | None:
        """Return the stored document or ``None`` when absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Replace the stored document."""
        ...

    def delete(self, key: str) -> None:
        """Erase the stored document, if any."""
        ...


class InMemoryKeyValueStore:
    """Process-local store used by default and in tests."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data


class RedisKeyValueStore:
    """Store documents as plain Redis string values."""

    def __init__(self, client: Redis) -> None:
        self.client = client

    @classmethod
    def from_url(cls, url: str) -> RedisKeyValueStore:
        from redis import Redis

        logger.info("redis_store_connect", redis_url=url)
        return cls(Redis.from_url(url))

    def get(self, key: str) -> str | None:
        raw = self.client.get(key)
        if raw is None:
            return None
        if isinstance(raw, bytes):
            # undecodable bytes surface as malformed JSON downstream
            return raw.decode("utf-8", errors="replace")
        return str(raw)

    def set(self, key: str, value: str) -> None:
        self.client.set(key, value)

    def delete(self, key: str) -> None:
        self.client.delete(key)
