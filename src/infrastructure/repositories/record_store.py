"""Record store: users, products and the current session over a key-value store."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from typing import TypeVar

import structlog
from pydantic import TypeAdapter, ValidationError
from src.core.config import Settings, get_settings
from src.domain.models import ProductRecord, UserAccount
from src.domain.reference_data import SEED_PRODUCTS, SEED_USERS
from src.infrastructure.kv import KeyValueStore

logger = structlog.get_logger(__name__)

T = TypeVar("T")

_users_adapter = TypeAdapter(list[UserAccount])
_products_adapter = TypeAdapter(list[ProductRecord])


def seed_users() -> list[UserAccount]:
    """Return fresh copies of the two bootstrap accounts."""
    return _users_adapter.validate_python(SEED_USERS)


def seed_products() -> list[ProductRecord]:
    """Return fresh copies of the bootstrap catalog."""
    return _products_adapter.validate_python(SEED_PRODUCTS)


class RecordStore:
    """Owns loading and saving of the canonical user/product collections."""

    def __init__(self, kv: KeyValueStore, settings: Settings | None = None) -> None:
        self.kv = kv
        settings = settings or get_settings()
        self.users_key = settings.storage_key(settings.users_key)
        self.products_key = settings.storage_key(settings.products_key)
        self.session_key = settings.storage_key(settings.session_key)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def load_users(self) -> list[UserAccount]:
        return self._load_collection(self.users_key, _users_adapter, seed_users)

    def save_users(self, users: Sequence[UserAccount]) -> None:
        self._save_collection(self.users_key, users)
        logger.debug("users_saved", count=len(users))

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------
    def load_products(self) -> list[ProductRecord]:
        return self._load_collection(self.products_key, _products_adapter, seed_products)

    def save_products(self, products: Sequence[ProductRecord]) -> None:
        self._save_collection(self.products_key, products)
        logger.debug("products_saved", count=len(products))

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------
    def load_session(self) -> UserAccount | None:
        raw = self.kv.get(self.session_key)
        if raw is None:
            return None
        try:
            return UserAccount.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "session_document_invalid",
                key=self.session_key,
                error_count=exc.error_count(),
            )
            return None

    def set_session(self, user: UserAccount) -> None:
        self.kv.set(self.session_key, json.dumps(user.to_document()))

    def clear_session(self) -> None:
        self.kv.delete(self.session_key)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _load_collection(
        self, key: str, adapter: TypeAdapter[list[T]], seed: Callable[[], list[T]]
    ) -> list[T]:
        raw = self.kv.get(key)
        if raw is None:
            return seed()
        try:
            return adapter.validate_json(raw)
        except ValidationError as exc:
            # validate_json reports malformed JSON as a ValidationError as well
            logger.warning(
                "record_store_fallback_to_seed",
                key=key,
                error_count=exc.error_count(),
            )
            return seed()

    def _save_collection(self, key: str, records: Sequence[UserAccount | ProductRecord]) -> None:
        self.kv.set(key, json.dumps([record.to_document() for record in records]))


__all__ = ["RecordStore", "seed_products", "seed_users"]
