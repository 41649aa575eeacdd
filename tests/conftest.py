from __future__ import annotations

from datetime import date

import pytest
from src.core.config import Settings
from src.domain.services.analytics import AnalyticsEngine
from src.domain.services.auth_service import AuthService
from src.domain.services.catalog_service import CatalogService
from src.domain.state import AppState
from src.infrastructure.kv import InMemoryKeyValueStore
from src.infrastructure.repositories.record_store import RecordStore

FIXED_TODAY = date(2024, 12, 30)


@pytest.fixture()
def settings() -> Settings:
    """Settings isolated from the developer's environment file."""
    return Settings(_env_file=None)


@pytest.fixture()
def kv() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def store(kv: InMemoryKeyValueStore, settings: Settings) -> RecordStore:
    return RecordStore(kv, settings)


@pytest.fixture()
def state(store: RecordStore) -> AppState:
    """Fresh state hydrated from an empty store (seed users and catalog)."""
    return AppState.load(store)


@pytest.fixture()
def auth_service(store: RecordStore, settings: Settings) -> AuthService:
    return AuthService(store, settings, today=lambda: FIXED_TODAY)


@pytest.fixture()
def catalog_service(store: RecordStore) -> CatalogService:
    return CatalogService(store)


@pytest.fixture()
def engine() -> AnalyticsEngine:
    return AnalyticsEngine()


@pytest.fixture()
def signed_in_state(state: AppState, auth_service: AuthService) -> AppState:
    auth_service.sign_in(state, email="admin@ecommerce.com", password="admin123")
    return state

