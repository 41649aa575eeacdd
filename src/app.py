from __future__ import annotations

import random
from dataclasses import dataclass

import structlog
from src.core.config import Settings, get_settings
from src.core.logging import setup_logging
from src.domain.services import AnalyticsEngine, AuthService, CatalogService
from src.domain.services.analytics import AnalyticsSnapshot
from src.domain.services.dashboard import DashboardSummary, summarize
from src.domain.state import AppState
from src.infrastructure.kv import KeyValueStore, build_key_value_store
from src.infrastructure.repositories.record_store import RecordStore

logger = structlog.get_logger()


@dataclass
class DashboardApp:
    """Wires the record store, services and state for one browser-like session."""

    settings: Settings
    store: RecordStore
    state: AppState
    auth: AuthService
    catalog: CatalogService
    analytics: AnalyticsEngine

    def analytics_snapshot(self) -> AnalyticsSnapshot:
        return self.analytics.snapshot(self.state.products)

    def summary(self) -> DashboardSummary:
        return summarize(self.state.products, self.settings.low_stock_threshold)


def create_app(
    settings: Settings | None = None,
    *,
    kv: KeyValueStore | None = None,
) -> DashboardApp:
    """Application factory for the catalog admin core."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    store = RecordStore(kv if kv is not None else build_key_value_store(settings), settings)
    state = AppState.load(store)
    rng = random.Random(settings.analytics_seed) if settings.analytics_seed is not None else None

    logger.info(
        "service_startup",
        service=settings.app_name,
        environment=settings.environment,
        version=settings.version,
        storage_backend=settings.storage_backend,
        users=len(state.users),
        products=len(state.products),
        authenticated=state.is_authenticated,
    )

    return DashboardApp(
        settings=settings,
        store=store,
        state=state,
        auth=AuthService(store, settings),
        catalog=CatalogService(store),
        analytics=AnalyticsEngine(rng),
    )
