"""Domain services."""

from src.domain.services.analytics import AnalyticsEngine, AnalyticsSnapshot
from src.domain.services.auth_service import (
    AuthError,
    AuthService,
    InvalidCredentialsError,
    MissingFieldsError,
    NotAuthenticatedError,
    UserExistsError,
)
from src.domain.services.catalog_service import (
    CatalogError,
    CatalogResult,
    CatalogService,
    ProductNotFoundError,
)

__all__ = [
    "AnalyticsEngine",
    "AnalyticsSnapshot",
    "AuthError",
    "AuthService",
    "CatalogError",
    "CatalogResult",
    "CatalogService",
    "InvalidCredentialsError",
    "MissingFieldsError",
    "NotAuthenticatedError",
    "ProductNotFoundError",
    "UserExistsError",
]
