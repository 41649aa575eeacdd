"""
Catalog mutation service.

Validation problems are returned as a field -> message mapping. Only
references to unknown product ids raise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import structlog
from src.domain.identifiers import next_timestamp_id
from src.domain.models import DEFAULT_RATING, DEFAULT_REVIEWS, ProductDraft, ProductRecord
from src.domain.state import AppState
from src.infrastructure.repositories.record_store import RecordStore

logger = structlog.get_logger(__name__)


class CatalogError(Exception):
    """Base exception for catalog errors."""


class ProductNotFoundError(CatalogError):
    """Raised when a product id is not in the current catalog."""


@dataclass(slots=True)
class CatalogResult:
    """Outcome of a create/update call."""

    product: ProductRecord | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def parse_float(value: object) -> float | None:
    """Parse a finite float from form input, ``None`` when not possible."""
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = float(str(value).strip())
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


def parse_int(value: object) -> int | None:
    """Parse an integer from form input; integral floats such as "5.0" are accepted."""
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    parsed = parse_float(text)
    if parsed is None or not parsed.is_integer():
        return None
    return int(parsed)


def validate(draft: ProductDraft) -> dict[str, str]:
    """Return one message per invalid field; an empty dict means valid."""
    errors: dict[str, str] = {}
    if not draft.name.strip():
        errors["name"] = "Product name is required"
    if not draft.category.strip():
        errors["category"] = "Category is required"

    price = parse_float(draft.price)
    if price is None or price <= 0:
        errors["price"] = "Valid price is required"

    stock = parse_int(draft.stock)
    if stock is None or stock < 0:
        errors["stock"] = "Valid stock quantity is required"
    return errors


def _coerce(draft: ProductDraft, *, product_id: int, sales: int) -> ProductRecord:
    rating = parse_float(draft.rating)
    reviews = parse_int(draft.reviews)
    return ProductRecord(
        id=product_id,
        name=draft.name.strip(),
        category=draft.category.strip(),
        price=parse_float(draft.price),
        stock=parse_int(draft.stock),
        rating=rating if rating is not None else DEFAULT_RATING,
        reviews=reviews if reviews is not None else DEFAULT_REVIEWS,
        sales=sales,
        image=draft.image,
    )


class CatalogService:
    """Applies validated product mutations to an :class:`AppState`."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def validate(self, draft: ProductDraft) -> dict[str, str]:
        return validate(draft)

    def create(self, state: AppState, draft: ProductDraft) -> CatalogResult:
        errors = validate(draft)
        if errors:
            logger.info("product_validation_failed", fields=sorted(errors))
            return CatalogResult(errors=errors)

        product = _coerce(
            draft,
            product_id=next_timestamp_id(p.id for p in state.products),
            sales=0,
        )
        state.products = [*state.products, product]
        self.store.save_products(state.products)

        logger.info("product_created", product_id=product.id, category=product.category)
        return CatalogResult(product=product)

    def update(self, state: AppState, product_id: int, draft: ProductDraft) -> CatalogResult:
        """Replace every editable field; id and sales are preserved."""
        existing = state.find_product(product_id)
        if existing is None:
            raise ProductNotFoundError(f"Product {product_id} not found")

        errors = validate(draft)
        if errors:
            logger.info(
                "product_validation_failed", product_id=product_id, fields=sorted(errors)
            )
            return CatalogResult(errors=errors)

        product = _coerce(draft, product_id=existing.id, sales=existing.sales)
        state.products = [product if p.id == product_id else p for p in state.products]
        self.store.save_products(state.products)

        logger.info("product_updated", product_id=product_id)
        return CatalogResult(product=product)

    def delete(self, state: AppState, product_id: int) -> ProductRecord:
        existing = state.find_product(product_id)
        if existing is None:
            raise ProductNotFoundError(f"Product {product_id} not found")

        state.products = [p for p in state.products if p.id != product_id]
        self.store.save_products(state.products)

        logger.info("product_deleted", product_id=product_id, name=existing.name)
        return existing
