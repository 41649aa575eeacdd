from __future__ import annotations

from typing import Any

from src.domain.models import ProductDraft, ProductRecord


def build_draft(overrides: dict[str, Any] | None = None) -> ProductDraft:
    """Construct a valid product form draft, optionally overriding fields."""
    data: dict[str, Any] = {
        "name": "Desk Lamp",
        "category": "Home",
        "price": "39.99",
        "stock": "25",
        "rating": "4.2",
        "reviews": "80",
        "image": "https://example.com/lamp.jpg",
    }
    data.update(overrides or {})
    return ProductDraft(**data)


def make_record(product_id: int = 1, **overrides: Any) -> ProductRecord:
    """Build a product with sensible defaults for analytics tests."""
    data: dict[str, Any] = {
        "id": product_id,
        "name": f"Product {product_id}",
        "category": "Electronics",
        "price": 50.0,
        "stock": 10,
        "sales": 20,
        "rating": 4.5,
        "reviews": 100,
    }
    data.update(overrides)
    return ProductRecord(**data)
