"""Headline metrics, chart series and list filtering for the catalog dashboard."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from src.domain.models import DEFAULT_RATING, ProductRecord

ALL_CATEGORIES = "All"
SALES_CHART_LIMIT = 10


@dataclass(slots=True)
class DashboardSummary:
    total_products: int
    total_revenue: float
    total_sales: int
    low_stock: int
    average_rating: float


@dataclass(slots=True)
class SalesPoint:
    name: str
    sales: int
    revenue: float


@dataclass(slots=True)
class CategoryCount:
    name: str
    value: int


def summarize(products: Sequence[ProductRecord], low_stock_threshold: int = 30) -> DashboardSummary:
    """Compute the stat cards; an empty catalog averages to 0.0."""
    ratings = [p.rating if p.rating is not None else DEFAULT_RATING for p in products]
    average = round(sum(ratings) / len(ratings), 2) if ratings else 0.0
    return DashboardSummary(
        total_products=len(products),
        total_revenue=sum(p.price * p.sales for p in products),
        total_sales=sum(p.sales for p in products),
        low_stock=sum(1 for p in products if p.stock < low_stock_threshold),
        average_rating=average,
    )


def sales_chart(products: Sequence[ProductRecord]) -> list[SalesPoint]:
    return [
        SalesPoint(name=p.name[:12], sales=p.sales, revenue=p.price * p.sales)
        for p in products[:SALES_CHART_LIMIT]
    ]


def category_breakdown(products: Sequence[ProductRecord]) -> list[CategoryCount]:
    counts: dict[str, int] = {}
    for product in products:
        counts[product.category] = counts.get(product.category, 0) + 1
    return [CategoryCount(name=name, value=value) for name, value in counts.items()]


def list_categories(products: Sequence[ProductRecord]) -> list[str]:
    return [ALL_CATEGORIES, *dict.fromkeys(p.category for p in products)]


def filter_products(
    products: Sequence[ProductRecord],
    search: str = "",
    category: str = ALL_CATEGORIES,
) -> list[ProductRecord]:
    """Case-insensitive search over name/category, narrowed to one category unless "All"."""
    term = search.lower()
    return [
        p
        for p in products
        if (term in p.name.lower() or term in p.category.lower())
        and (category == ALL_CATEGORIES or p.category == category)
    ]
