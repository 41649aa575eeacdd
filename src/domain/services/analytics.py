"""
Heuristic analytics over the product catalog.

Six independent transforms (segmentation, sales forecast, price elasticity,
category lifetime value, churn risk and review sentiment). Every transform is
total over an empty catalog. Draws that were random in the dashboard come from
an injected ``random.Random``; without one, fixed midpoints are used so the
output is reproducible.
"""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog
from src.domain.models import DEFAULT_RATING, DEFAULT_REVIEWS, ProductRecord

logger = structlog.get_logger(__name__)

FORECAST_LIMIT = 10
ELASTICITY_LIMIT = 8
CLV_CATEGORY_LIMIT = 6
CHURN_LIMIT = 8
SENTIMENT_LIMIT = 10

ELASTICITY_RANGE = (-2.5, -0.5)
FORECAST_CONFIDENCE_RANGE = (0.85, 0.95)
CLV_CONFIDENCE_RANGE = (0.75, 0.95)


def js_round(value: float) -> int:
    """Round half towards positive infinity, matching JavaScript Math.round."""
    return math.floor(value + 0.5)


@dataclass(slots=True, frozen=True)
class AnalyticsProduct:
    """Product with rating/review defaults already applied."""

    id: int
    name: str
    category: str
    price: float
    stock: int
    sales: int
    rating: float
    reviews: int

    @classmethod
    def from_record(cls, record: ProductRecord) -> AnalyticsProduct:
        return cls(
            id=record.id,
            name=record.name,
            category=record.category,
            price=record.price,
            stock=record.stock,
            sales=record.sales,
            rating=record.rating if record.rating is not None else DEFAULT_RATING,
            reviews=record.reviews if record.reviews is not None else DEFAULT_REVIEWS,
        )


@dataclass(slots=True)
class ClusterAssignment:
    """Product ids bucketed into high/medium/low performance segments."""

    high: list[int] = field(default_factory=list)
    medium: list[int] = field(default_factory=list)
    low: list[int] = field(default_factory=list)


@dataclass(slots=True)
class SalesForecast:
    name: str
    current: int
    forecast: float
    confidence: float


@dataclass(slots=True)
class PriceElasticity:
    product: str
    current_price: float
    elasticity: float
    optimal_price: float
    revenue_impact: int


@dataclass(slots=True)
class CategoryLifetimeValue:
    category: str
    clv: int
    confidence: float


@dataclass(slots=True)
class ChurnRisk:
    product: str
    category: str
    churn_risk: float
    recommendation: str


@dataclass(slots=True)
class SentimentScore:
    product: str
    sentiment: float
    volume: int
    trend: str


@dataclass(slots=True)
class AnalyticsSnapshot:
    """All six analytics views for one catalog snapshot."""

    clusters: ClusterAssignment
    forecasts: list[SalesForecast]
    elasticity: list[PriceElasticity]
    lifetime_value: list[CategoryLifetimeValue]
    churn: list[ChurnRisk]
    sentiment: list[SentimentScore]


def normalize(products: Sequence[ProductRecord]) -> list[AnalyticsProduct]:
    return [AnalyticsProduct.from_record(product) for product in products]


def cluster_score(product: AnalyticsProduct) -> float:
    velocity = product.sales / max(product.stock, 1)
    return velocity * 0.5 + product.rating * 0.3 + (product.price / 100) * 0.2


def churn_score(product: AnalyticsProduct) -> float:
    stock_ratio = product.stock / (max(product.sales, 0) + 1)
    rating_factor = (5 - product.rating) * 20
    return min(100.0, stock_ratio * 30 + rating_factor)


def churn_label(score: float) -> str:
    if score > 60:
        return "High Priority"
    if score > 30:
        return "Monitor"
    return "Low Risk"


def sentiment_trend(sentiment: float) -> str:
    if sentiment > 0.5:
        return "Positive"
    if sentiment > 0:
        return "Neutral"
    return "Negative"


class AnalyticsEngine:
    """Computes derived views from a product list; holds no catalog state."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng

    def _draw(self, low: float, high: float) -> float:
        if self.rng is None:
            return (low + high) / 2
        return self.rng.uniform(low, high)

    def cluster_products(self, products: Sequence[ProductRecord]) -> ClusterAssignment:
        """Bucket by weighted score: > 8 high, > 4 medium, otherwise low."""
        clusters = ClusterAssignment()
        for product in normalize(products):
            score = cluster_score(product)
            if score > 8:
                clusters.high.append(product.id)
            elif score > 4:
                clusters.medium.append(product.id)
            else:
                clusters.low.append(product.id)
        return clusters

    def forecast_sales(self, products: Sequence[ProductRecord]) -> list[SalesForecast]:
        normalized = normalize(products)
        total = len(normalized)
        forecasts: list[SalesForecast] = []
        # Seasonality uses the 1-based position within the whole catalog.
        for position, product in enumerate(normalized[:FORECAST_LIMIT], start=1):
            trend = (product.sales - product.sales * 0.8) / 30
            seasonal = math.sin(position / total * math.pi) * 50
            smoothed = js_round(product.sales * 1.3 + trend * 30 + seasonal)
            forecasts.append(
                SalesForecast(
                    name=product.name[:15],
                    current=product.sales,
                    forecast=max(smoothed, product.sales * 0.8),
                    confidence=self._draw(*FORECAST_CONFIDENCE_RANGE),
                )
            )
        return forecasts

    def price_elasticity(self, products: Sequence[ProductRecord]) -> list[PriceElasticity]:
        rows: list[PriceElasticity] = []
        for product in normalize(products):
            elasticity = self._draw(*ELASTICITY_RANGE)
            optimal_price = product.price * (1 + elasticity * 0.1)
            # (optimal - price) / price * sales * price, without dividing by price
            revenue_impact = (optimal_price - product.price) * product.sales
            rows.append(
                PriceElasticity(
                    product=product.name,
                    current_price=product.price,
                    elasticity=round(elasticity, 2),
                    optimal_price=round(optimal_price, 2),
                    revenue_impact=js_round(revenue_impact),
                )
            )
        rows.sort(key=lambda row: abs(row.revenue_impact), reverse=True)
        return rows[:ELASTICITY_LIMIT]

    def predict_clv(self, products: Sequence[ProductRecord]) -> list[CategoryLifetimeValue]:
        """Sum per-product CLV by category, keeping the first six categories seen."""
        by_category: dict[str, CategoryLifetimeValue] = {}
        for product in normalize(products):
            purchase_frequency = product.sales / 100
            customer_lifespan_years = 3
            clv = js_round(purchase_frequency * product.price * 12 * customer_lifespan_years)
            confidence = round(self._draw(*CLV_CONFIDENCE_RANGE), 2)

            existing = by_category.get(product.category)
            if existing is None:
                by_category[product.category] = CategoryLifetimeValue(
                    category=product.category, clv=clv, confidence=confidence
                )
            else:
                existing.clv += clv
        return list(by_category.values())[:CLV_CATEGORY_LIMIT]

    def churn_risk(self, products: Sequence[ProductRecord]) -> list[ChurnRisk]:
        scored = [(churn_score(product), product) for product in normalize(products)]
        scored.sort(key=lambda item: item[0], reverse=True)
        return [
            ChurnRisk(
                product=product.name,
                category=product.category,
                churn_risk=round(score, 1),
                recommendation=churn_label(score),
            )
            for score, product in scored[:CHURN_LIMIT]
        ]

    def sentiment_analysis(self, products: Sequence[ProductRecord]) -> list[SentimentScore]:
        scores: list[SentimentScore] = []
        for product in normalize(products)[:SENTIMENT_LIMIT]:
            sentiment = (product.rating - 2.5) / 2.5
            scores.append(
                SentimentScore(
                    product=product.name,
                    sentiment=round(sentiment * 100, 1),
                    volume=js_round(min(100, product.reviews)),
                    trend=sentiment_trend(sentiment),
                )
            )
        return scores

    def snapshot(self, products: Sequence[ProductRecord]) -> AnalyticsSnapshot:
        snapshot = AnalyticsSnapshot(
            clusters=self.cluster_products(products),
            forecasts=self.forecast_sales(products),
            elasticity=self.price_elasticity(products),
            lifetime_value=self.predict_clv(products),
            churn=self.churn_risk(products),
            sentiment=self.sentiment_analysis(products),
        )
        logger.debug(
            "analytics_snapshot_computed",
            product_count=len(products),
            high=len(snapshot.clusters.high),
            medium=len(snapshot.clusters.medium),
            low=len(snapshot.clusters.low),
        )
        return snapshot


__all__ = [
    "AnalyticsEngine",
    "AnalyticsProduct",
    "AnalyticsSnapshot",
    "CategoryLifetimeValue",
    "ChurnRisk",
    "ClusterAssignment",
    "PriceElasticity",
    "SalesForecast",
    "SentimentScore",
    "churn_label",
    "churn_score",
    "cluster_score",
    "sentiment_trend",
]
