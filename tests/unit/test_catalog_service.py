"""Unit tests for catalog validation and mutations."""

from __future__ import annotations

import pytest
from src.domain.identifiers import next_timestamp_id
from src.domain.models import ProductDraft
from src.domain.services.catalog_service import (
    CatalogService,
    ProductNotFoundError,
    parse_float,
    parse_int,
    validate,
)
from src.domain.state import AppState
from src.infrastructure.repositories.record_store import RecordStore
from tests.utils import build_draft


class TestParsing:
    """Tests for form value parsing."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("12.5", 12.5), (" 3 ", 3.0), (7, 7.0), ("abc", None), ("", None), (None, None), ("nan", None)],
    )
    def test_parse_float(self, raw: object, expected: float | None) -> None:
        assert parse_float(raw) == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("12", 12), ("5.0", 5), ("-3", -3), ("5.5", None), ("x", None), (None, None)],
    )
    def test_parse_int(self, raw: object, expected: int | None) -> None:
        assert parse_int(raw) == expected


class TestValidate:
    """Tests for field-level validation."""

    def test_valid_draft_has_no_errors(self) -> None:
        assert validate(build_draft()) == {}

    def test_every_invalid_field_is_reported(self) -> None:
        draft = ProductDraft(name="   ", category="", price="0", stock="-1")

        errors = validate(draft)

        assert errors == {
            "name": "Product name is required",
            "category": "Category is required",
            "price": "Valid price is required",
            "stock": "Valid stock quantity is required",
        }

    def test_zero_stock_is_valid(self) -> None:
        assert validate(build_draft({"stock": "0"})) == {}

    def test_unparseable_numbers_are_invalid(self) -> None:
        errors = validate(build_draft({"price": "cheap", "stock": "lots"}))

        assert set(errors) == {"price", "stock"}


class TestCreate:
    """Tests for product creation."""

    def test_create_appends_and_persists(
        self, state: AppState, catalog_service: CatalogService, store: RecordStore
    ) -> None:
        before = len(state.products)

        result = catalog_service.create(state, build_draft())

        assert result.ok
        product = result.product
        assert product is not None
        assert product.name == "Desk Lamp"
        assert product.price == 39.99
        assert product.stock == 25
        assert product.rating == 4.2
        assert product.reviews == 80
        assert product.sales == 0
        assert len(state.products) == before + 1
        assert store.load_products() == state.products

    def test_create_defaults_rating_and_reviews(
        self, state: AppState, catalog_service: CatalogService
    ) -> None:
        result = catalog_service.create(state, build_draft({"rating": "", "reviews": "n/a"}))

        assert result.product is not None
        assert result.product.rating == 4.5
        assert result.product.reviews == 100

    def test_create_assigns_unique_ids(
        self, state: AppState, catalog_service: CatalogService
    ) -> None:
        first = catalog_service.create(state, build_draft()).product
        second = catalog_service.create(state, build_draft()).product

        assert first is not None and second is not None
        assert first.id != second.id
        assert len({p.id for p in state.products}) == len(state.products)

    def test_invalid_create_returns_errors_without_mutation(
        self, state: AppState, catalog_service: CatalogService, store: RecordStore
    ) -> None:
        before = list(state.products)

        result = catalog_service.create(state, build_draft({"price": "-5"}))

        assert not result.ok
        assert result.product is None
        assert result.errors == {"price": "Valid price is required"}
        assert state.products == before
        assert store.kv.get(store.products_key) is None


class TestUpdate:
    """Tests for product updates."""

    def test_update_preserves_id_and_sales(
        self, state: AppState, catalog_service: CatalogService
    ) -> None:
        original = state.products[0]

        result = catalog_service.update(
            state, original.id, build_draft({"name": "Renamed", "price": "10"})
        )

        assert result.product is not None
        assert result.product.id == original.id
        assert result.product.sales == original.sales
        assert result.product.name == "Renamed"
        assert state.products[0] == result.product

    def test_create_then_update_keeps_sales(
        self, state: AppState, catalog_service: CatalogService
    ) -> None:
        created = catalog_service.create(state, build_draft()).product
        assert created is not None

        updated = catalog_service.update(state, created.id, build_draft({"stock": "3"})).product

        assert updated is not None
        assert updated.sales == 0
        assert updated.stock == 3

    def test_invalid_update_does_not_reach_storage(
        self, state: AppState, catalog_service: CatalogService, store: RecordStore
    ) -> None:
        target = state.products[0]

        result = catalog_service.update(state, target.id, build_draft({"price": "0", "stock": "-2"}))

        assert set(result.errors) == {"price", "stock"}
        assert state.products[0] == target
        assert store.kv.get(store.products_key) is None

    def test_update_unknown_id_raises(
        self, state: AppState, catalog_service: CatalogService
    ) -> None:
        with pytest.raises(ProductNotFoundError):
            catalog_service.update(state, 999_999, build_draft())

    def test_edit_prefill_round_trip(
        self, state: AppState, catalog_service: CatalogService
    ) -> None:
        original = state.products[1]

        result = catalog_service.update(state, original.id, ProductDraft.from_product(original))

        assert result.product == original


class TestDelete:
    """Tests for product deletion."""

    def test_delete_removes_and_persists(
        self, state: AppState, catalog_service: CatalogService, store: RecordStore
    ) -> None:
        target = state.products[0]

        removed = catalog_service.delete(state, target.id)

        assert removed == target
        assert state.find_product(target.id) is None
        assert target.id not in {p.id for p in store.load_products()}

    def test_delete_last_product_persists_empty_catalog(
        self, state: AppState, catalog_service: CatalogService, store: RecordStore
    ) -> None:
        for product in list(state.products):
            catalog_service.delete(state, product.id)

        assert state.products == []
        assert store.load_products() == []

    def test_delete_unknown_id_raises(
        self, state: AppState, catalog_service: CatalogService
    ) -> None:
        with pytest.raises(ProductNotFoundError):
            catalog_service.delete(state, 424242)


class TestTimestampIds:
    """Tests for id generation."""

    def test_uses_clock_when_free(self) -> None:
        assert next_timestamp_id([1, 2], clock=lambda: 1_700_000_000_000) == 1_700_000_000_000

    def test_bumps_past_taken_ids(self) -> None:
        taken = [1_700_000_000_000, 1_700_000_000_001]

        assert next_timestamp_id(taken, clock=lambda: 1_700_000_000_000) == 1_700_000_000_002
