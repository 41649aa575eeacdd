"""Pydantic documents for the records kept in the key-value store."""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_RATING = 4.5
DEFAULT_REVIEWS = 100


class UserRole(str, Enum):
    """Roles assigned by this core. Stored roles are open text."""

    SUPER_ADMIN = "Super Admin"
    MANAGER = "Manager"
    ADMIN = "Admin"


class StoredDocument(BaseModel):
    """Base for documents persisted with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    def to_document(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class UserAccount(StoredDocument):
    """An administrator account."""

    id: int
    email: str
    password: str
    name: str
    profile_pic: str = ""
    role: str = UserRole.ADMIN.value
    join_date: date


class ProductRecord(StoredDocument):
    """A catalog product.

    ``rating`` and ``reviews`` may be absent on legacy documents; the analytics
    engine substitutes defaults for them.
    """

    id: int
    name: str
    category: str
    price: float
    stock: int
    rating: float | None = None
    reviews: int | None = None
    sales: int = 0
    image: str = ""


class ProductDraft(BaseModel):
    """Raw product form input, before validation and coercion."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    category: str = ""
    price: str | float | int | None = None
    stock: str | float | int | None = None
    rating: str | float | int | None = None
    reviews: str | float | int | None = None
    image: str = Field(default="")

    @classmethod
    def from_product(cls, product: ProductRecord) -> ProductDraft:
        """Prefill a draft from an existing product, as the edit form does."""
        return cls(
            name=product.name,
            category=product.category,
            price=str(product.price),
            stock=str(product.stock),
            rating=str(product.rating if product.rating is not None else DEFAULT_RATING),
            reviews=str(product.reviews if product.reviews is not None else DEFAULT_REVIEWS),
            image=product.image,
        )


__all__ = [
    "DEFAULT_RATING",
    "DEFAULT_REVIEWS",
    "ProductDraft",
    "ProductRecord",
    "StoredDocument",
    "UserAccount",
    "UserRole",
]
