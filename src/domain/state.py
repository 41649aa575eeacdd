from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from src.domain.models import ProductRecord, UserAccount

if TYPE_CHECKING:
    from src.infrastructure.repositories.record_store import RecordStore


@dataclass
class AppState:
    """Explicit application state handed to every auth and catalog operation.

    ``current_user`` is ``None`` while anonymous.
    """

    users: list[UserAccount] = field(default_factory=list)
    products: list[ProductRecord] = field(default_factory=list)
    current_user: UserAccount | None = None

    @classmethod
    def load(cls, store: RecordStore) -> AppState:
        """Hydrate state from the record store (seed data on first run)."""
        return cls(
            users=store.load_users(),
            products=store.load_products(),
            current_user=store.load_session(),
        )

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def find_user_by_email(self, email: str) -> UserAccount | None:
        return next((user for user in self.users if user.email == email), None)

    def find_product(self, product_id: int) -> ProductRecord | None:
        return next((product for product in self.products if product.id == product_id), None)
