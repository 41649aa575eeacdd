"""Authentication service: sign-in, sign-up, sign-out and account management."""

from __future__ import annotations

import secrets
from collections.abc import Callable
from datetime import date

import structlog
from src.core.config import Settings, get_settings
from src.domain.identifiers import next_timestamp_id
from src.domain.models import UserAccount, UserRole
from src.domain.state import AppState
from src.infrastructure.repositories.record_store import RecordStore

logger = structlog.get_logger(__name__)

PROFILE_FIELDS = frozenset({"name", "email", "profile_pic", "role"})


class AuthError(Exception):
    """Base exception for authentication errors."""

    pass


class InvalidCredentialsError(AuthError):
    """Raised when login credentials do not match any account."""

    pass


class UserExistsError(AuthError):
    """Raised when an email is already registered."""

    pass


class MissingFieldsError(AuthError):
    """Raised when a required account field is empty."""

    pass


class NotAuthenticatedError(AuthError):
    """Raised when a privileged action is attempted without a session."""

    pass


def credentials_match(account: UserAccount, email: str, password: str) -> bool:
    """Exact, case-sensitive comparison of email and password."""
    return account.email == email and secrets.compare_digest(
        account.password.encode("utf-8"), password.encode("utf-8")
    )


class AuthService:
    """Service for session and account operations over an :class:`AppState`."""

    def __init__(
        self,
        store: RecordStore,
        settings: Settings | None = None,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.store = store
        self.settings = settings or get_settings()
        self._today = today

    def sign_in(self, state: AppState, *, email: str, password: str) -> UserAccount:
        """Authenticate against the user list and establish the session."""
        logger.info("sign_in_attempt", email=email)

        user = next((u for u in state.users if credentials_match(u, email, password)), None)
        if user is None:
            logger.warning("sign_in_failed", email=email)
            raise InvalidCredentialsError("Invalid credentials. Please try again.")

        state.current_user = user
        self.store.set_session(user)

        logger.info("sign_in_success", user_id=user.id, email=email)
        return user

    def sign_up(
        self,
        state: AppState,
        *,
        email: str,
        password: str,
        name: str,
        profile_pic: str | None = None,
    ) -> UserAccount:
        """
        Register a new administrator and sign them in.

        Raises:
            MissingFieldsError: email, password or name is empty
            UserExistsError: email already registered
        """
        if not email or not password or not name:
            raise MissingFieldsError("All fields are required")

        if state.find_user_by_email(email) is not None:
            logger.warning("sign_up_duplicate_email", email=email)
            raise UserExistsError("Email already registered")

        user = self._append_account(
            state, email=email, password=password, name=name, profile_pic=profile_pic
        )
        state.current_user = user
        self.store.set_session(user)

        logger.info("sign_up_success", user_id=user.id, email=email)
        return user

    def sign_out(self, state: AppState) -> None:
        previous = state.current_user
        state.current_user = None
        self.store.clear_session()
        logger.info("sign_out", user_id=previous.id if previous else None)

    def add_administrator(
        self,
        state: AppState,
        *,
        email: str,
        password: str,
        name: str,
        profile_pic: str | None = None,
    ) -> UserAccount:
        """Create another "Admin" account without touching the caller's session."""
        caller = self._require_user(state)

        if not email or not password or not name:
            raise MissingFieldsError("Name, email, and password are required")

        if state.find_user_by_email(email) is not None:
            logger.warning("administrator_duplicate_email", email=email, added_by=caller.id)
            raise UserExistsError("Email already exists")

        user = self._append_account(
            state, email=email, password=password, name=name, profile_pic=profile_pic
        )
        logger.info("administrator_added", user_id=user.id, email=email, added_by=caller.id)
        return user

    def update_profile(self, state: AppState, **fields: str) -> UserAccount:
        """
        Merge profile fields into the current account and its stored record.

        Raises:
            MissingFieldsError: name or email given as empty
            UserExistsError: new email belongs to another account
            ValidationError: a field value has the wrong type
        """
        current = self._require_user(state)

        unknown = set(fields) - PROFILE_FIELDS
        if unknown:
            raise ValueError(f"Unsupported profile field(s): {', '.join(sorted(unknown))}")

        for required in ("name", "email"):
            if required in fields and not str(fields[required] or "").strip():
                raise MissingFieldsError("Name and email cannot be empty")

        new_email = fields.get("email")
        if new_email is not None and new_email != current.email:
            if state.find_user_by_email(new_email) is not None:
                logger.warning("profile_update_duplicate_email", email=new_email)
                raise UserExistsError("Email already registered")

        # raises ValidationError before anything is written
        updated = UserAccount.model_validate({**current.model_dump(), **fields})
        state.users = [updated if u.email == current.email else u for u in state.users]
        state.current_user = updated

        self.store.save_users(state.users)
        self.store.set_session(updated)

        logger.info("profile_updated", user_id=updated.id, fields=sorted(fields))
        return updated

    def _append_account(
        self,
        state: AppState,
        *,
        email: str,
        password: str,
        name: str,
        profile_pic: str | None,
    ) -> UserAccount:
        user = UserAccount(
            id=next_timestamp_id(u.id for u in state.users),
            email=email,
            password=password,
            name=name,
            profile_pic=profile_pic or self.settings.default_profile_pic,
            role=UserRole.ADMIN.value,
            join_date=self._today(),
        )
        state.users = [*state.users, user]
        self.store.save_users(state.users)
        return user

    def _require_user(self, state: AppState) -> UserAccount:
        if state.current_user is None:
            raise NotAuthenticatedError("Sign in required")
        return state.current_user
