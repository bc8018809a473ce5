"""User domain entity - pure business logic, no infrastructure."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from user_management.domain.exceptions import InvalidEntityStateException

MIN_PASSWORD_LENGTH = 8


@dataclass
class User:
    """
    User domain entity representing one registered account.

    This is a pure Python class with NO dependencies on SQLAlchemy,
    FastAPI, or any framework. New users are built with ``User.create``;
    the plain constructor is what repositories use to rehydrate stored rows.

    The password is an opaque string. It is never hashed here and must
    never leave the application layer in a response.
    """

    name: str
    email: str
    password: str
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """
        Validate structural invariants at construction time.

        A user cannot exist, persisted or not, without a name and an email.
        """
        _require_name_and_email(self.name, self.email)

    @classmethod
    def create(cls, name: str, email: str, password: str) -> "User":
        """
        Construct a new, not yet persisted user.

        Business rules:
        1. Name and email must not be empty
        2. Password must be at least 8 characters

        Args:
            name: Display name
            email: Email address, the account's uniqueness key
            password: Opaque password string

        Returns:
            User without an id, with created_at == updated_at == now

        Raises:
            InvalidEntityStateException: If any rule is violated
        """
        _require_name_and_email(name, email)

        if len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidEntityStateException(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters."
            )

        now = datetime.now(timezone.utc)
        return cls(
            name=name,
            email=email,
            password=password,
            created_at=now,
            updated_at=now,
        )

    def update(self, name: str, email: str) -> None:
        """
        Replace name and email, refreshing updated_at.

        The entity is left untouched if validation fails. id, password
        and created_at are never modified.

        Args:
            name: The new name
            email: The new email

        Raises:
            InvalidEntityStateException: If name or email is empty
        """
        _require_name_and_email(name, email)

        self.name = name
        self.email = email
        self.updated_at = self._next_timestamp()

    def _next_timestamp(self) -> datetime:
        # updated_at must strictly increase even if the clock has not moved
        now = datetime.now(timezone.utc)
        if self.updated_at is not None and now <= self.updated_at:
            return self.updated_at + timedelta(microseconds=1)
        return now


def _require_name_and_email(name: str, email: str) -> None:
    if not name:
        raise InvalidEntityStateException(
            "Name cannot be empty. User must have a valid name."
        )

    if not email:
        raise InvalidEntityStateException(
            "Email cannot be empty. User must have a valid email address."
        )
