"""User ORM model - infrastructure layer SQLAlchemy mapping."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from user_management.domain.entities.user import User
from user_management.infrastructure.persistence.database import Base


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; every stored timestamp is UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class UserModel(Base):
    """
    SQLAlchemy ORM model for users table.

    This is an INFRASTRUCTURE detail that maps domain entities to database rows.
    The domain layer never imports this class.

    Timestamps are written from the entity, which owns them, rather than
    by database defaults.
    """

    __tablename__ = "users"

    # Primary key, assigned by the repository on insert
    id: Mapped[str] = mapped_column(String(36), primary_key=True)

    # User information
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )

    # Opaque, stored as given
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        """String representation of UserModel."""
        return f"UserModel(id={self.id!r}, email={self.email!r}, name={self.name!r})"

    def to_entity(self) -> User:
        """
        Convert ORM model to domain entity.

        Returns:
            User domain entity
        """
        return User(
            id=self.id,
            name=self.name,
            email=self.email,
            password=self.password,
            created_at=_as_utc(self.created_at),
            updated_at=_as_utc(self.updated_at),
        )

    @staticmethod
    def from_entity(user: User) -> "UserModel":
        """
        Create ORM model from domain entity.

        Args:
            user: Domain entity carrying an id and both timestamps

        Returns:
            ORM model ready for insertion
        """
        return UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            password=user.password,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
