"""User DTOs for application layer using Pydantic."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from user_management.domain.entities.user import User


class CreateUserDTO(BaseModel):
    """
    DTO for creating a user.

    Only the request shape is checked here. Empty names or emails and
    short passwords are rejected by the User entity, so those rules live
    in one place and surface as 400 responses.
    """

    name: str
    email: str
    password: str = Field(..., repr=False)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "John Doe",
                "email": "john@example.com",
                "password": "password123",
            }
        }
    )


class UpdateUserDTO(BaseModel):
    """DTO for replacing a user's name and email. Both fields are required."""

    name: str
    email: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "John Updated",
                "email": "john.updated@example.com",
            }
        }
    )


class UserDTO(BaseModel):
    """DTO for returning user data to presentation layer. Never carries the password."""

    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        """
        Convert a PERSISTED domain entity to DTO.

        PRECONDITION: The user entity MUST be persisted (have id, created_at, updated_at).
        This method should only be called on entities returned from the user service,
        never on newly constructed entities before persistence.

        Args:
            user: User domain entity (must be persisted)

        Returns:
            UserDTO instance

        Raises:
            ValueError: If the entity is not persisted (missing id, created_at, or updated_at)
        """
        if user.id is None:
            raise ValueError(
                "Cannot create UserDTO from non-persisted entity: missing id. "
                "Ensure the entity has been saved via repository before converting to DTO."
            )

        if user.created_at is None or user.updated_at is None:
            raise ValueError(
                "Cannot create UserDTO from non-persisted entity: missing timestamps. "
                "Ensure the entity has been saved via repository before converting to DTO."
            )

        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
