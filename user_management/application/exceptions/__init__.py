"""Application layer exceptions."""

from user_management.application.exceptions.exceptions import (
    ApplicationError,
    UserAlreadyExistsError,
)

__all__ = ["ApplicationError", "UserAlreadyExistsError"]
