"""Domain exceptions - invariant violations and repository outcomes."""

from user_management.domain.exceptions.domain_exceptions import (
    DomainException,
    InvalidEntityStateException,
    UserNotFoundError,
)

__all__ = [
    "DomainException",
    "InvalidEntityStateException",
    "UserNotFoundError",
]
