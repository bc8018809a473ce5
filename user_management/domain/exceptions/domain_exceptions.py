"""Domain layer exceptions for invariant violations and missing records."""


class DomainException(Exception):
    """
    Base exception for domain layer.

    Domain exceptions represent broken invariants or contract outcomes
    that callers are expected to branch on.

    Examples:
        - Invalid entity state (empty name, short password)
        - Referenced record does not exist
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidEntityStateException(DomainException):
    """Raised when input would put an entity in an invalid state."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ENTITY_STATE")


class UserNotFoundError(DomainException):
    """
    Raised by repositories when no user matches the given id or email.

    Kept distinct from storage failures: the user service relies on it to
    tell "no such user" apart from "lookup failed".
    """

    def __init__(self, message: str = "User not found"):
        super().__init__(message, error_code="USER_NOT_FOUND")
