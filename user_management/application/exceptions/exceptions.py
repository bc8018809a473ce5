"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class UserAlreadyExistsError(ApplicationError):
    """Raised when attempting to create a user with an already registered email."""

    def __init__(self, message: str = "Email already registered"):
        super().__init__(message, error_code="USER_ALREADY_EXISTS")
