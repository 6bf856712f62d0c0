"""Domain errors raised by the service layer and translated at the HTTP boundary."""


class ServiceError(Exception):
    """Base class for request-level failures with a client-safe message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AuthenticationError(ServiceError):
    """
    Raised when signin credentials are rejected.

    The message is the same whether the email is unknown or the password is
    wrong, so callers cannot enumerate registered accounts.
    """


class ConflictError(ServiceError):
    """Raised when signup hits an email that is already registered."""


class AuthorizationError(ServiceError):
    """Raised when a user mutates a bookmark they do not own (or that does not exist)."""
