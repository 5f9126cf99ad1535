"""Account and session domain exceptions.

Each error carries the HTTP status it maps to and a client-safe message; the
HTTP layer renders them without inspecting the concrete type.
"""


class AuthError(Exception):
    """Base class for account and session errors."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AuthError):
    """Raised when required input fields are missing or malformed."""

    status_code = 400
    default_message = "Invalid request"


class DuplicateAccountError(AuthError):
    """Raised when the email or username is already registered."""

    status_code = 409
    default_message = "User already exists"


class AuthenticationError(AuthError):
    """Raised when a request cannot be tied to a live session."""

    status_code = 401
    default_message = "Unauthorized"


class InvalidCredentialsError(AuthenticationError):
    """Raised on unknown email or wrong password; both look identical."""

    default_message = "Invalid credentials"


class SessionNotFoundError(AuthError):
    """Raised when a token matches no current session."""

    status_code = 404
    default_message = "User not found or token is invalid"


class AccountNotFoundError(AuthError):
    """Raised when a write targets an account id that does not exist."""

    status_code = 404
    default_message = "Account not found"


class InternalError(AuthError):
    """Raised when hashing, signing or persistence fails."""


__all__ = [
    "AccountNotFoundError",
    "AuthError",
    "AuthenticationError",
    "DuplicateAccountError",
    "InternalError",
    "InvalidCredentialsError",
    "SessionNotFoundError",
    "ValidationError",
]
