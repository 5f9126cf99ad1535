"""Account domain services and models."""

from .exceptions import (
    AccountNotFoundError,
    AuthError,
    AuthenticationError,
    DuplicateAccountError,
    InternalError,
    InvalidCredentialsError,
    SessionNotFoundError,
    ValidationError,
)
from .guard import SessionGuard
from .models import Account, AccountDraft, AccountProfile, AccountRole
from .repository import AccountRepository
from .service import AuthService

__all__ = [
    "Account",
    "AccountDraft",
    "AccountNotFoundError",
    "AccountProfile",
    "AccountRepository",
    "AccountRole",
    "AuthError",
    "AuthService",
    "AuthenticationError",
    "DuplicateAccountError",
    "InternalError",
    "InvalidCredentialsError",
    "SessionGuard",
    "SessionNotFoundError",
    "ValidationError",
]
