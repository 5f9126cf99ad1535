"""Reusable FastAPI dependencies."""

from .database import get_db_session
from .account import (
    get_account_repository,
    get_auth_service,
    get_bearer_token,
    get_container,
    get_current_account,
    get_session_guard,
)

__all__ = [
    "get_db_session",
    "get_account_repository",
    "get_auth_service",
    "get_bearer_token",
    "get_container",
    "get_current_account",
    "get_session_guard",
]
