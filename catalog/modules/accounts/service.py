"""Registration, login, logout and session lookup."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError

from catalog.core.crypto import PasswordHasher, PasswordHashingError
from catalog.core.security import TokenError, TokenIssuer

from .exceptions import (
    AuthError,
    DuplicateAccountError,
    InternalError,
    InvalidCredentialsError,
    SessionNotFoundError,
    ValidationError,
)
from .models import AccountDraft, AccountProfile, AccountRole
from .repository import AccountRepository

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("name", "lastname")


def _missing(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


class AuthService:
    """Encapsulates the account session use cases.

    Every operation validates its input before touching the repository.
    Persistence and crypto failures are logged here and surface as
    :class:`InternalError` so their details never reach the client.
    """

    def __init__(
        self,
        repository: AccountRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ) -> None:
        self._repository = repository
        self._hasher = password_hasher
        self._tokens = token_issuer

    async def register(
        self,
        email: Optional[str],
        password: Optional[str],
        username: Optional[str] = None,
        profile: Optional[Mapping[str, Any]] = None,
        *,
        role: AccountRole = AccountRole.USER,
    ) -> AccountProfile:
        if _missing(email) or _missing(password):
            raise ValidationError("Email and password are required.")

        async with self._internal_failure("register account", email=email):
            existing = await self._repository.find_by_email(email)
            if existing is not None:
                raise DuplicateAccountError(f"User with email {email} already exists")

            # bcrypt is deliberately slow; keep it off the event loop.
            password_hash = await asyncio.to_thread(self._hasher.hash, password)
            fields = {key: (profile or {}).get(key) for key in PROFILE_FIELDS}
            account = await self._repository.insert(
                AccountDraft(
                    email=email,
                    username=username or email,
                    password_hash=password_hash,
                    role=role,
                    **fields,
                )
            )

        logger.info("Registered account %s (%s)", account.id, account.email)
        return account.profile()

    async def login(self, email: Optional[str], password: Optional[str]) -> tuple[AccountProfile, str]:
        if _missing(email) or _missing(password):
            raise ValidationError("Email and password are required.")

        async with self._internal_failure("log in", email=email):
            account = await self._repository.find_by_email(email)
            if account is None:
                logger.info("Login failed for %s: unknown email", email)
                raise InvalidCredentialsError()

            if not await asyncio.to_thread(self._hasher.verify, password, account.password_hash):
                logger.info("Login failed for %s: wrong password", email)
                raise InvalidCredentialsError()

            token = self._tokens.issue({"sub": account.id, "email": account.email})
            # Overwriting the stored token is what revokes the previous session.
            account = await self._repository.set_session(account.id, token, True)

        logger.info("Account %s logged in", account.id)
        return account.profile(), token

    async def logout(self, token: Optional[str]) -> AccountProfile:
        if _missing(token):
            raise ValidationError("Token is required to log out.")

        async with self._internal_failure("log out"):
            account = await self._repository.find_by_token(token)
            if account is None:
                raise SessionNotFoundError()
            account = await self._repository.set_session(account.id, "", False)

        logger.info("Account %s logged out", account.id)
        return account.profile()

    async def current_account(self, token: Optional[str]) -> AccountProfile | None:
        """Resolve the account holding ``token``.

        Soft-fails: an unknown token and a failed lookup both return ``None``.
        """
        if _missing(token):
            return None
        try:
            account = await self._repository.find_by_token(token)
        except SQLAlchemyError:
            logger.exception("Current account lookup failed")
            return None
        if account is None:
            logger.debug("No account holds the presented token")
            return None
        return account.profile()

    @asynccontextmanager
    async def _internal_failure(self, action: str, **context: Any) -> AsyncIterator[None]:
        try:
            yield
        except AuthError:
            raise
        except (SQLAlchemyError, PasswordHashingError, TokenError) as exc:
            logger.exception("Failed to %s %s", action, context or "")
            raise InternalError() from exc

