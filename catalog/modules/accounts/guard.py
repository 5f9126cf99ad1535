"""Session-bound bearer token verification for protected endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from catalog.core.security import TokenError, TokenIssuer

from .exceptions import AuthenticationError, InternalError
from .models import AccountProfile
from .repository import AccountRepository

logger = logging.getLogger(__name__)

TOKEN_REQUIRED = "Authorization token is required."


class SessionGuard:
    """Admits a request only if its token is validly signed AND is the
    session token currently stored for the account it names.

    The store check is what lets logout and re-login revoke tokens that are
    still cryptographically valid. Every call re-reads the store.
    """

    def __init__(self, repository: AccountRepository, token_issuer: TokenIssuer) -> None:
        self._repository = repository
        self._tokens = token_issuer

    async def authenticate(self, token: Optional[str]) -> AccountProfile:
        if not token:
            raise AuthenticationError(TOKEN_REQUIRED)

        try:
            claims = self._tokens.verify(token)
        except TokenError as exc:
            logger.debug("Rejected bearer token: %s (%s)", type(exc).__name__, exc)
            raise AuthenticationError() from exc

        account_id = claims.get("sub")
        if not isinstance(account_id, str) or not account_id:
            logger.debug("Rejected bearer token without subject claim")
            raise AuthenticationError()

        try:
            account = await self._repository.find_by_session(account_id, token)
        except SQLAlchemyError as exc:
            logger.exception("Session lookup failed for account %s", account_id)
            raise InternalError() from exc

        if account is None or not account.has_session(token):
            logger.debug("Rejected superseded or revoked token for account %s", account_id)
            raise AuthenticationError()
        return account.profile()


__all__ = ["SessionGuard", "TOKEN_REQUIRED"]
