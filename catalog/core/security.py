"""Signed bearer tokens (JWT) carrying account identity claims."""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

from jose import ExpiredSignatureError, JWTError, jwt

DEFAULT_TOKEN_TTL = timedelta(days=7)


class TokenError(Exception):
    """Base class for token verification failures."""


class InvalidTokenError(TokenError):
    """Signature or claims do not match."""


class ExpiredTokenError(TokenError):
    """The embedded expiry has passed."""


class MalformedTokenError(TokenError):
    """The token cannot be parsed at all."""


class TokenIssuer:
    """Issues and verifies HMAC-signed JWTs.

    Tokens are stateless: the issuer cannot revoke them. Revocation happens
    in the account store, which only keeps the latest token per account.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_delta: timedelta = DEFAULT_TOKEN_TTL,
    ) -> None:
        if not secret_key:
            raise ValueError("JWT secret key is not defined")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expires_delta = expires_delta

    @property
    def expires_delta(self) -> timedelta:
        return self._expires_delta

    def issue(self, claims: Mapping[str, Any], expires_delta: timedelta | None = None) -> str:
        now = datetime.now(timezone.utc)
        payload = dict(claims)
        payload.setdefault("jti", uuid.uuid4().hex)
        payload["iat"] = now
        payload["exp"] = now + (expires_delta or self._expires_delta)
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        """Return the decoded claims or raise a :class:`TokenError` subclass."""
        try:
            jwt.get_unverified_header(token)
            jwt.get_unverified_claims(token)
        except JWTError as exc:
            raise MalformedTokenError(str(exc)) from exc

        try:
            return jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except ExpiredSignatureError as exc:
            raise ExpiredTokenError(str(exc)) from exc
        except JWTError as exc:
            raise InvalidTokenError(str(exc)) from exc


__all__ = [
    "DEFAULT_TOKEN_TTL",
    "ExpiredTokenError",
    "InvalidTokenError",
    "MalformedTokenError",
    "TokenError",
    "TokenIssuer",
]
