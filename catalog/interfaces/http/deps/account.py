"""Account related dependency providers."""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.container import ApplicationContainer
from catalog.infrastructure.database.repositories.account_repository import SqlAccountRepository
from catalog.modules.accounts import AccountProfile, AuthService, SessionGuard

from .database import get_db_session

bearer_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_account_repository(db: AsyncSession = Depends(get_db_session)) -> SqlAccountRepository:
    return SqlAccountRepository(db)


def get_auth_service(
    repository: SqlAccountRepository = Depends(get_account_repository),
    container: ApplicationContainer = Depends(get_container),
) -> AuthService:
    return AuthService(repository, container.password_hasher, container.token_issuer)


def get_session_guard(
    repository: SqlAccountRepository = Depends(get_account_repository),
    container: ApplicationContainer = Depends(get_container),
) -> SessionGuard:
    return SessionGuard(repository, container.token_issuer)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    if credentials is None:
        return None
    return credentials.credentials


async def get_current_account(
    request: Request,
    token: Optional[str] = Depends(get_bearer_token),
    guard: SessionGuard = Depends(get_session_guard),
) -> AccountProfile:
    account = await guard.authenticate(token)
    request.state.account = account
    return account


__all__ = [
    "bearer_scheme",
    "get_account_repository",
    "get_auth_service",
    "get_bearer_token",
    "get_container",
    "get_current_account",
    "get_session_guard",
]
