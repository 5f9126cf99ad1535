"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from functools import lru_cache

from catalog.core.config import Settings, get_settings
from catalog.core.crypto import PasswordHasher
from catalog.core.security import TokenIssuer
from catalog.infrastructure.database.session import get_engine


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    password_hasher: PasswordHasher = field(init=False)
    token_issuer: TokenIssuer = field(init=False)

    def __post_init__(self) -> None:
        security = self.settings.security
        self.password_hasher = PasswordHasher(rounds=security.password_hash_rounds)
        self.token_issuer = TokenIssuer(
            secret_key=security.secret_key,
            algorithm=security.algorithm,
            expires_delta=timedelta(minutes=security.access_token_expire_minutes),
        )

    def init_infrastructure(self) -> None:
        """Ensure infrastructure singletons (database engine, etc.) are initialised."""
        get_engine(self.settings)


@lru_cache()
def get_container() -> ApplicationContainer:
    container = ApplicationContainer(settings=get_settings())
    container.init_infrastructure()
    return container


__all__ = ["ApplicationContainer", "get_container"]
