"""Domain models for accounts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class AccountRole(str, Enum):
    ADMIN = "admin"
    USER = "user"


@dataclass(slots=True)
class AccountProfile:
    """Outward view of an account; carries no credentials."""

    id: str
    username: str
    email: str
    role: AccountRole
    is_logged_in: bool
    name: Optional[str] = None
    lastname: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(slots=True)
class Account:
    id: str
    username: str
    email: str
    role: AccountRole
    password_hash: str = field(repr=False)
    is_logged_in: bool = False
    current_token: str = field(default="", repr=False)
    name: Optional[str] = None
    lastname: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_admin(self) -> bool:
        return self.role is AccountRole.ADMIN

    def has_session(self, token: str) -> bool:
        return self.is_logged_in and bool(token) and self.current_token == token

    def profile(self) -> AccountProfile:
        return AccountProfile(
            id=self.id,
            username=self.username,
            email=self.email,
            role=self.role,
            is_logged_in=self.is_logged_in,
            name=self.name,
            lastname=self.lastname,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


@dataclass(slots=True)
class AccountDraft:
    """Values for a new account, with the password already hashed."""

    email: str
    username: str
    password_hash: str = field(repr=False)
    role: AccountRole = AccountRole.USER
    name: Optional[str] = None
    lastname: Optional[str] = None
