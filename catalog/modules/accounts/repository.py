"""Repository protocol for accounts."""

from __future__ import annotations

from typing import Protocol

from .models import Account, AccountDraft


class AccountRepository(Protocol):
    """Credential store: account records with unique email and username.

    Every write is atomic for its own record. ``set_session`` changes the
    stored token and the logged-in flag together.
    """

    async def find_by_id(self, account_id: str) -> Account | None:
        ...

    async def find_by_email(self, email: str) -> Account | None:
        ...

    async def find_by_username(self, username: str) -> Account | None:
        ...

    async def find_by_token(self, token: str) -> Account | None:
        ...

    async def find_by_session(self, account_id: str, token: str) -> Account | None:
        ...

    async def insert(self, draft: AccountDraft) -> Account:
        ...

    async def set_session(self, account_id: str, token: str, is_logged_in: bool) -> Account:
        ...
