"""SQLAlchemy implementation of the account repository."""

from __future__ import annotations

from sqlalchemy import or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from catalog.db.models import Account as AccountModel
from catalog.modules.accounts.exceptions import AccountNotFoundError, DuplicateAccountError
from catalog.modules.accounts.models import Account, AccountDraft, AccountRole
from catalog.modules.accounts.repository import AccountRepository


class SqlAccountRepository(AccountRepository):
    """Account repository backed by SQLAlchemy models.

    Writes commit before returning: a login or logout must be visible to the
    next request, which may arrive before the request session is closed.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, account_id: str) -> Account | None:
        return await self._find_one(AccountModel.id == account_id)

    async def find_by_email(self, email: str) -> Account | None:
        return await self._find_one(AccountModel.email == email)

    async def find_by_username(self, username: str) -> Account | None:
        return await self._find_one(AccountModel.username == username)

    async def find_by_token(self, token: str) -> Account | None:
        # Logged-out accounts store "", which must never match.
        if not token:
            return None
        return await self._find_one(AccountModel.current_token == token)

    async def find_by_session(self, account_id: str, token: str) -> Account | None:
        if not token:
            return None
        return await self._find_one(
            AccountModel.id == account_id,
            AccountModel.current_token == token,
        )

    async def insert(self, draft: AccountDraft) -> Account:
        stmt = select(AccountModel.email, AccountModel.username).where(
            or_(AccountModel.email == draft.email, AccountModel.username == draft.username)
        )
        result = await self._session.execute(stmt)
        clash = result.first()
        if clash is not None:
            if clash.email == draft.email:
                raise DuplicateAccountError(f"User with email {draft.email} already exists")
            raise DuplicateAccountError(f"User with username {draft.username} already exists")

        model = AccountModel(
            email=draft.email,
            username=draft.username,
            password_hash=draft.password_hash,
            role=draft.role.value,
            name=draft.name,
            lastname=draft.lastname,
            is_logged_in=False,
            current_token="",
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            # Lost a race with a concurrent insert of the same email/username.
            raise DuplicateAccountError() from exc
        await self._session.refresh(model)
        account = self._to_domain(model)
        await self._session.commit()
        return account

    async def set_session(self, account_id: str, token: str, is_logged_in: bool) -> Account:
        if bool(token) != is_logged_in:
            raise ValueError("a session token is stored if and only if the account is logged in")

        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account_id)
            .values(current_token=token, is_logged_in=is_logged_in, updated_at=func.now())
            .execution_options(synchronize_session=False)
        )
        return await self._update_and_reload(account_id, stmt)

    async def set_role(self, account_id: str, role: AccountRole) -> Account:
        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account_id)
            .values(role=role.value, updated_at=func.now())
            .execution_options(synchronize_session=False)
        )
        return await self._update_and_reload(account_id, stmt)

    async def _update_and_reload(self, account_id: str, stmt) -> Account:
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise AccountNotFoundError()

        account = await self._find_one(AccountModel.id == account_id, refresh=True)
        if account is None:
            raise AccountNotFoundError()
        await self._session.commit()
        return account

    async def _find_one(self, *criteria, refresh: bool = False) -> Account | None:
        stmt = select(AccountModel).where(*criteria)
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    @staticmethod
    def _to_domain(model: AccountModel | None) -> Account | None:
        if model is None:
            return None
        return Account(
            id=str(model.id),
            username=model.username,
            email=model.email,
            role=AccountRole(model.role or AccountRole.USER.value),
            password_hash=model.password_hash,
            is_logged_in=bool(model.is_logged_in),
            current_token=model.current_token or "",
            name=model.name,
            lastname=model.lastname,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
