"""SqlAccountRepository against an in-memory SQLite database."""

import pytest

from catalog.modules.accounts import (
    AccountDraft,
    AccountNotFoundError,
    AccountRole,
    DuplicateAccountError,
)


def _draft(email: str = "a@x.com", username: str | None = None) -> AccountDraft:
    return AccountDraft(
        email=email,
        username=username or email,
        password_hash="$2b$04$placeholderplaceholderplaceholderplaceholderpla",
        name="Ada",
    )


class TestSqlAccountRepository:
    @pytest.mark.asyncio
    async def test_insert_assigns_id_and_defaults(self, account_repository):
        account = await account_repository.insert(_draft())

        assert account.id
        assert account.role is AccountRole.USER
        assert account.is_logged_in is False
        assert account.current_token == ""
        assert account.name == "Ada"
        assert account.lastname is None
        assert account.created_at is not None

    @pytest.mark.asyncio
    async def test_point_lookups(self, account_repository):
        account = await account_repository.insert(_draft(username="ada"))

        assert (await account_repository.find_by_id(account.id)).email == "a@x.com"
        assert (await account_repository.find_by_email("a@x.com")).id == account.id
        assert (await account_repository.find_by_username("ada")).id == account.id
        assert await account_repository.find_by_email("b@x.com") is None
        assert await account_repository.find_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_duplicate_email(self, account_repository):
        await account_repository.insert(_draft(username="first"))

        with pytest.raises(DuplicateAccountError) as exc_info:
            await account_repository.insert(_draft(username="second"))

        assert exc_info.value.message == "User with email a@x.com already exists"

    @pytest.mark.asyncio
    async def test_duplicate_username(self, account_repository):
        await account_repository.insert(_draft("a@x.com", username="shared"))

        with pytest.raises(DuplicateAccountError) as exc_info:
            await account_repository.insert(_draft("b@x.com", username="shared"))

        assert exc_info.value.message == "User with username shared already exists"

    @pytest.mark.asyncio
    async def test_set_session_updates_token_and_flag_together(self, account_repository):
        account = await account_repository.insert(_draft())

        logged_in = await account_repository.set_session(account.id, "token-1", True)
        assert (logged_in.current_token, logged_in.is_logged_in) == ("token-1", True)
        assert (await account_repository.find_by_token("token-1")).id == account.id

        logged_out = await account_repository.set_session(account.id, "", False)
        assert (logged_out.current_token, logged_out.is_logged_in) == ("", False)
        assert await account_repository.find_by_token("token-1") is None

    @pytest.mark.asyncio
    async def test_newer_session_replaces_older(self, account_repository):
        account = await account_repository.insert(_draft())
        await account_repository.set_session(account.id, "token-1", True)
        await account_repository.set_session(account.id, "token-2", True)

        assert await account_repository.find_by_token("token-1") is None
        assert await account_repository.find_by_session(account.id, "token-1") is None
        assert (await account_repository.find_by_session(account.id, "token-2")).id == account.id

    @pytest.mark.asyncio
    async def test_find_by_session_requires_matching_account(self, account_repository):
        first = await account_repository.insert(_draft("a@x.com"))
        second = await account_repository.insert(_draft("b@x.com"))
        await account_repository.set_session(first.id, "token-1", True)

        assert await account_repository.find_by_session(second.id, "token-1") is None

    @pytest.mark.asyncio
    async def test_empty_token_never_matches_logged_out_accounts(self, account_repository):
        await account_repository.insert(_draft())

        assert await account_repository.find_by_token("") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token,is_logged_in", [("", True), ("token-1", False)])
    async def test_set_session_rejects_unpaired_state(self, account_repository, token, is_logged_in):
        account = await account_repository.insert(_draft())

        with pytest.raises(ValueError):
            await account_repository.set_session(account.id, token, is_logged_in)

    @pytest.mark.asyncio
    async def test_set_session_unknown_account(self, account_repository):
        with pytest.raises(AccountNotFoundError) as exc_info:
            await account_repository.set_session("missing", "token-1", True)

        assert exc_info.value.message == "Account not found"
        assert "missing" not in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_set_role(self, account_repository):
        account = await account_repository.insert(_draft())

        promoted = await account_repository.set_role(account.id, AccountRole.ADMIN)

        assert promoted.role is AccountRole.ADMIN
        assert promoted.is_admin()

    @pytest.mark.asyncio
    async def test_writes_commit_before_returning(self, account_repository, db_session):
        account = await account_repository.insert(_draft())
        assert not db_session.in_transaction()

        await account_repository.set_session(account.id, "token-1", True)
        assert not db_session.in_transaction()

        await account_repository.set_role(account.id, AccountRole.ADMIN)
        assert not db_session.in_transaction()
