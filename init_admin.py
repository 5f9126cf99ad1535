"""
Create the default admin account.

Registers an account through the normal registration flow and then
promotes it to the admin role. Safe to run repeatedly.
"""
import argparse
import asyncio

from catalog.core.container import get_container
from catalog.infrastructure.database import get_session, init_db
from catalog.infrastructure.database.repositories.account_repository import SqlAccountRepository
from catalog.modules.accounts import AccountRole, AuthService


async def create_default_admin(email: str, password: str) -> None:
    """Create the admin account unless one with that email already exists."""
    container = get_container()
    await init_db()

    async for db in get_session():
        repository = SqlAccountRepository(db)
        existing = await repository.find_by_email(email)
        if existing is not None:
            if existing.role is not AccountRole.ADMIN:
                await repository.set_role(existing.id, AccountRole.ADMIN)
                print(f"Promoted existing account {email} to admin")
            else:
                print("Admin account already exists, nothing to do")
            return

        service = AuthService(repository, container.password_hasher, container.token_issuer)
        await service.register(email, password, username="admin", role=AccountRole.ADMIN)

        print("=" * 50)
        print("Default admin account created")
        print("=" * 50)
        print(f"Email: {email}")
        print(f"Password: {password}")
        print("=" * 50)
        print("Change the password after the first login!")
        print("=" * 50)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--email", default="admin@example.com")
    parser.add_argument("--password", default="admin123")
    args = parser.parse_args()
    asyncio.run(create_default_admin(args.email, args.password))


if __name__ == "__main__":
    main()
