from datetime import datetime
from typing import Optional

import bcrypt
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.account_repository import IAccountRepository
from src.domain.entities import Account, Study
from src.domain.errors import (
    ConcurrentModificationError,
    EntityNotFoundError,
    InvalidPasswordError,
)

MIN_PASSWORD_LENGTH = 8


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, study: Study, email: str) -> Optional[Account]:
        """Get account by email address within a study"""
        stmt = select(Account).where(
            Account.study_id == study.identifier, Account.email == email
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, study: Study, account_id: str) -> Optional[Account]:
        """Get account by ID within a study"""
        stmt = select(Account).where(
            Account.study_id == study.identifier, Account.id == account_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, account: Account) -> Account:
        """Create a new account"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def update(self, account: Account) -> Account:
        """
        Update existing account with an optimistic lock on version.

        Raises:
            EntityNotFoundError: account row no longer exists
            ConcurrentModificationError: stored version differs from account.version
        """
        stmt = select(Account.version).where(Account.id == account.id)
        # Pending changes must not reach the row before the version is compared
        with self.session.no_autoflush:
            result = await self.session.exec(stmt)
            stored_version = result.one_or_none()

        if stored_version is None:
            raise EntityNotFoundError("Account")
        if stored_version != account.version:
            raise ConcurrentModificationError(
                f"Account {account.id} was modified by another request"
            )

        account.version = stored_version + 1
        account.modified_on = datetime.utcnow()
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def change_password(self, account: Account, new_password: str) -> Account:
        """Validate password complexity, hash with bcrypt (cost 12) and persist"""
        if new_password is None or len(new_password) < MIN_PASSWORD_LENGTH:
            raise InvalidPasswordError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )

        password_hash = bcrypt.hashpw(new_password.encode(), bcrypt.gensalt(12))
        account.password_hash = password_hash.decode()
        return await self.update(account)
