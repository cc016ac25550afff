from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Account, Study


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, study: Study, email: str) -> Optional[Account]:
        """Get account by email address within a study"""
        pass

    @abstractmethod
    async def get_by_id(self, study: Study, account_id: str) -> Optional[Account]:
        """Get account by ID within a study"""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Create a new account"""
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Update existing account, failing if it was modified concurrently"""
        pass

    @abstractmethod
    async def change_password(self, account: Account, new_password: str) -> Account:
        """Validate, hash and store a new password"""
        pass
