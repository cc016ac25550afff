from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Study


class IStudyRepository(ABC):
    """Study repository interface - application layer"""

    @abstractmethod
    async def get_by_identifier(self, identifier: str) -> Optional[Study]:
        """Get study by its public identifier"""
        pass

    @abstractmethod
    async def create(self, study: Study) -> Study:
        """Create a new study"""
        pass
