from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.study_repository import IStudyRepository
from src.domain.entities import Study


class StudyRepository(IStudyRepository):
    """Study repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_identifier(self, identifier: str) -> Optional[Study]:
        """Get study by its public identifier"""
        stmt = select(Study).where(Study.identifier == identifier)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, study: Study) -> Study:
        """Create a new study"""
        self.session.add(study)
        await self.session.flush()
        await self.session.refresh(study)
        return study
