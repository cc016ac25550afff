from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Study
from src.domain.errors import StudyNotFoundError, require_not_blank


async def load_study(uow: UnitOfWork, identifier: str) -> Study:
    """Resolve a study identifier to its settings, raising if it does not exist"""
    require_not_blank(identifier, "study identifier")
    study = await uow.studies.get_by_identifier(identifier)
    if study is None:
        raise StudyNotFoundError(identifier)
    return study
