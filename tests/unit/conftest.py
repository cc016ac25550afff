import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.memory_token_store import MemoryTokenStore
from src.app.services.workflow_settings import WorkflowSettings
from src.domain.entities import Account, AccountStatus, Study
from tests.fixtures.fakes import FakeClock, RecordingNotificationSender


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.studies = MagicMock()
    uow.studies.get_by_identifier = AsyncMock()

    uow.accounts = MagicMock()
    uow.accounts.get_by_email = AsyncMock()
    uow.accounts.get_by_id = AsyncMock()
    uow.accounts.create = AsyncMock(side_effect=lambda account: account)
    uow.accounts.update = AsyncMock(side_effect=lambda account: account)
    uow.accounts.change_password = AsyncMock(side_effect=lambda account, password: account)
    return uow


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def token_store(clock):
    return MemoryTokenStore(clock=clock)


@pytest.fixture
def sender():
    return RecordingNotificationSender()


@pytest.fixture
def settings():
    return WorkflowSettings(base_url="https://ws.example.org", token_ttl_seconds=7200)


@pytest.fixture
def study():
    return Study(identifier="study-x", name="Study X", support_email="support@example.org")


@pytest.fixture
def account():
    return Account(
        id="user-1",
        study_id="study-x",
        email="a@example.com",
        password_hash="hashed_password",
        status=AccountStatus.unverified,
    )
