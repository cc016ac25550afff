import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.services.memory_token_store import MemoryTokenStore
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.workflow_settings import WorkflowSettings
from src.depends import (
    get_notification_sender,
    get_token_store,
    get_unit_of_work,
    get_workflow_settings,
)
from src.domain.entities import Study
from tests.fixtures.fakes import FakeClock, RecordingNotificationSender


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def token_store(clock):
    return MemoryTokenStore(clock=clock)


@pytest.fixture
def sender():
    return RecordingNotificationSender()


@pytest_asyncio.fixture
async def study(db_session):
    study = Study(identifier="study-x", name="Study X", support_email="support@example.org")
    db_session.add(study)
    await db_session.commit()
    return study


@pytest_asyncio.fixture
async def client(db_session, token_store, sender):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_token_store] = lambda: token_store
    app.dependency_overrides[get_notification_sender] = lambda: sender
    app.dependency_overrides[get_workflow_settings] = lambda: WorkflowSettings(
        base_url="https://ws.example.org", token_ttl_seconds=7200
    )

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
