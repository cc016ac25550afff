from fastapi import BackgroundTasks, Depends
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.deferred_notification_sender import DeferredNotificationSender
from src.adapter.services.logging_notification_sender import LoggingNotificationSender
from src.adapter.services.memory_token_store import MemoryTokenStore
from src.adapter.services.redis_token_store import RedisTokenStore
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.notification_sender import INotificationSender
from src.app.services.token_consumer import TokenConsumer
from src.app.services.token_issuer import TokenIssuer
from src.app.services.token_store import ITokenStore
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.workflow_settings import WorkflowSettings

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


def build_token_store(config=ApplicationConfig) -> ITokenStore:
    if config.CACHE_BACKEND == "redis":
        return RedisTokenStore.from_url(config.REDIS_URL)
    if config.CACHE_BACKEND == "memory":
        return MemoryTokenStore()
    raise ValueError(f"Unknown CACHE_BACKEND: {config.CACHE_BACKEND}")


token_store = build_token_store()
notification_sender = LoggingNotificationSender()
workflow_settings = WorkflowSettings(
    base_url=ApplicationConfig.WEBSERVICES_URL,
    token_ttl_seconds=ApplicationConfig.TOKEN_TTL_SECONDS,
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_store() -> ITokenStore:
    return token_store


def get_notification_sender() -> INotificationSender:
    return notification_sender


def get_workflow_settings() -> WorkflowSettings:
    return workflow_settings


def get_token_issuer(
    background_tasks: BackgroundTasks,
    uow: UnitOfWork = Depends(get_unit_of_work),
    store: ITokenStore = Depends(get_token_store),
    sender: INotificationSender = Depends(get_notification_sender),
    settings: WorkflowSettings = Depends(get_workflow_settings),
) -> TokenIssuer:
    return TokenIssuer(uow, store, DeferredNotificationSender(sender, background_tasks), settings)


def get_token_consumer(
    uow: UnitOfWork = Depends(get_unit_of_work),
    store: ITokenStore = Depends(get_token_store),
) -> TokenConsumer:
    return TokenConsumer(uow, store)
