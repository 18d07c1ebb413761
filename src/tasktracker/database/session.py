from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tasktracker.config.settings import Settings
from .base import Base


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ships with foreign key enforcement off per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_from_url(url: str, *, echo: bool = False) -> AsyncEngine:
    engine = create_async_engine(url, echo=echo, pool_pre_ping=True)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Create the AsyncEngine (the shared connection pool) for the configured database."""
    return create_engine_from_url(settings.DATABASE_URL, echo=settings.SQLALCHEMY_ECHO)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory handed to every repository.

    Repositories open one short-lived session per operation, so
    `expire_on_commit=False` keeps returned rows readable after the commit.
    """
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def init_models(engine: AsyncEngine) -> None:
    """Create every table known to Base.metadata (tests, local tooling)."""
    # register the models on Base.metadata
    from tasktracker import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_models(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
