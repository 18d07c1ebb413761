"""
Core pytest configuration for the entire test suite.

Only the essentials live here: logging setup, the per-test database and the
session factory handed to repositories. Domain fixtures (repositories, row
factories) are in tests/test_fixtures/ and re-exported at the bottom.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import AsyncGenerator

# -------------------------------
# Early logging tuning
# -------------------------------
# Silence noisy third-party loggers before importing anything that might
# initialize them (Faker, SQLAlchemy, ...).
NOISY_LOGGERS = (
    "faker",
    "faker.factory",
    "sqlalchemy",
    "sqlalchemy.engine",
    "sqlalchemy.engine.Engine",
    "aiosqlite",
    "asyncio",
    "httpx",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tasktracker.config import get_settings
from tasktracker.core.logging.builder import setup_logging
from tasktracker.database import create_engine_from_url, create_session_factory, init_models

settings = get_settings()


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Install the application's dictConfig logging once for the whole session."""
    setup_logging(settings)
    yield


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


# ------------------------------------------------------------------------------------------------
# DATABASE FIXTURES
# ------------------------------------------------------------------------------------------------


@pytest.fixture()
async def async_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """
    A fresh SQLite file per test.

    Repositories open their own sessions and commit, so isolation comes from
    the throwaway file rather than an outer rolled-back transaction.
    """
    engine = create_engine_from_url(sqlite_url(tmp_path / "test.db"))
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture()
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(async_engine)


# Repository / row fixtures
from tasktracker.tests.test_fixtures.repository_fixtures import (  # noqa: E402
    fake,
    project_repository,
    user_repository,
    task_repository,
    user_assign_repository,
    comment_repository,
    task_user_repository,
    make_project,
    make_user,
    make_task,
    make_leaf_task,
)
