"""Fixtures for repository tests."""

import hashlib
import itertools
import re

import pytest
from faker import Faker
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tasktracker.models import Project, Task, TaskLevel, TaskStatus, User
from tasktracker.repositories import (
    CommentRepository,
    ProjectRepository,
    TaskRepository,
    TaskUserRepository,
    UserAssignRepository,
    UserRepository,
)

# NOTE: every repository fixture depends on `session_factory` from conftest.py,
# which points at a fresh SQLite file per test.

_sequence = itertools.count(1)


@pytest.fixture(scope="session")
def fake() -> Faker:
    return Faker()


@pytest.fixture
def project_repository(session_factory: async_sessionmaker[AsyncSession]) -> ProjectRepository:
    return ProjectRepository(session_factory)


@pytest.fixture
def user_repository(session_factory: async_sessionmaker[AsyncSession]) -> UserRepository:
    return UserRepository(session_factory)


@pytest.fixture
def task_repository(session_factory: async_sessionmaker[AsyncSession]) -> TaskRepository:
    return TaskRepository(session_factory)


@pytest.fixture
def user_assign_repository(session_factory: async_sessionmaker[AsyncSession]) -> UserAssignRepository:
    return UserAssignRepository(session_factory)


@pytest.fixture
def comment_repository(session_factory: async_sessionmaker[AsyncSession]) -> CommentRepository:
    return CommentRepository(session_factory)


@pytest.fixture
def task_user_repository(session_factory: async_sessionmaker[AsyncSession]) -> TaskUserRepository:
    return TaskUserRepository(session_factory)


@pytest.fixture
def make_project(project_repository: ProjectRepository, fake: Faker):
    """
    Factory creating projects through the repository.

    Usage:
        project = await make_project()
        project = await make_project(name="alpha")
    """
    async def _create(name: str | None = None) -> Project:
        name = name or f"{fake.word()}-{next(_sequence)}"
        return await project_repository.create(Project(name=name))

    return _create


@pytest.fixture
def make_user(user_repository: UserRepository, fake: Faker):
    """Factory creating users with a valid username, email and sha256 hex digest."""
    async def _create(**overrides) -> User:
        base = re.sub(r"[^a-z0-9]", "", fake.first_name().lower()) or "user"
        username = f"{base}_{next(_sequence)}"
        data = {
            "username": username,
            "email": f"{username}@{fake.free_email_domain()}",
            "password_hash": hashlib.sha256(fake.password().encode()).hexdigest(),
        }
        data.update(overrides)
        return await user_repository.create(User(**data))

    return _create


@pytest.fixture
def make_task(task_repository: TaskRepository, fake: Faker):
    """
    Factory creating tasks. Defaults to a MAJOR task with no parent.

    Usage:
        major = await make_task(project_id=project.id)
        minor = await make_task(project_id=project.id, level=TaskLevel.MINOR, parent_id=major.id)
    """
    async def _create(project_id: int, level: int = TaskLevel.MAJOR, parent_id: int | None = None,
                      **overrides) -> Task:
        data = {
            "project_id": project_id,
            "parent_id": parent_id,
            "level": int(level),
            "name": fake.sentence(nb_words=3)[:128],
            "description": fake.text(max_nb_chars=200),
            "status": int(TaskStatus.NOT_STARTED),
            "deadline": None,
        }
        data.update(overrides)
        return await task_repository.create(Task(**data))

    return _create


@pytest.fixture
def make_leaf_task(make_task):
    """Create a MAJOR -> MINOR -> TRIVIAL chain and return the TRIVIAL (leaf) task."""
    async def _create(project_id: int, **overrides) -> Task:
        major = await make_task(project_id=project_id)
        minor = await make_task(project_id=project_id, level=TaskLevel.MINOR, parent_id=major.id)
        return await make_task(project_id=project_id, level=TaskLevel.TRIVIAL, parent_id=minor.id, **overrides)

    return _create
