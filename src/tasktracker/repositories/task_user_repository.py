"""
Aggregating read repository: tasks together with their assigned users.

Assignees are loaded with one correlated lookup per task rather than a flat
task x user join, so a task with several assignees still appears once.

Restricting to "tasks touched by any of these users" is many-to-many, so it
runs in two steps: resolve the task ids from user_assign first, then fold
them into the compiled task filter as an IN restriction. The page count is
taken under that combined restriction.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tasktracker.config.settings import Settings
from tasktracker.exceptions.base import NotFoundError, ValidationError
from tasktracker.exceptions.mapper import db_error_handler
from tasktracker.exceptions.messages import ErrorKey
from tasktracker.models import PublicUser, Task, TaskWithUsers, User, UserAssign
from tasktracker.queries.filters import TaskFilter
from tasktracker.queries.predicates import compile_task_filter
from tasktracker.validators.fields import check_id_for_update, validate_task_filter

from .base_repository import RepositorySupport

logger = logging.getLogger(__name__)


class TaskUserRepository(RepositorySupport):
    model = Task
    pagination_not_found_key = ErrorKey.TASK_USER_GET_PAGINATION_NOT_FOUND

    @classmethod
    def from_settings(cls, session_factory, settings: Settings) -> "TaskUserRepository":
        return cls(session_factory, language=settings.ERROR_LANGUAGE, max_page_size=settings.max_page_size("task"))

    def _handler(self, session: AsyncSession, failure_key: ErrorKey):
        return db_error_handler(session, model_name="TaskUser", failure_key=failure_key, language=self.language)

    def _validate_user_ids(self, user_ids: list[int] | None) -> None:
        for user_id in user_ids or ():
            if user_id is None or user_id < 0:
                raise ValidationError(
                    ErrorKey.TASK_USER_USER_ID_INVALID,
                    f"user_id = {user_id}",
                    language=self.language,
                    fields=["user_ids"],
                )

    async def get_tasks_with_users(self, task_filter: TaskFilter | None = None, page: int | None = None,
                                   page_size: int | None = None,
                                   user_ids: list[int] | None = None) -> list[TaskWithUsers]:
        """
        Tasks matching `task_filter` (ordered by id), each with every user
        currently assigned to it.

        Args:
            task_filter: optional TaskFilter
            page, page_size: both or neither (see get_by_filter)
            user_ids: when given, only tasks that any of these users is
                assigned to; an empty list matches nothing
        """
        with self._track("get_tasks_with_users", level=logging.DEBUG, page=page, page_size=page_size) as fields:
            self._validate_user_ids(user_ids)
            validate_task_filter(task_filter, language=self.language)
            request = self._page_request(page, page_size)

            async with self.session_factory() as session:
                async with self._handler(session, ErrorKey.TASK_USER_GET_BY_FILTER_FAILED):
                    async with session.begin():
                        task_ids = None
                        if user_ids is not None:
                            task_ids = await self._task_ids_for_users(session, user_ids)
                            logger.debug(
                                "repo.get_tasks_with_users.resolved_task_ids",
                                extra={"user_ids": list(user_ids), "task_ids": task_ids},
                            )
                        clauses = self._clauses(compile_task_filter(task_filter, task_ids))
                        result = await self._execute_page(session, select(Task).order_by(Task.id), clauses, request)
                        tasks = list(result.scalars().all())
                        rows = [
                            TaskWithUsers(task=task, users=await self._assignees(session, task.id))
                            for task in tasks
                        ]
            fields["count"] = len(rows)
            return rows

    async def get_task_with_users(self, task_id: int) -> TaskWithUsers:
        with self._track("get_task_with_users", level=logging.DEBUG, id=task_id):
            check_id_for_update(task_id, ErrorKey.TASK_ID_INVALID, language=self.language)
            async with self.session_factory() as session:
                async with self._handler(session, ErrorKey.TASK_USER_GET_BY_ID_FAILED):
                    async with session.begin():
                        task = await session.get(Task, task_id)
                        if task is None:
                            raise NotFoundError(
                                ErrorKey.TASK_USER_GET_BY_ID_NOT_FOUND, f"id = {task_id}", language=self.language
                            )
                        users = await self._assignees(session, task.id)
            return TaskWithUsers(task=task, users=users)

    @staticmethod
    async def _task_ids_for_users(session: AsyncSession, user_ids: list[int]) -> list[int]:
        if not user_ids:
            return []
        result = await session.scalars(
            select(UserAssign.task_id)
            .distinct()
            .where(UserAssign.user_id.in_(user_ids))
            .order_by(UserAssign.task_id)
        )
        return list(result.all())

    @staticmethod
    async def _assignees(session: AsyncSession, task_id: int) -> list[PublicUser]:
        result = await session.scalars(
            select(User)
            .join(UserAssign, UserAssign.user_id == User.id)
            .where(UserAssign.task_id == task_id)
            .order_by(User.id)
        )
        return [PublicUser.from_user(user) for user in result.all()]
