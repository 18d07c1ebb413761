"""
Referential & hierarchy validation.

Every check here runs on the session of the write it guards, inside the same
transaction, so the checks and the mutation commit or roll back together.
The first failing rule raises; nothing is aggregated.

Hierarchy rules for tasks:
    level 0 (MAJOR)  -> no parent
    level L > 0      -> parent required, parent exists, parent.level == L - 1
    any level        -> parent_id != own id

UserAssign / Comment rules:
    user exists, task exists, task is at the leaf level
    UserAssign only: (user_id, task_id) not already taken by another row
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tasktracker.exceptions.base import DuplicateError, ValidationError
from tasktracker.exceptions.messages import DEFAULT_LANGUAGE, ErrorKey
from tasktracker.models import Comment, Project, Task, TaskLevel, User, UserAssign

logger = logging.getLogger(__name__)


def _reject(key: ErrorKey, context: str, field: str, language: str) -> None:
    logger.info("validator.rejected", extra={"key": key.value, "field": field, "context": context})
    raise ValidationError(key, context, language=language, fields=[field])


async def _exists(session: AsyncSession, model, entity_id: int) -> bool:
    found = await session.scalar(select(model.id).where(model.id == entity_id))
    return found is not None


async def _task_level(session: AsyncSession, task_id: int) -> int | None:
    return await session.scalar(select(Task.level).where(Task.id == task_id))


async def check_task_references(session: AsyncSession, task: Task, *, language: str = DEFAULT_LANGUAGE) -> None:
    """Project must exist; the parent link must respect the three-tier hierarchy."""
    if not await _exists(session, Project, task.project_id):
        _reject(ErrorKey.TASK_PROJECT_ID_NOT_FOUND, f"project_id = {task.project_id}", "project_id", language)

    if task.level == TaskLevel.MAJOR:
        if task.parent_id is not None:
            _reject(ErrorKey.TASK_PARENT_ID_ON_MAJOR_TASK, f"parent_id = {task.parent_id}", "parent_id", language)
        return

    if task.parent_id is None:
        _reject(ErrorKey.TASK_NO_PARENT_ID_ON_NON_MAJOR_TASK, f"level = {task.level}", "parent_id", language)

    if task.id is not None and task.parent_id == task.id:
        _reject(ErrorKey.TASK_PARENT_ID_CANNOT_BE_SAME_AS_TASK_ID, f"id = {task.id}", "parent_id", language)

    parent_level = await _task_level(session, task.parent_id)
    if parent_level is None:
        _reject(ErrorKey.TASK_PARENT_ID_NOT_FOUND, f"parent_id = {task.parent_id}", "parent_id", language)
    if parent_level != task.level - 1:
        _reject(
            ErrorKey.TASK_PARENT_LEVEL_INVALID,
            f"level = {task.level}, parent level = {parent_level}",
            "parent_id",
            language,
        )


async def check_leaf_task(session: AsyncSession, task_id: int, *, not_found_key: ErrorKey,
                          not_leaf_key: ErrorKey, language: str = DEFAULT_LANGUAGE) -> None:
    level = await _task_level(session, task_id)
    if level is None:
        _reject(not_found_key, f"task_id = {task_id}", "task_id", language)
    if level != TaskLevel.leaf():
        _reject(not_leaf_key, f"task_id = {task_id}, level = {level}", "task_id", language)


async def check_user_assign_references(session: AsyncSession, assign: UserAssign, *,
                                       language: str = DEFAULT_LANGUAGE) -> None:
    if not await _exists(session, User, assign.user_id):
        _reject(ErrorKey.USER_ASSIGN_USER_ID_NOT_FOUND, f"user_id = {assign.user_id}", "user_id", language)

    await check_leaf_task(
        session,
        assign.task_id,
        not_found_key=ErrorKey.USER_ASSIGN_TASK_ID_NOT_FOUND,
        not_leaf_key=ErrorKey.USER_ASSIGN_TO_NOT_MAX_LEVEL_TASK,
        language=language,
    )

    existing_id = await find_duplicate_assign(session, assign)
    if existing_id is not None:
        logger.info(
            "validator.duplicate_assign",
            extra={"user_id": assign.user_id, "task_id": assign.task_id, "existing_id": existing_id},
        )
        raise DuplicateError(
            ErrorKey.USER_ASSIGN_SAME_USER_ASSIGN_EXISTS,
            f"user_id = {assign.user_id}, task_id = {assign.task_id}",
            language=language,
            fields=["user_id", "task_id"],
        )


async def find_duplicate_assign(session: AsyncSession, assign: UserAssign) -> int | None:
    """Id of another row holding the same (user_id, task_id) pair, if any."""
    stmt = select(UserAssign.id).where(
        UserAssign.user_id == assign.user_id,
        UserAssign.task_id == assign.task_id,
    )
    if assign.id is not None:
        stmt = stmt.where(UserAssign.id != assign.id)
    return await session.scalar(stmt.limit(1))


async def check_comment_references(session: AsyncSession, comment: Comment, *,
                                   language: str = DEFAULT_LANGUAGE) -> None:
    if not await _exists(session, User, comment.user_id):
        _reject(ErrorKey.COMMENT_USER_ID_NOT_FOUND, f"user_id = {comment.user_id}", "user_id", language)

    await check_leaf_task(
        session,
        comment.task_id,
        not_found_key=ErrorKey.COMMENT_TASK_ID_NOT_FOUND,
        not_leaf_key=ErrorKey.COMMENT_TO_NOT_MAX_LEVEL_TASK,
        language=language,
    )
