"""
Field-format validation.

These checks need no database access and run before a repository opens a
transaction. Each validator stops at the first broken rule and raises a
ValidationError whose key names that rule.
"""

import re
from typing import Any

from email_validator import EmailNotValidError, validate_email

from tasktracker.exceptions.base import ValidationError
from tasktracker.exceptions.messages import DEFAULT_LANGUAGE, ErrorKey
from tasktracker.models import Comment, Project, Task, TaskLevel, TaskStatus, User, UserAssign
from tasktracker.queries.filters import CommentFilter, TaskFilter

NAME_MAX_LENGTH = 128
EMAIL_MAX_LENGTH = 254
DESCRIPTION_MAX_LENGTH = 1024
COMMENT_MAX_LENGTH = 2024

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9._]+$")
PASSWORD_HASH_PATTERN = re.compile(r"^[a-f0-9]{64}$")


def _fail(key: ErrorKey, context: str, field: str, language: str) -> None:
    raise ValidationError(key, context, language=language, fields=[field])


# -----------------------
# Building blocks
# -----------------------

def check_id(value: int | None, key: ErrorKey, *, field: str = "id", language: str = DEFAULT_LANGUAGE) -> None:
    """Ids are store-assigned and never negative."""
    if value is not None and value < 0:
        _fail(key, f"{field} = {value}", field, language)


def check_id_for_create(value: int | None, key: ErrorKey, *, language: str = DEFAULT_LANGUAGE) -> None:
    if value is not None:
        _fail(key, f"id = {value}", "id", language)


def check_id_for_update(value: int | None, key: ErrorKey, *, language: str = DEFAULT_LANGUAGE) -> None:
    if value is None or value < 0:
        _fail(key, f"id = {value}", "id", language)


def check_length(value: str | None, *, field: str, max_length: int, too_long_key: ErrorKey,
                 empty_key: ErrorKey | None = None, language: str = DEFAULT_LANGUAGE) -> None:
    """
    `empty_key` set means the value is required and must be non-empty;
    without it only the upper bound applies and None is accepted.
    """
    if empty_key is not None and not value:
        _fail(empty_key, f"{field} is empty", field, language)
    if value is not None and len(value) > max_length:
        _fail(too_long_key, f"{field} length = {len(value)}", field, language)


def check_timestamp(value: int | None, key: ErrorKey, *, field: str, language: str = DEFAULT_LANGUAGE) -> None:
    """Unix timestamps, when present, must be positive."""
    if value is not None and value <= 0:
        _fail(key, f"{field} = {value}", field, language)


def check_enum(value: Any, enum_cls, key: ErrorKey, *, field: str, language: str = DEFAULT_LANGUAGE) -> None:
    if value is None:
        return
    try:
        enum_cls(value)
    except ValueError:
        _fail(key, f"{field} = {value}", field, language)


# -----------------------
# Entities
# -----------------------

def validate_project(project: Project, *, creating: bool, language: str = DEFAULT_LANGUAGE) -> None:
    if creating:
        check_id_for_create(project.id, ErrorKey.PROJECT_ID_MUST_BE_NONE, language=language)
    else:
        check_id_for_update(project.id, ErrorKey.PROJECT_ID_INVALID, language=language)
    check_length(
        project.name,
        field="name",
        max_length=NAME_MAX_LENGTH,
        empty_key=ErrorKey.PROJECT_NAME_EMPTY,
        too_long_key=ErrorKey.PROJECT_NAME_TOO_LONG,
        language=language,
    )


def validate_user(user: User, *, creating: bool, language: str = DEFAULT_LANGUAGE) -> None:
    if creating:
        check_id_for_create(user.id, ErrorKey.USER_ID_MUST_BE_NONE, language=language)
    else:
        check_id_for_update(user.id, ErrorKey.USER_ID_INVALID, language=language)

    check_length(
        user.username,
        field="username",
        max_length=NAME_MAX_LENGTH,
        empty_key=ErrorKey.USER_NAME_EMPTY,
        too_long_key=ErrorKey.USER_NAME_TOO_LONG,
        language=language,
    )
    if not USERNAME_PATTERN.match(user.username):
        _fail(ErrorKey.USER_NAME_CONTAINS_INVALID_CHARACTERS, f"username = {user.username}", "username", language)

    check_length(
        user.email,
        field="email",
        max_length=EMAIL_MAX_LENGTH,
        empty_key=ErrorKey.USER_EMAIL_EMPTY,
        too_long_key=ErrorKey.USER_EMAIL_TOO_LONG,
        language=language,
    )
    try:
        validate_email(user.email, check_deliverability=False)
    except EmailNotValidError:
        _fail(ErrorKey.USER_EMAIL_INVALID, f"email = {user.email}", "email", language)

    if not user.password_hash:
        _fail(ErrorKey.USER_PASSWORD_EMPTY, "password_hash is empty", "password_hash", language)
    if not PASSWORD_HASH_PATTERN.match(user.password_hash):
        # never echo the hash back
        _fail(ErrorKey.USER_PASSWORD_INVALID, f"password_hash length = {len(user.password_hash)}",
              "password_hash", language)


def validate_task(task: Task, *, creating: bool, language: str = DEFAULT_LANGUAGE) -> None:
    if creating:
        check_id_for_create(task.id, ErrorKey.TASK_ID_MUST_BE_NONE, language=language)
    else:
        check_id_for_update(task.id, ErrorKey.TASK_ID_INVALID, language=language)

    if task.project_id is None:
        _fail(ErrorKey.TASK_PROJECT_ID_INVALID, "project_id = None", "project_id", language)
    check_id(task.project_id, ErrorKey.TASK_PROJECT_ID_INVALID, field="project_id", language=language)
    check_id(task.parent_id, ErrorKey.TASK_PARENT_ID_INVALID, field="parent_id", language=language)

    if task.level is None:
        _fail(ErrorKey.TASK_LEVEL_INVALID, "level = None", "level", language)
    check_enum(task.level, TaskLevel, ErrorKey.TASK_LEVEL_INVALID, field="level", language=language)

    if task.status is None:
        _fail(ErrorKey.TASK_STATUS_INVALID, "status = None", "status", language)
    check_enum(task.status, TaskStatus, ErrorKey.TASK_STATUS_INVALID, field="status", language=language)

    check_length(
        task.name,
        field="name",
        max_length=NAME_MAX_LENGTH,
        empty_key=ErrorKey.TASK_NAME_EMPTY,
        too_long_key=ErrorKey.TASK_NAME_TOO_LONG,
        language=language,
    )
    check_length(
        task.description,
        field="description",
        max_length=DESCRIPTION_MAX_LENGTH,
        too_long_key=ErrorKey.TASK_DESCRIPTION_TOO_LONG,
        language=language,
    )
    check_timestamp(task.deadline, ErrorKey.TASK_TIMESTAMP_INVALID, field="deadline", language=language)


def validate_user_assign(assign: UserAssign, *, creating: bool, language: str = DEFAULT_LANGUAGE) -> None:
    if creating:
        check_id_for_create(assign.id, ErrorKey.USER_ASSIGN_ID_MUST_BE_NONE, language=language)
    else:
        check_id_for_update(assign.id, ErrorKey.USER_ASSIGN_ID_INVALID, language=language)

    if assign.user_id is None:
        _fail(ErrorKey.USER_ASSIGN_USER_ID_INVALID, "user_id = None", "user_id", language)
    check_id(assign.user_id, ErrorKey.USER_ASSIGN_USER_ID_INVALID, field="user_id", language=language)
    if assign.task_id is None:
        _fail(ErrorKey.USER_ASSIGN_TASK_ID_INVALID, "task_id = None", "task_id", language)
    check_id(assign.task_id, ErrorKey.USER_ASSIGN_TASK_ID_INVALID, field="task_id", language=language)


def validate_comment(comment: Comment, *, creating: bool, language: str = DEFAULT_LANGUAGE) -> None:
    if creating:
        check_id_for_create(comment.id, ErrorKey.COMMENT_ID_MUST_BE_NONE, language=language)
    else:
        check_id_for_update(comment.id, ErrorKey.COMMENT_ID_INVALID, language=language)

    if comment.user_id is None:
        _fail(ErrorKey.COMMENT_USER_ID_INVALID, "user_id = None", "user_id", language)
    check_id(comment.user_id, ErrorKey.COMMENT_USER_ID_INVALID, field="user_id", language=language)
    if comment.task_id is None:
        _fail(ErrorKey.COMMENT_TASK_ID_INVALID, "task_id = None", "task_id", language)
    check_id(comment.task_id, ErrorKey.COMMENT_TASK_ID_INVALID, field="task_id", language=language)

    check_length(
        comment.content,
        field="content",
        max_length=COMMENT_MAX_LENGTH,
        empty_key=ErrorKey.COMMENT_CONTENT_EMPTY,
        too_long_key=ErrorKey.COMMENT_CONTENT_TOO_LONG,
        language=language,
    )


# -----------------------
# Filters
# -----------------------

def validate_task_filter(task_filter: TaskFilter | None, *, language: str = DEFAULT_LANGUAGE) -> None:
    """Reject an illegal task filter before any query runs."""
    if task_filter is None:
        return
    check_id(task_filter.project_id, ErrorKey.TASK_PROJECT_ID_INVALID, field="project_id", language=language)
    check_id(task_filter.parent_id, ErrorKey.TASK_PARENT_ID_INVALID, field="parent_id", language=language)
    check_enum(task_filter.level, TaskLevel, ErrorKey.TASK_LEVEL_INVALID, field="level", language=language)
    check_enum(task_filter.status, TaskStatus, ErrorKey.TASK_STATUS_INVALID, field="status", language=language)
    check_length(task_filter.name, field="name", max_length=NAME_MAX_LENGTH,
                 too_long_key=ErrorKey.TASK_NAME_TOO_LONG, language=language)
    check_length(task_filter.description, field="description", max_length=DESCRIPTION_MAX_LENGTH,
                 too_long_key=ErrorKey.TASK_DESCRIPTION_TOO_LONG, language=language)
    for field in (
        "deadline_from", "deadline_to",
        "created_at_from", "created_at_to",
        "updated_at_from", "updated_at_to",
    ):
        check_timestamp(getattr(task_filter, field), ErrorKey.TASK_TIMESTAMP_INVALID, field=field, language=language)


def validate_comment_filter(comment_filter: CommentFilter | None, *, language: str = DEFAULT_LANGUAGE) -> None:
    if comment_filter is None:
        return
    check_id(comment_filter.user_id, ErrorKey.COMMENT_USER_ID_INVALID, field="user_id", language=language)
    check_id(comment_filter.task_id, ErrorKey.COMMENT_TASK_ID_INVALID, field="task_id", language=language)
    check_length(comment_filter.content, field="content", max_length=COMMENT_MAX_LENGTH,
                 too_long_key=ErrorKey.COMMENT_CONTENT_TOO_LONG, language=language)
    for field in ("created_at_from", "created_at_to", "updated_at_from", "updated_at_to"):
        check_timestamp(getattr(comment_filter, field), ErrorKey.COMMENT_TIMESTAMP_INVALID,
                        field=field, language=language)
