"""
Sparse filter records, one per entity.

Every field is independently optional; None means "do not filter on this".
Range filters come in `<field>_from` / `<field>_to` pairs, both inclusive.
"""

from dataclasses import dataclass


@dataclass
class ProjectFilter:
    name: str | None = None


@dataclass
class UserFilter:
    username: str | None = None
    email: str | None = None


@dataclass
class TaskFilter:
    # exact match
    project_id: int | None = None
    parent_id: int | None = None
    level: int | None = None
    # substring ("contains")
    name: str | None = None
    description: str | None = None
    # exact match
    status: int | None = None
    # inclusive ranges (unix epoch seconds)
    deadline_from: int | None = None
    deadline_to: int | None = None
    created_at_from: int | None = None
    created_at_to: int | None = None
    updated_at_from: int | None = None
    updated_at_to: int | None = None


@dataclass
class UserAssignFilter:
    user_id: int | None = None
    task_id: int | None = None


@dataclass
class CommentFilter:
    user_id: int | None = None
    task_id: int | None = None
    content: str | None = None
    created_at_from: int | None = None
    created_at_to: int | None = None
    updated_at_from: int | None = None
    updated_at_to: int | None = None
