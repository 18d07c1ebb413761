"""
Single import point for every ORM model, so Base.metadata sees all tables:

    from tasktracker.models import Project, User, Task, UserAssign, Comment
"""

from .project import Project
from .user import User
from .task import Task, TaskLevel, TaskStatus
from .user_assign import UserAssign
from .comment import Comment
from .aggregates import PublicUser, TaskWithUsers, CommentWithUser

__all__ = [
    "Project",
    "User",
    "Task",
    "TaskLevel",
    "TaskStatus",
    "UserAssign",
    "Comment",
    "PublicUser",
    "TaskWithUsers",
    "CommentWithUser",
]
