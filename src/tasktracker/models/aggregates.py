"""
Read-side shapes that combine rows from more than one table.

Users only appear here as PublicUser, so a password hash never leaves the
store through a combined read.
"""

from dataclasses import dataclass, field

from .comment import Comment
from .task import Task
from .user import User


@dataclass(frozen=True)
class PublicUser:
    id: int
    username: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "PublicUser":
        return cls(id=user.id, username=user.username, email=user.email)


@dataclass
class TaskWithUsers:
    """A task plus everyone currently assigned to it (ordered by user id)."""

    task: Task
    users: list[PublicUser] = field(default_factory=list)


@dataclass
class CommentWithUser:
    comment: Comment
    user: PublicUser
