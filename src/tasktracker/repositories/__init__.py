from .base_repository import BaseRepository, RepositoryKeys
from .project_repository import ProjectRepository
from .user_repository import UserRepository
from .task_repository import TaskRepository
from .user_assign_repository import UserAssignRepository
from .comment_repository import CommentRepository
from .task_user_repository import TaskUserRepository

__all__ = [
    "BaseRepository",
    "RepositoryKeys",
    "ProjectRepository",
    "UserRepository",
    "TaskRepository",
    "UserAssignRepository",
    "CommentRepository",
    "TaskUserRepository",
]
