"""
Comment repository.

Comments attach to leaf-level tasks only. The per-task / per-user reads
return CommentWithUser, pairing each comment with its author's public
fields (never the password hash).
"""

import logging

from sqlalchemy import select

from tasktracker.exceptions.messages import ErrorKey
from tasktracker.models import Comment, CommentWithUser, PublicUser, User
from tasktracker.queries.predicates import compile_comment_filter
from tasktracker.validators.fields import check_id, validate_comment, validate_comment_filter
from tasktracker.validators.references import check_comment_references

from .base_repository import BaseRepository, RepositoryKeys


class CommentRepository(BaseRepository[Comment]):
    model = Comment
    entity_name = "comment"
    timestamped = True
    keys = RepositoryKeys(
        id_invalid=ErrorKey.COMMENT_ID_INVALID,
        not_found=ErrorKey.COMMENT_GET_BY_ID_NOT_FOUND,
        pagination_not_found=ErrorKey.COMMENT_GET_PAGINATION_NOT_FOUND,
        delete_not_found=ErrorKey.COMMENT_DELETE_FAILED_BY_ID_NOT_FOUND,
        create_failed=ErrorKey.COMMENT_CREATE_FAILED,
        get_by_id_failed=ErrorKey.COMMENT_GET_BY_ID_FAILED,
        get_all_failed=ErrorKey.COMMENT_GET_ALL_FAILED,
        get_by_filter_failed=ErrorKey.COMMENT_GET_BY_FILTER_FAILED,
        get_count_failed=ErrorKey.COMMENT_GET_COUNT_FAILED,
        update_failed=ErrorKey.COMMENT_UPDATE_FAILED,
        delete_failed=ErrorKey.COMMENT_DELETE_FAILED,
    )

    validate_entity = staticmethod(validate_comment)
    check_references = staticmethod(check_comment_references)
    validate_filter = staticmethod(validate_comment_filter)
    compile_filter = staticmethod(compile_comment_filter)

    async def get_by_task_id(self, task_id: int, page: int | None = None,
                             page_size: int | None = None) -> list[CommentWithUser]:
        """Comments on one task with their authors, oldest first (by id)."""
        check_id(task_id, ErrorKey.COMMENT_TASK_ID_INVALID, field="task_id", language=self.language)
        return await self._with_authors(
            "get_by_task_id", ErrorKey.COMMENT_GET_BY_TASK_ID_FAILED, Comment.task_id == task_id, page, page_size
        )

    async def get_by_user_id(self, user_id: int, page: int | None = None,
                             page_size: int | None = None) -> list[CommentWithUser]:
        check_id(user_id, ErrorKey.COMMENT_USER_ID_INVALID, field="user_id", language=self.language)
        return await self._with_authors(
            "get_by_user_id", ErrorKey.COMMENT_GET_BY_USER_ID_FAILED, Comment.user_id == user_id, page, page_size
        )

    async def _with_authors(self, operation: str, failure_key: ErrorKey, condition,
                            page: int | None, page_size: int | None) -> list[CommentWithUser]:
        with self._track(operation, level=logging.DEBUG, page=page, page_size=page_size) as fields:
            request = self._page_request(page, page_size)
            stmt = (
                select(Comment, User)
                .join(User, User.id == Comment.user_id)
                .order_by(Comment.id)
            )
            async with self.session_factory() as session:
                async with self._handler(session, failure_key):
                    async with session.begin():
                        result = await self._execute_page(session, stmt, [condition], request)
                        rows = [
                            CommentWithUser(comment=comment, user=PublicUser.from_user(user))
                            for comment, user in result.all()
                        ]
            fields["count"] = len(rows)
            return rows
