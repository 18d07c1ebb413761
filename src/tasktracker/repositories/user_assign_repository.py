"""
UserAssign repository.

An assignment links a user to a leaf-level task. The pre-check in
`check_user_assign_references` gives a readable duplicate error; the
(user_id, task_id) unique constraint remains the final word when two
identical requests race, and its violation maps to the same DuplicateError.
"""

from tasktracker.exceptions.messages import ErrorKey
from tasktracker.models import UserAssign
from tasktracker.queries.predicates import compile_user_assign_filter
from tasktracker.validators.fields import check_id, validate_user_assign
from tasktracker.validators.references import check_user_assign_references

from .base_repository import BaseRepository, RepositoryKeys


class UserAssignRepository(BaseRepository[UserAssign]):
    model = UserAssign
    entity_name = "user_assign"
    keys = RepositoryKeys(
        id_invalid=ErrorKey.USER_ASSIGN_ID_INVALID,
        not_found=ErrorKey.USER_ASSIGN_GET_BY_ID_NOT_FOUND,
        pagination_not_found=ErrorKey.USER_ASSIGN_GET_PAGINATION_NOT_FOUND,
        delete_not_found=ErrorKey.USER_ASSIGN_DELETE_FAILED_BY_ID_NOT_FOUND,
        create_failed=ErrorKey.USER_ASSIGN_CREATE_FAILED,
        get_by_id_failed=ErrorKey.USER_ASSIGN_GET_BY_ID_FAILED,
        get_all_failed=ErrorKey.USER_ASSIGN_GET_ALL_FAILED,
        get_by_filter_failed=ErrorKey.USER_ASSIGN_GET_BY_FILTER_FAILED,
        get_count_failed=ErrorKey.USER_ASSIGN_GET_COUNT_FAILED,
        update_failed=ErrorKey.USER_ASSIGN_UPDATE_FAILED,
        delete_failed=ErrorKey.USER_ASSIGN_DELETE_FAILED,
        duplicate=ErrorKey.USER_ASSIGN_SAME_USER_ASSIGN_EXISTS,
    )

    validate_entity = staticmethod(validate_user_assign)
    check_references = staticmethod(check_user_assign_references)
    compile_filter = staticmethod(compile_user_assign_filter)

    async def get_by_task_id(self, task_id: int) -> list[UserAssign]:
        check_id(task_id, ErrorKey.USER_ASSIGN_TASK_ID_INVALID, field="task_id", language=self.language)
        return await self._get_many_where(
            "get_by_task_id", ErrorKey.USER_ASSIGN_GET_BY_TASK_ID_FAILED, UserAssign.task_id == task_id
        )

    async def get_by_user_id(self, user_id: int) -> list[UserAssign]:
        check_id(user_id, ErrorKey.USER_ASSIGN_USER_ID_INVALID, field="user_id", language=self.language)
        return await self._get_many_where(
            "get_by_user_id", ErrorKey.USER_ASSIGN_GET_BY_USER_ID_FAILED, UserAssign.user_id == user_id
        )

    async def get_by_user_id_and_task_id(self, user_id: int, task_id: int) -> UserAssign:
        """The single assignment of `user_id` to `task_id`; NotFoundError when absent."""
        check_id(user_id, ErrorKey.USER_ASSIGN_USER_ID_INVALID, field="user_id", language=self.language)
        check_id(task_id, ErrorKey.USER_ASSIGN_TASK_ID_INVALID, field="task_id", language=self.language)
        return await self._get_one_where(
            "get_by_user_id_and_task_id",
            ErrorKey.USER_ASSIGN_GET_BY_USER_ID_AND_TASK_ID_NOT_FOUND,
            ErrorKey.USER_ASSIGN_GET_BY_USER_ID_AND_TASK_ID_FAILED,
            f"user_id = {user_id}, task_id = {task_id}",
            UserAssign.user_id == user_id,
            UserAssign.task_id == task_id,
        )
