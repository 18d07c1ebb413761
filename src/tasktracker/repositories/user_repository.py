"""
User repository.

Usernames and emails are unique at the store level; a collision surfaces as
DuplicateError(UserAlreadyExists) through the integrity mapper.
"""

from tasktracker.exceptions.messages import ErrorKey
from tasktracker.models import User
from tasktracker.queries.predicates import compile_user_filter
from tasktracker.validators.fields import validate_user

from .base_repository import BaseRepository, RepositoryKeys


class UserRepository(BaseRepository[User]):
    model = User
    entity_name = "user"
    keys = RepositoryKeys(
        id_invalid=ErrorKey.USER_ID_INVALID,
        not_found=ErrorKey.USER_GET_BY_ID_NOT_FOUND,
        pagination_not_found=ErrorKey.USER_GET_PAGINATION_NOT_FOUND,
        delete_not_found=ErrorKey.USER_DELETE_FAILED_BY_ID_NOT_FOUND,
        create_failed=ErrorKey.USER_CREATE_FAILED,
        get_by_id_failed=ErrorKey.USER_GET_BY_ID_FAILED,
        get_all_failed=ErrorKey.USER_GET_ALL_FAILED,
        get_by_filter_failed=ErrorKey.USER_GET_BY_FILTER_FAILED,
        get_count_failed=ErrorKey.USER_GET_COUNT_FAILED,
        update_failed=ErrorKey.USER_UPDATE_FAILED,
        delete_failed=ErrorKey.USER_DELETE_FAILED,
        duplicate=ErrorKey.USER_ALREADY_EXISTS,
    )

    validate_entity = staticmethod(validate_user)
    compile_filter = staticmethod(compile_user_filter)

    async def get_by_username(self, username: str) -> User:
        return await self._get_one_where(
            "get_by_username",
            ErrorKey.USER_GET_BY_NAME_NOT_FOUND,
            ErrorKey.USER_GET_BY_NAME_FAILED,
            f"username = {username}",
            User.username == username,
        )
