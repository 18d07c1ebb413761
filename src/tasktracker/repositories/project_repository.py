"""Project repository: CRUD plus lookup by the unique project name."""

from tasktracker.exceptions.messages import ErrorKey
from tasktracker.models import Project
from tasktracker.queries.predicates import compile_project_filter
from tasktracker.validators.fields import validate_project

from .base_repository import BaseRepository, RepositoryKeys


class ProjectRepository(BaseRepository[Project]):
    model = Project
    entity_name = "project"
    keys = RepositoryKeys(
        id_invalid=ErrorKey.PROJECT_ID_INVALID,
        not_found=ErrorKey.PROJECT_GET_BY_ID_NOT_FOUND,
        pagination_not_found=ErrorKey.PROJECT_GET_PAGINATION_NOT_FOUND,
        delete_not_found=ErrorKey.PROJECT_DELETE_FAILED_BY_ID_NOT_FOUND,
        create_failed=ErrorKey.PROJECT_CREATE_FAILED,
        get_by_id_failed=ErrorKey.PROJECT_GET_BY_ID_FAILED,
        get_all_failed=ErrorKey.PROJECT_GET_ALL_FAILED,
        get_by_filter_failed=ErrorKey.PROJECT_GET_BY_FILTER_FAILED,
        get_count_failed=ErrorKey.PROJECT_GET_COUNT_FAILED,
        update_failed=ErrorKey.PROJECT_UPDATE_FAILED,
        delete_failed=ErrorKey.PROJECT_DELETE_FAILED,
        duplicate=ErrorKey.PROJECT_NAME_ALREADY_EXISTS,
    )

    validate_entity = staticmethod(validate_project)
    compile_filter = staticmethod(compile_project_filter)

    async def get_by_name(self, name: str) -> Project:
        """Exact name match; NotFoundError when no project has it."""
        return await self._get_one_where(
            "get_by_name",
            ErrorKey.PROJECT_GET_BY_NAME_NOT_FOUND,
            ErrorKey.PROJECT_GET_BY_NAME_FAILED,
            f"name = {name}",
            Project.name == name,
        )
