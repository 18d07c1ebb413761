"""
Task repository.

Every write runs the hierarchy checks (project exists, parent on the level
directly above, never its own parent) inside the write's transaction.
created_at is stamped on create and kept on update; updated_at is stamped on
update.
"""

from tasktracker.exceptions.messages import ErrorKey
from tasktracker.models import Task
from tasktracker.queries.predicates import compile_task_filter
from tasktracker.validators.fields import validate_task, validate_task_filter
from tasktracker.validators.references import check_task_references

from .base_repository import BaseRepository, RepositoryKeys


class TaskRepository(BaseRepository[Task]):
    model = Task
    entity_name = "task"
    timestamped = True
    keys = RepositoryKeys(
        id_invalid=ErrorKey.TASK_ID_INVALID,
        not_found=ErrorKey.TASK_GET_BY_ID_NOT_FOUND,
        pagination_not_found=ErrorKey.TASK_GET_PAGINATION_NOT_FOUND,
        delete_not_found=ErrorKey.TASK_DELETE_FAILED_BY_ID_NOT_FOUND,
        create_failed=ErrorKey.TASK_CREATE_FAILED,
        get_by_id_failed=ErrorKey.TASK_GET_BY_ID_FAILED,
        get_all_failed=ErrorKey.TASK_GET_ALL_FAILED,
        get_by_filter_failed=ErrorKey.TASK_GET_BY_FILTER_FAILED,
        get_count_failed=ErrorKey.TASK_GET_COUNT_FAILED,
        update_failed=ErrorKey.TASK_UPDATE_FAILED,
        delete_failed=ErrorKey.TASK_DELETE_FAILED,
    )

    validate_entity = staticmethod(validate_task)
    check_references = staticmethod(check_task_references)
    validate_filter = staticmethod(validate_task_filter)
    compile_filter = staticmethod(compile_task_filter)
