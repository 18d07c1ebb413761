import warnings

import pytest
from sqlalchemy.exc import SAWarning

from tasktracker.exceptions.base import NotFoundError, ValidationError
from tasktracker.exceptions.messages import ErrorKey
from tasktracker.models import PublicUser, TaskStatus, UserAssign
from tasktracker.queries.filters import TaskFilter
from tasktracker.repositories import TaskUserRepository


@pytest.fixture
async def board(make_project, make_user, make_leaf_task, user_assign_repository):
    """
    Three users and three leaf tasks:

        leaf_a <- ann, bob
        leaf_b <- bob
        leaf_c <- (nobody)
    """
    project = await make_project()
    ann, bob, cid = await make_user(), await make_user(), await make_user()
    leaf_a = await make_leaf_task(project_id=project.id, status=int(TaskStatus.IN_PROGRESS))
    leaf_b = await make_leaf_task(project_id=project.id)
    leaf_c = await make_leaf_task(project_id=project.id, status=int(TaskStatus.IN_PROGRESS))
    for user, leaf in ((ann, leaf_a), (bob, leaf_a), (bob, leaf_b)):
        await user_assign_repository.create(UserAssign(user_id=user.id, task_id=leaf.id))
    return {"users": (ann, bob, cid), "leaves": (leaf_a, leaf_b, leaf_c)}


@pytest.mark.asyncio
class TestTaskUserRepository:

    async def test_each_task_appears_once_with_all_assignees(self, board, task_user_repository):
        ann, bob, _ = board["users"]
        leaf_a, leaf_b, leaf_c = board["leaves"]

        rows = await task_user_repository.get_tasks_with_users(TaskFilter(level=2))
        by_task = {row.task.id: row for row in rows}

        assert [row.task.id for row in rows] == [leaf_a.id, leaf_b.id, leaf_c.id]
        assert [u.id for u in by_task[leaf_a.id].users] == [ann.id, bob.id]
        assert [u.id for u in by_task[leaf_b.id].users] == [bob.id]
        assert by_task[leaf_c.id].users == []
        assert all(isinstance(u, PublicUser) for u in by_task[leaf_a.id].users)

    async def test_user_restriction_combines_with_filter(self, board, task_user_repository):
        ann, bob, _ = board["users"]
        leaf_a, _, _ = board["leaves"]

        rows = await task_user_repository.get_tasks_with_users(
            TaskFilter(status=int(TaskStatus.IN_PROGRESS)), user_ids=[bob.id]
        )
        assert [row.task.id for row in rows] == [leaf_a.id]

    async def test_shared_tasks_are_resolved_once(self, board, session_factory, task_user_repository):
        ann, bob, _ = board["users"]
        leaf_a, leaf_b, _ = board["leaves"]

        # leaf_a has two of the given users assigned
        with warnings.catch_warnings():
            warnings.simplefilter("error", SAWarning)
            async with session_factory() as session:
                task_ids = await TaskUserRepository._task_ids_for_users(session, [ann.id, bob.id])
            rows = await task_user_repository.get_tasks_with_users(user_ids=[ann.id, bob.id])

        assert task_ids == [leaf_a.id, leaf_b.id]
        assert [row.task.id for row in rows] == [leaf_a.id, leaf_b.id]

    async def test_users_without_assignments_match_nothing(self, board, task_user_repository):
        _, _, cid = board["users"]
        assert await task_user_repository.get_tasks_with_users(user_ids=[cid.id]) == []
        assert await task_user_repository.get_tasks_with_users(user_ids=[]) == []

    async def test_paging_counts_under_the_combined_restriction(self, board, task_user_repository):
        ann, bob, _ = board["users"]
        _, leaf_b, _ = board["leaves"]

        page = await task_user_repository.get_tasks_with_users(user_ids=[ann.id, bob.id], page=2, page_size=1)
        assert [row.task.id for row in page] == [leaf_b.id]

        # two matching tasks: offset 2 sits exactly at the end, offset 3 is past it
        at_end = await task_user_repository.get_tasks_with_users(user_ids=[ann.id, bob.id], page=3, page_size=1)
        assert at_end == []

        with pytest.raises(NotFoundError) as exc_info:
            await task_user_repository.get_tasks_with_users(user_ids=[ann.id, bob.id], page=4, page_size=1)
        assert exc_info.value.key is ErrorKey.TASK_USER_GET_PAGINATION_NOT_FOUND

    async def test_negative_user_id_is_rejected(self, task_user_repository):
        with pytest.raises(ValidationError) as exc_info:
            await task_user_repository.get_tasks_with_users(user_ids=[1, -2])
        assert exc_info.value.key is ErrorKey.TASK_USER_USER_ID_INVALID

    async def test_get_task_with_users(self, board, task_user_repository):
        ann, bob, _ = board["users"]
        leaf_a, _, _ = board["leaves"]

        row = await task_user_repository.get_task_with_users(leaf_a.id)
        assert row.task.id == leaf_a.id
        assert [u.username for u in row.users] == [ann.username, bob.username]

        with pytest.raises(NotFoundError) as exc_info:
            await task_user_repository.get_task_with_users(9999)
        assert exc_info.value.key is ErrorKey.TASK_USER_GET_BY_ID_NOT_FOUND
