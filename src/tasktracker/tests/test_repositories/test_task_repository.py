import pytest

from tasktracker.exceptions.base import NotFoundError, ValidationError
from tasktracker.exceptions.messages import ErrorKey
from tasktracker.models import Task, TaskLevel, TaskStatus
from tasktracker.queries.filters import TaskFilter


def task_like(source: Task, **overrides) -> Task:
    """Full replacement entity built from an existing row."""
    data = {
        key: getattr(source, key)
        for key in ("id", "project_id", "parent_id", "level", "name", "description", "status", "deadline",
                    "created_at", "updated_at")
    }
    data.update(overrides)
    return Task(**data)


@pytest.fixture
async def project(make_project):
    return await make_project()


@pytest.mark.asyncio
class TestTaskHierarchyOnCreate:

    async def test_three_tier_chain(self, project, make_task):
        major = await make_task(project_id=project.id)
        minor = await make_task(project_id=project.id, level=TaskLevel.MINOR, parent_id=major.id)
        trivial = await make_task(project_id=project.id, level=TaskLevel.TRIVIAL, parent_id=minor.id)
        assert (major.parent_id, minor.parent_id, trivial.parent_id) == (None, major.id, minor.id)

    async def test_unknown_project(self, make_task):
        with pytest.raises(ValidationError) as exc_info:
            await make_task(project_id=777)
        assert exc_info.value.key is ErrorKey.TASK_PROJECT_ID_NOT_FOUND

    async def test_major_task_cannot_have_parent(self, project, make_task):
        other = await make_task(project_id=project.id)
        with pytest.raises(ValidationError) as exc_info:
            await make_task(project_id=project.id, parent_id=other.id)
        assert exc_info.value.key is ErrorKey.TASK_PARENT_ID_ON_MAJOR_TASK

    async def test_non_major_task_requires_parent(self, project, make_task):
        """
        Behavior:
            - A MINOR task without parent_id is rejected.

        Importance:
            - Every level L > 0 hangs under a level L-1 parent.
        """
        with pytest.raises(ValidationError) as exc_info:
            await make_task(project_id=project.id, level=TaskLevel.MINOR)
        assert exc_info.value.key is ErrorKey.TASK_NO_PARENT_ID_ON_NON_MAJOR_TASK

    async def test_parent_must_exist(self, project, make_task):
        with pytest.raises(ValidationError) as exc_info:
            await make_task(project_id=project.id, level=TaskLevel.MINOR, parent_id=9999)
        assert exc_info.value.key is ErrorKey.TASK_PARENT_ID_NOT_FOUND

    async def test_parent_must_be_one_level_up(self, project, make_task, task_repository):
        major = await make_task(project_id=project.id)
        with pytest.raises(ValidationError) as exc_info:
            await make_task(project_id=project.id, level=TaskLevel.TRIVIAL, parent_id=major.id)
        assert exc_info.value.key is ErrorKey.TASK_PARENT_LEVEL_INVALID
        # nothing written by the rejected call
        assert await task_repository.count() == 1

    async def test_created_at_is_stamped(self, project, make_task):
        task = await make_task(project_id=project.id, created_at=1)
        assert task.created_at > 1
        assert task.updated_at is None


@pytest.mark.asyncio
class TestTaskHierarchyOnUpdate:

    async def test_task_cannot_be_its_own_parent(self, project, make_task, task_repository):
        major = await make_task(project_id=project.id)
        minor = await make_task(project_id=project.id, level=TaskLevel.MINOR, parent_id=major.id)
        with pytest.raises(ValidationError) as exc_info:
            await task_repository.update(task_like(minor, parent_id=minor.id))
        assert exc_info.value.key is ErrorKey.TASK_PARENT_ID_CANNOT_BE_SAME_AS_TASK_ID

    async def test_update_rechecks_level(self, project, make_task, task_repository):
        major = await make_task(project_id=project.id)
        minor = await make_task(project_id=project.id, level=TaskLevel.MINOR, parent_id=major.id)
        with pytest.raises(ValidationError) as exc_info:
            await task_repository.update(task_like(minor, level=TaskLevel.TRIVIAL))
        assert exc_info.value.key is ErrorKey.TASK_PARENT_LEVEL_INVALID
        assert (await task_repository.get_by_id(minor.id)).level == TaskLevel.MINOR

    async def test_update_preserves_created_at_and_stamps_updated_at(self, project, make_task, task_repository):
        task = await make_task(project_id=project.id)
        updated = await task_repository.update(
            task_like(task, status=int(TaskStatus.DONE), name="renamed", created_at=5)
        )
        assert updated.name == "renamed"
        assert updated.status == TaskStatus.DONE
        assert updated.created_at == task.created_at
        assert updated.updated_at is not None

    async def test_update_unknown_id(self, project, make_task, task_repository):
        task = await make_task(project_id=project.id)
        with pytest.raises(NotFoundError) as exc_info:
            await task_repository.update(task_like(task, id=task.id + 100))
        assert exc_info.value.key is ErrorKey.TASK_GET_BY_ID_NOT_FOUND


@pytest.mark.asyncio
class TestTaskReads:

    async def test_filter_contains_and_exact(self, project, make_task, task_repository):
        await make_task(project_id=project.id, name="write docs", status=int(TaskStatus.IN_PROGRESS))
        await make_task(project_id=project.id, name="write tests", status=int(TaskStatus.DONE))
        await make_task(project_id=project.id, name="deploy", status=int(TaskStatus.IN_PROGRESS))

        rows = await task_repository.get_by_filter(TaskFilter(name="write", status=int(TaskStatus.IN_PROGRESS)))
        assert [t.name for t in rows] == ["write docs"]

    async def test_filter_wildcards_match_literally(self, project, make_task, task_repository):
        await make_task(project_id=project.id, name="abc")
        await make_task(project_id=project.id, name="snake_case")
        await make_task(project_id=project.id, name="100% done")

        assert [t.name for t in await task_repository.get_by_filter(TaskFilter(name="_"))] == ["snake_case"]
        assert [t.name for t in await task_repository.get_by_filter(TaskFilter(name="%"))] == ["100% done"]

    async def test_deadline_range(self, project, make_task, task_repository):
        for deadline in (100, 200, 300):
            await make_task(project_id=project.id, deadline=deadline)

        both = await task_repository.get_by_filter(TaskFilter(deadline_from=150, deadline_to=300))
        lower = await task_repository.get_by_filter(TaskFilter(deadline_from=200))
        upper = await task_repository.get_by_filter(TaskFilter(deadline_to=100))
        assert [t.deadline for t in both] == [200, 300]
        assert [t.deadline for t in lower] == [200, 300]
        assert [t.deadline for t in upper] == [100]

    async def test_impossible_filter_yields_no_rows(self, project, make_task, task_repository):
        await make_task(project_id=project.id)
        assert await task_repository.get_by_filter(TaskFilter(project_id=project.id + 50)) == []

    async def test_page_past_the_end(self, project, make_task, task_repository):
        for _ in range(3):
            await make_task(project_id=project.id)
        with pytest.raises(NotFoundError) as exc_info:
            await task_repository.get_by_filter(None, page=3, page_size=2)
        assert exc_info.value.key is ErrorKey.TASK_GET_PAGINATION_NOT_FOUND

    async def test_last_page_may_be_short(self, project, make_task, task_repository):
        for _ in range(5):
            await make_task(project_id=project.id)
        rows = await task_repository.get_by_filter(TaskFilter(project_id=project.id), page=2, page_size=3)
        assert len(rows) == 2

    async def test_get_all_ordered_by_id(self, project, make_task, task_repository):
        for _ in range(4):
            await make_task(project_id=project.id)
        ids = [t.id for t in await task_repository.get_all()]
        assert ids == sorted(ids)
        assert await task_repository.count() == 4

    async def test_delete_nonexistent(self, task_repository):
        with pytest.raises(NotFoundError) as exc_info:
            await task_repository.delete(404)
        assert exc_info.value.key is ErrorKey.TASK_DELETE_FAILED_BY_ID_NOT_FOUND
