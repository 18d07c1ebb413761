import pytest

from tasktracker.exceptions.base import NotFoundError, ValidationError
from tasktracker.exceptions.messages import ErrorKey
from tasktracker.models import Comment, CommentWithUser, TaskLevel
from tasktracker.queries.filters import CommentFilter


@pytest.fixture
async def project(make_project):
    return await make_project()


@pytest.mark.asyncio
class TestCommentRepository:

    async def test_comment_on_leaf_task(self, project, make_user, make_leaf_task, comment_repository):
        user = await make_user()
        leaf = await make_leaf_task(project_id=project.id)
        comment = await comment_repository.create(Comment(user_id=user.id, task_id=leaf.id, content="looks good"))
        assert comment.id is not None
        assert comment.created_at > 0
        assert comment.updated_at is None

    async def test_comment_on_major_task_is_rejected(self, project, make_user, make_task, comment_repository):
        user = await make_user()
        major = await make_task(project_id=project.id)
        with pytest.raises(ValidationError) as exc_info:
            await comment_repository.create(Comment(user_id=user.id, task_id=major.id, content="hi"))
        assert exc_info.value.key is ErrorKey.COMMENT_TO_NOT_MAX_LEVEL_TASK

    async def test_unknown_author(self, project, make_leaf_task, comment_repository):
        leaf = await make_leaf_task(project_id=project.id)
        with pytest.raises(ValidationError) as exc_info:
            await comment_repository.create(Comment(user_id=404, task_id=leaf.id, content="hi"))
        assert exc_info.value.key is ErrorKey.COMMENT_USER_ID_NOT_FOUND

    async def test_update_keeps_created_at(self, project, make_user, make_leaf_task, comment_repository):
        user = await make_user()
        leaf = await make_leaf_task(project_id=project.id)
        comment = await comment_repository.create(Comment(user_id=user.id, task_id=leaf.id, content="v1"))

        comment.content = "v2"
        updated = await comment_repository.update(comment)
        assert updated.content == "v2"
        assert updated.created_at == comment.created_at
        assert updated.updated_at is not None

    @pytest.mark.parametrize("level", [TaskLevel.MAJOR, TaskLevel.MINOR])
    async def test_update_onto_non_leaf_task_is_rejected(
        self, level, project, make_user, make_task, make_leaf_task, comment_repository
    ):
        user = await make_user()
        leaf = await make_leaf_task(project_id=project.id)
        comment = await comment_repository.create(Comment(user_id=user.id, task_id=leaf.id, content="v1"))

        target = await make_task(project_id=project.id)
        if level == TaskLevel.MINOR:
            target = await make_task(project_id=project.id, level=TaskLevel.MINOR, parent_id=target.id)

        with pytest.raises(ValidationError) as exc_info:
            await comment_repository.update(
                Comment(id=comment.id, user_id=user.id, task_id=target.id, content="moved")
            )
        assert exc_info.value.key is ErrorKey.COMMENT_TO_NOT_MAX_LEVEL_TASK

        stored = await comment_repository.get_by_id(comment.id)
        assert (stored.task_id, stored.content) == (leaf.id, "v1")

    async def test_get_by_task_id_pairs_public_author(self, project, make_user, make_leaf_task, comment_repository):
        ann, bob = await make_user(), await make_user()
        leaf = await make_leaf_task(project_id=project.id)
        for user, text in ((ann, "first"), (bob, "second"), (ann, "third")):
            await comment_repository.create(Comment(user_id=user.id, task_id=leaf.id, content=text))

        rows = await comment_repository.get_by_task_id(leaf.id)
        assert all(isinstance(row, CommentWithUser) for row in rows)
        assert [(row.comment.content, row.user.id) for row in rows] == [
            ("first", ann.id),
            ("second", bob.id),
            ("third", ann.id),
        ]
        assert not hasattr(rows[0].user, "password_hash")

        page = await comment_repository.get_by_task_id(leaf.id, page=2, page_size=2)
        assert [row.comment.content for row in page] == ["third"]

    async def test_get_by_user_id_page_past_end(self, project, make_user, make_leaf_task, comment_repository):
        user = await make_user()
        leaf = await make_leaf_task(project_id=project.id)
        await comment_repository.create(Comment(user_id=user.id, task_id=leaf.id, content="only"))

        assert len(await comment_repository.get_by_user_id(user.id)) == 1
        with pytest.raises(NotFoundError) as exc_info:
            await comment_repository.get_by_user_id(user.id, page=3, page_size=1)
        assert exc_info.value.key is ErrorKey.COMMENT_GET_PAGINATION_NOT_FOUND

    async def test_filter_by_content(self, project, make_user, make_leaf_task, comment_repository):
        user = await make_user()
        leaf = await make_leaf_task(project_id=project.id)
        for text in ("ship it", "needs work", "ship after review"):
            await comment_repository.create(Comment(user_id=user.id, task_id=leaf.id, content=text))

        rows = await comment_repository.get_by_filter(CommentFilter(content="ship"))
        assert [c.content for c in rows] == ["ship it", "ship after review"]
        assert await comment_repository.count(CommentFilter(task_id=leaf.id)) == 3
