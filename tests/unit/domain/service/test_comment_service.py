"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from study.domain.repository import CommentRepository
from study.domain.service import CommentService
from study.domain.value import CommentId, TopicId, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Top-level comments have no parent and are saved."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        topic_id = TopicId(uuid4())

        # Act
        result = await comment_service.create_comment(
            topic_id=topic_id,
            author_id=UserId(uuid4()),
            content="First!",
        )

        # Assert
        assert result.parent_id is None
        assert result.topic_id == topic_id
        assert not result.edited
        assert await comment_repo.find_by_id(result.id) == result

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        """Replies reference their parent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        topic_id = TopicId(uuid4())
        parent = await comment_service.create_comment(
            topic_id=topic_id, author_id=UserId(uuid4()), content="Parent"
        )

        # Act
        reply = await comment_service.create_comment(
            topic_id=topic_id,
            author_id=UserId(uuid4()),
            content="Reply",
            parent_id=parent.id,
        )

        # Assert
        assert reply.parent_id == parent.id

    @pytest.mark.asyncio
    async def test_create_reply_parent_not_found(self, unit_env):
        """Replying to a missing comment raises ValueError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(ValueError, match="Parent comment not found"):
            await comment_service.create_comment(
                topic_id=TopicId(uuid4()),
                author_id=UserId(uuid4()),
                content="Reply",
                parent_id=CommentId(uuid4()),
            )

    @pytest.mark.asyncio
    async def test_create_reply_parent_on_other_topic(self, unit_env):
        """Replies must stay on the parent's topic."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        parent = await comment_service.create_comment(
            topic_id=TopicId(uuid4()), author_id=UserId(uuid4()), content="Parent"
        )

        # Act & Assert
        with pytest.raises(ValueError, match="does not belong"):
            await comment_service.create_comment(
                topic_id=TopicId(uuid4()),
                author_id=UserId(uuid4()),
                content="Reply",
                parent_id=parent.id,
            )


class TestBuildThread:
    """Tests for build_thread."""

    @pytest.mark.asyncio
    async def test_build_thread_nests_replies(self, unit_env):
        """The stored flat list comes back as a forest."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        topic_id = TopicId(uuid4())
        author = UserId(uuid4())
        a = await comment_service.create_comment(topic_id, author, "A")
        b = await comment_service.create_comment(topic_id, author, "B", a.id)
        c = await comment_service.create_comment(topic_id, author, "C")

        # Act
        forest = await comment_service.build_thread(topic_id)

        # Assert
        assert [node.id for node in forest] == [a.id, c.id]
        assert [node.id for node in forest[0].children] == [b.id]

    @pytest.mark.asyncio
    async def test_build_thread_other_topics_excluded(self, unit_env):
        """Only comments of the requested topic are threaded."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        await comment_service.create_comment(
            TopicId(uuid4()), UserId(uuid4()), "Elsewhere"
        )

        # Act
        forest = await comment_service.build_thread(TopicId(uuid4()))

        # Assert
        assert forest == []


class TestUpdateAndDelete:
    """Tests for update_content and delete_comment."""

    @pytest.mark.asyncio
    async def test_update_content_marks_edited(self, unit_env):
        """Updated comments carry the new content."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(
            TopicId(uuid4()), UserId(uuid4()), "Original"
        )

        # Act
        updated = await comment_service.update_content(comment.id, "Changed")

        # Assert
        assert updated is not None
        assert updated.content == "Changed"
        assert updated.created_at == comment.created_at

    @pytest.mark.asyncio
    async def test_update_content_missing_comment(self, unit_env):
        """Updating a missing comment returns None."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act
        result = await comment_service.update_content(CommentId(uuid4()), "x")

        # Assert
        assert result is None

    @pytest.mark.asyncio
    async def test_delete_comment_removes_replies(self, unit_env):
        """Deleting a comment removes its whole subtree."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        topic_id = TopicId(uuid4())
        author = UserId(uuid4())
        root = await comment_service.create_comment(topic_id, author, "Root")
        reply = await comment_service.create_comment(topic_id, author, "R", root.id)
        await comment_service.create_comment(topic_id, author, "RR", reply.id)
        other = await comment_service.create_comment(topic_id, author, "Other")

        # Act
        await comment_service.delete_comment(root)

        # Assert
        remaining = await comment_service.get_comments_for_topic(topic_id)
        assert [c.id for c in remaining] == [other.id]
