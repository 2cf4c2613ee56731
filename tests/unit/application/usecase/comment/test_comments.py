"""Unit tests for the comment use cases."""

from uuid import uuid4

import pytest

from study.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from study.domain.error import NotAuthorizedError, NotFoundError
from study.domain.service import ProfileService, TopicService
from study.domain.value import TopicCategory, UserId, Username
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _topic_id(unit_env) -> str:
    topic_service = await unit_env.get(TopicService)
    topic = await topic_service.create_topic(
        UserId(uuid4()), "Discussion", TopicCategory.VIBE_CODING
    )
    return str(topic.id)


async def _comment(unit_env, topic_id, author_id, content, parent_id=None):
    use_case = await unit_env.get(CreateCommentUseCase)
    response = await use_case.execute(
        CreateCommentRequest(
            topic_id=topic_id,
            author_id=author_id,
            content=content,
            parent_id=parent_id,
        )
    )
    return response.comment


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_comment_carries_author_profile(self, unit_env):
        """Author display fields come from the profile."""
        # Arrange
        topic_id = await _topic_id(unit_env)
        profile_service = await unit_env.get(ProfileService)
        author = uuid4()
        await profile_service.update_profile(
            UserId(author), Username("linus"), avatar_url="https://img.test/l.png"
        )

        # Act
        comment = await _comment(unit_env, topic_id, str(author), "**Bold** idea")

        # Assert
        assert comment.author_username == "linus"
        assert comment.author_avatar_url == "https://img.test/l.png"
        assert comment.content == "**Bold** idea"
        assert not comment.edited

    @pytest.mark.asyncio
    async def test_comment_on_missing_topic(self, unit_env):
        # Act & Assert
        with pytest.raises(NotFoundError):
            await _comment(unit_env, str(uuid4()), str(uuid4()), "Hello")

    @pytest.mark.asyncio
    async def test_blank_comment_rejected(self, unit_env):
        # Arrange
        topic_id = await _topic_id(unit_env)

        # Act & Assert
        with pytest.raises(ValueError, match="blank"):
            await _comment(unit_env, topic_id, str(uuid4()), "   ")


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_returns_forest_with_total(self, unit_env):
        """Replies are nested and every comment is counted."""
        # Arrange
        topic_id = await _topic_id(unit_env)
        user = str(uuid4())
        a = await _comment(unit_env, topic_id, user, "A")
        b = await _comment(unit_env, topic_id, user, "B", a.comment_id)
        await _comment(unit_env, topic_id, user, "C")
        await _comment(unit_env, topic_id, user, "D", b.comment_id)
        use_case = await unit_env.get(GetCommentsUseCase)

        # Act
        response = await use_case.execute(GetCommentsRequest(topic_id=topic_id))

        # Assert
        assert response.total == 4
        assert [c.content for c in response.comments] == ["A", "C"]
        assert response.comments[0].children[0].content == "B"
        assert response.comments[0].children[0].children[0].content == "D"
        assert response.comments[1].children == []


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        # Arrange
        topic_id = await _topic_id(unit_env)
        author = str(uuid4())
        comment = await _comment(unit_env, topic_id, author, "Before")
        use_case = await unit_env.get(UpdateCommentUseCase)

        # Act
        response = await use_case.execute(
            UpdateCommentRequest(
                comment_id=comment.comment_id,
                topic_id=topic_id,
                user_id=author,
                content="After",
            )
        )

        # Assert
        assert response.comment.content == "After"

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        # Arrange
        topic_id = await _topic_id(unit_env)
        comment = await _comment(unit_env, topic_id, str(uuid4()), "Mine")
        use_case = await unit_env.get(UpdateCommentUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=comment.comment_id,
                    topic_id=topic_id,
                    user_id=str(uuid4()),
                    content="Yours now",
                )
            )

    @pytest.mark.asyncio
    async def test_wrong_topic_is_not_found(self, unit_env):
        """A comment addressed through another topic is not found."""
        # Arrange
        topic_id = await _topic_id(unit_env)
        author = str(uuid4())
        comment = await _comment(unit_env, topic_id, author, "Here")
        use_case = await unit_env.get(UpdateCommentUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=comment.comment_id,
                    topic_id=str(uuid4()),
                    user_id=author,
                    content="There",
                )
            )


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_deletes_subtree(self, unit_env):
        # Arrange
        topic_id = await _topic_id(unit_env)
        author = str(uuid4())
        root = await _comment(unit_env, topic_id, author, "Root")
        await _comment(unit_env, topic_id, str(uuid4()), "Reply", root.comment_id)
        use_case = await unit_env.get(DeleteCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)

        # Act
        await use_case.execute(
            DeleteCommentRequest(
                comment_id=root.comment_id, topic_id=topic_id, user_id=author
            )
        )

        # Assert
        response = await get_comments.execute(GetCommentsRequest(topic_id=topic_id))
        assert response.total == 0

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        # Arrange
        topic_id = await _topic_id(unit_env)
        comment = await _comment(unit_env, topic_id, str(uuid4()), "Mine")
        use_case = await unit_env.get(DeleteCommentUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(
                    comment_id=comment.comment_id,
                    topic_id=topic_id,
                    user_id=str(uuid4()),
                )
            )
