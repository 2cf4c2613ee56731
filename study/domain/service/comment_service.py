"""Comment domain service.

Comments are stored flat and threaded on read by ``build_comment_forest``.
"""

import logfire
from uuid import uuid4

from study.domain.model.comment import Comment
from study.domain.model.common import utcnow
from study.domain.repository import CommentRepository
from study.domain.value import ChangeAction, ChangeKind, CommentId, TopicId, UserId

from .base import Service
from .change_service import ChangeService
from .comment_tree import CommentNode, build_comment_forest, count_nodes


class CommentService(Service):
    """Domain service for discussion threads."""

    def __init__(
        self, comment_repository: CommentRepository, change_service: ChangeService
    ) -> None:
        self.comment_repository = comment_repository
        self.change_service = change_service

    async def _check_parent(self, topic_id: TopicId, parent_id: CommentId) -> None:
        """Reject replies to missing comments or comments on other topics."""
        parent = await self.comment_repository.find_by_id(parent_id)
        if parent is None:
            logfire.warn("Reply to unknown comment", parent_id=str(parent_id))
            raise ValueError("Parent comment not found")
        if parent.topic_id != topic_id:
            logfire.warn(
                "Reply crosses topics",
                parent_id=str(parent_id),
                parent_topic_id=str(parent.topic_id),
                topic_id=str(topic_id),
            )
            raise ValueError("Parent comment does not belong to this topic")

    async def create_comment(
        self,
        topic_id: TopicId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
        author_username: str | None = None,
        author_avatar_url: str | None = None,
    ) -> Comment:
        """Post a top-level comment, or a reply when parent_id is given.

        Raises:
            ValueError: If the parent is missing or on another topic
        """
        with logfire.span(
            "comment_service.create_comment",
            topic_id=str(topic_id),
            is_reply=parent_id is not None,
        ):
            if parent_id is not None:
                await self._check_parent(topic_id, parent_id)

            now = utcnow()
            saved = await self.comment_repository.save(
                Comment(
                    id=CommentId(uuid4()),
                    topic_id=topic_id,
                    author_id=author_id,
                    parent_id=parent_id,
                    content=content,
                    created_at=now,
                    updated_at=now,
                    author_username=author_username,
                    author_avatar_url=author_avatar_url,
                )
            )
            logfire.info(
                "Comment posted", comment_id=str(saved.id), topic_id=str(topic_id)
            )
            await self.change_service.publish(
                ChangeKind.COMMENTS, ChangeAction.INSERT, saved.id, topic_id
            )
            return saved

    async def get_comments_for_topic(self, topic_id: TopicId) -> list[Comment]:
        """Flat list of a topic's comments, oldest first."""
        return await self.comment_repository.find_by_topic(topic_id)

    async def build_thread(self, topic_id: TopicId) -> list[CommentNode]:
        """Fetch a topic's comments and rebuild the reply forest.

        Returns:
            Root comment nodes with replies nested
        """
        with logfire.span("comment_service.build_thread", topic_id=str(topic_id)):
            comments = await self.get_comments_for_topic(topic_id)
            forest = build_comment_forest(comments)
            placed = count_nodes(forest)
            if placed != len(comments):
                # Repeated ids are only placed once
                logfire.warn(
                    "Duplicate comments skipped",
                    topic_id=str(topic_id),
                    dropped=len(comments) - placed,
                )
            logfire.debug(
                "Thread built", topic_id=str(topic_id), roots=len(forest), total=placed
            )
            return forest

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        return await self.comment_repository.find_by_id(comment_id)

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Comment | None:
        """Replace a comment's content.

        Returns:
            The edited comment, None if it no longer exists
        """
        with logfire.span("comment_service.update_content", comment_id=str(comment_id)):
            updated = await self.comment_repository.update_content(comment_id, content)
            if updated is None:
                logfire.warn("Edit of missing comment", comment_id=str(comment_id))
                return None

            logfire.info("Comment edited", comment_id=str(comment_id))
            await self.change_service.publish(
                ChangeKind.COMMENTS, ChangeAction.UPDATE, updated.id, updated.topic_id
            )
            return updated

    async def delete_comment(self, comment: Comment) -> None:
        """Delete a comment together with its replies."""
        with logfire.span("comment_service.delete_comment", comment_id=str(comment.id)):
            await self.comment_repository.delete(comment.id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment.id),
                topic_id=str(comment.topic_id),
            )
            await self.change_service.publish(
                ChangeKind.COMMENTS, ChangeAction.DELETE, comment.id, comment.topic_id
            )
