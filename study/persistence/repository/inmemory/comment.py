"""In-memory comment repository for testing."""

from typing import Optional

from study.domain.model.comment import Comment
from study.domain.model.common import utcnow
from study.domain.repository.comment import CommentRepository
from study.domain.value import CommentId, TopicId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        # Insertion order doubles as creation order for equal timestamps
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_topic(self, topic_id: TopicId) -> list[Comment]:
        """Find all comments for a topic in creation order."""
        comments = [c for c in self._comments.values() if c.topic_id == topic_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(
            update={"content": content, "updated_at": utcnow()}
        )
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and, like the store's cascade, all its replies."""
        pending = [comment_id]
        while pending:
            current = pending.pop()
            self._comments.pop(current, None)
            pending.extend(
                c.id for c in self._comments.values() if c.parent_id == current
            )

