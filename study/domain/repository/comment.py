"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from study.domain.model.comment import Comment
from study.domain.value import CommentId, TopicId


class CommentRepository(ABC):
    """Storage contract for comments.

    Comments are stored flat; nesting is rebuilt from ``parent_id`` by the
    thread builder. Returned comments carry their author's profile fields.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        pass

    @abstractmethod
    async def find_by_topic(self, topic_id: TopicId) -> List[Comment]:
        """Return a topic's comments ordered by created_at ascending.

        Sibling order in the rebuilt thread follows this order.
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert or overwrite a comment and return the stored row."""
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace content and bump updated_at; None if the row is gone."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Remove a comment and every reply beneath it."""
        pass
