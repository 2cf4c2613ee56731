"""Comment entity.

Comments are threaded discussions on topics with unlimited depth. The store
keeps them flat with a nullable parent reference; the thread is rebuilt per
snapshot by ``study.domain.service.comment_tree``.
"""

from typing import Optional

from pydantic import Field

from study.domain.model.common import DomainModel, UtcDatetime, utcnow
from study.domain.value import CommentId, TopicId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a top-level comment on a topic or a reply to another comment.
    Content is raw markdown; rendering happens on the client.
    """

    id: CommentId
    topic_id: TopicId
    author_id: UserId
    parent_id: Optional[CommentId] = None
    content: str = Field(min_length=1, max_length=10000)
    created_at: UtcDatetime = Field(default_factory=utcnow)
    updated_at: UtcDatetime = Field(default_factory=utcnow)

    # Denormalized from the author's profile
    author_username: Optional[str] = None
    author_avatar_url: Optional[str] = None

    @property
    def edited(self) -> bool:
        """Whether the content changed after creation."""
        return self.updated_at != self.created_at
