"""Comment response items."""

from datetime import datetime

from pydantic import BaseModel, Field

from study.domain.model import Comment
from study.domain.service import CommentNode


class CommentItem(BaseModel):
    """Comment item in responses."""

    comment_id: str
    topic_id: str
    author_id: str
    author_username: str | None
    author_avatar_url: str | None
    content: str
    parent_id: str | None
    created_at: datetime
    updated_at: datetime
    edited: bool

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            topic_id=str(comment.topic_id),
            author_id=str(comment.author_id),
            author_username=comment.author_username,
            author_avatar_url=comment.author_avatar_url,
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            edited=comment.edited,
        )


class CommentNodeItem(CommentItem):
    """Comment with its nested replies."""

    children: list["CommentNodeItem"] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentNodeItem":
        """Convert a forest node, replies included.

        Built bottom-up with an explicit stack so deep threads do not hit
        the recursion limit.
        """
        converted: dict[int, CommentNodeItem] = {}
        stack: list[tuple[CommentNode, bool]] = [(node, False)]
        while stack:
            current, expanded = stack.pop()
            if not expanded:
                stack.append((current, True))
                stack.extend((child, False) for child in current.children)
                continue
            item = cls(
                **CommentItem.from_domain(current.comment).model_dump(),
                children=[converted.pop(id(child)) for child in current.children],
            )
            converted[id(current)] = item
        return converted[id(node)]
