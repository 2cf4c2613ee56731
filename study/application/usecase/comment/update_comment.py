"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from study.domain.error import NotAuthorizedError, NotFoundError
from study.domain.service import CommentService
from study.domain.value import CommentId, TopicId, UserId

from .items import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    topic_id: str  # UUID string (for validation)
    user_id: str  # Current user ID (must be author)
    content: str = Field(min_length=1, max_length=10000)


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem


class UpdateCommentUseCase:
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment does not exist on that topic
            NotAuthorizedError: If user doesn't own the comment
            ValueError: If the new content is blank
        """
        if not request.content.strip():
            raise ValueError("Comment must not be blank")

        comment_id = CommentId(UUID(request.comment_id))
        topic_id = TopicId(UUID(request.topic_id))

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None or comment.topic_id != topic_id:
            raise NotFoundError("Comment", request.comment_id)

        if comment.author_id != UserId(UUID(request.user_id)):
            raise NotAuthorizedError("comment", request.comment_id, request.user_id)

        updated = await self.comment_service.update_content(comment_id, request.content)
        if updated is None:
            # Deleted between the read and the write
            raise NotFoundError("Comment", request.comment_id)

        return UpdateCommentResponse(comment=CommentItem.from_domain(updated))
