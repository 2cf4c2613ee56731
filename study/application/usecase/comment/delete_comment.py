"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from study.domain.error import NotAuthorizedError, NotFoundError
from study.domain.service import CommentService
from study.domain.value import CommentId, TopicId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    topic_id: str  # UUID string (for validation)
    user_id: str  # Current user ID (must be author)


class DeleteCommentUseCase:
    """Use case for deleting a comment; its replies go with it."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist on that topic
            NotAuthorizedError: If user doesn't own the comment
        """
        comment = await self.comment_service.get_comment_by_id(
            CommentId(UUID(request.comment_id))
        )
        if comment is None or comment.topic_id != TopicId(UUID(request.topic_id)):
            raise NotFoundError("Comment", request.comment_id)

        if comment.author_id != UserId(UUID(request.user_id)):
            raise NotAuthorizedError("comment", request.comment_id, request.user_id)

        await self.comment_service.delete_comment(comment)
