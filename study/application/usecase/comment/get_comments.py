"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from study.domain.service import CommentService, count_nodes
from study.domain.value import TopicId

from .items import CommentNodeItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    topic_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    topic_id: str
    comments: list[CommentNodeItem]  # Root comments with replies nested
    total: int


class GetCommentsUseCase:
    """Use case for getting the threaded discussion of a topic."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Returns:
            Comment forest: roots in creation order, replies nested under
            their parents in creation order
        """
        topic_id = TopicId(UUID(request.topic_id))
        forest = await self.comment_service.build_thread(topic_id)

        return GetCommentsResponse(
            topic_id=request.topic_id,
            comments=[CommentNodeItem.from_node(node) for node in forest],
            total=count_nodes(forest),
        )
