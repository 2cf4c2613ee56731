"""Get topic use case."""

from uuid import UUID

from pydantic import BaseModel

from study.application.usecase.attachment.items import AttachmentItem
from study.application.usecase.comment.items import CommentNodeItem
from study.domain.service import (
    AttachmentService,
    CommentService,
    TopicService,
    count_nodes,
)
from study.domain.value import TopicId, UserId

from .items import TopicItem


class GetTopicRequest(BaseModel):
    """Get topic request."""

    topic_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetTopicResponse(BaseModel):
    """Topic detail: the topic, its discussion and its files."""

    topic: TopicItem
    comments: list[CommentNodeItem]
    comment_count: int
    attachments: list[AttachmentItem]
    is_owner: bool


class GetTopicUseCase:
    """Use case for the topic detail page."""

    def __init__(
        self,
        topic_service: TopicService,
        comment_service: CommentService,
        attachment_service: AttachmentService,
    ) -> None:
        """Initialize get topic use case.

        Args:
            topic_service: Topic domain service
            comment_service: Comment domain service
            attachment_service: Attachment domain service
        """
        self.topic_service = topic_service
        self.comment_service = comment_service
        self.attachment_service = attachment_service

    async def execute(self, request: GetTopicRequest) -> GetTopicResponse:
        """Execute get topic flow.

        Raises:
            NotFoundError: If the topic does not exist
        """
        topic_id = TopicId(UUID(request.topic_id))
        topic = await self.topic_service.get_topic(topic_id)
        forest = await self.comment_service.build_thread(topic_id)
        attachments = await self.attachment_service.list_for_topic(topic_id)

        is_owner = (
            request.user_id is not None
            and topic.created_by == UserId(UUID(request.user_id))
        )
        return GetTopicResponse(
            topic=TopicItem.from_domain(topic),
            comments=[CommentNodeItem.from_node(node) for node in forest],
            comment_count=count_nodes(forest),
            attachments=[AttachmentItem.from_domain(a) for a in attachments],
            is_owner=is_owner,
        )
