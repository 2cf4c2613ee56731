"""List attachments use case."""

from uuid import UUID

from pydantic import BaseModel

from study.domain.service import AttachmentService
from study.domain.value import CommentId, TopicId

from .items import AttachmentItem


class ListAttachmentsRequest(BaseModel):
    """List attachments request."""

    topic_id: str | None = None
    comment_id: str | None = None  # Takes precedence over topic_id


class ListAttachmentsResponse(BaseModel):
    """List attachments response."""

    attachments: list[AttachmentItem]
    total: int


class ListAttachmentsUseCase:
    """Use case for listing the files of a topic or comment."""

    def __init__(self, attachment_service: AttachmentService) -> None:
        self.attachment_service = attachment_service

    async def execute(self, request: ListAttachmentsRequest) -> ListAttachmentsResponse:
        if request.comment_id:
            attachments = await self.attachment_service.list_for_comment(
                CommentId(UUID(request.comment_id))
            )
        elif request.topic_id:
            attachments = await self.attachment_service.list_for_topic(
                TopicId(UUID(request.topic_id))
            )
        else:
            raise ValueError("Either topic_id or comment_id must be provided")

        items = [AttachmentItem.from_domain(a) for a in attachments]
        return ListAttachmentsResponse(attachments=items, total=len(items))
