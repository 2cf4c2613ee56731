"""Upload attachment use case."""

from uuid import UUID

from pydantic import BaseModel, model_validator

from study.application.usecase.base import BaseUseCase
from study.domain.error import NotFoundError
from study.domain.service import AttachmentService, CommentService, TopicService
from study.domain.value import CommentId, TopicId, UserId

from .items import AttachmentItem


class UploadAttachmentRequest(BaseModel):
    """Upload attachment request.

    Targets either a topic or a comment of that topic.
    """

    topic_id: str  # UUID string
    comment_id: str | None = None  # UUID string; attaches to the comment instead
    user_id: str  # Uploading user
    file_name: str
    content_type: str
    payload: bytes

    @model_validator(mode="after")
    def validate_file_name(self) -> "UploadAttachmentRequest":
        if not self.file_name.strip():
            raise ValueError("File name must not be blank")
        return self


class UploadAttachmentResponse(BaseModel):
    """Upload attachment response."""

    attachment: AttachmentItem


class UploadAttachmentUseCase(
    BaseUseCase[UploadAttachmentRequest, UploadAttachmentResponse]
):
    """Use case for uploading a file to a topic or comment."""

    def __init__(
        self,
        attachment_service: AttachmentService,
        topic_service: TopicService,
        comment_service: CommentService,
    ) -> None:
        """Initialize upload attachment use case.

        Args:
            attachment_service: Attachment domain service
            topic_service: Topic domain service
            comment_service: Comment domain service
        """
        self.attachment_service = attachment_service
        self.topic_service = topic_service
        self.comment_service = comment_service

    async def execute(
        self, request: UploadAttachmentRequest
    ) -> UploadAttachmentResponse:
        """Execute upload flow.

        Raises:
            NotFoundError: If the topic or comment does not exist
            InvalidUploadError: If the file is rejected
            StorageError: If the object store fails
        """
        topic_id = TopicId(UUID(request.topic_id))
        await self.topic_service.get_topic(topic_id)

        comment_id = None
        if request.comment_id:
            comment_id = CommentId(UUID(request.comment_id))
            comment = await self.comment_service.get_comment_by_id(comment_id)
            if comment is None or comment.topic_id != topic_id:
                raise NotFoundError("Comment", request.comment_id)

        attachment = await self.attachment_service.upload(
            uploaded_by=UserId(UUID(request.user_id)),
            file_name=request.file_name,
            payload=request.payload,
            content_type=request.content_type,
            topic_id=None if comment_id else topic_id,
            comment_id=comment_id,
        )
        return UploadAttachmentResponse(
            attachment=AttachmentItem.from_domain(attachment)
        )
