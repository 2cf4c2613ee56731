"""Delete attachment use case."""

from uuid import UUID

from pydantic import BaseModel

from study.domain.error import NotFoundError
from study.domain.service import AttachmentService
from study.domain.value import AttachmentId, UserId


class DeleteAttachmentRequest(BaseModel):
    """Delete attachment request."""

    attachment_id: str  # UUID string
    user_id: str  # Must be the uploader


class DeleteAttachmentUseCase:
    """Use case for deleting an attachment record."""

    def __init__(self, attachment_service: AttachmentService) -> None:
        self.attachment_service = attachment_service

    async def execute(self, request: DeleteAttachmentRequest) -> None:
        """Execute delete flow.

        Raises:
            NotFoundError: If the attachment does not exist
            NotAuthorizedError: If the user is not the uploader
        """
        attachment_id = AttachmentId(UUID(request.attachment_id))
        attachment = await self.attachment_service.get_attachment(attachment_id)
        if attachment is None:
            raise NotFoundError("Attachment", request.attachment_id)

        await self.attachment_service.delete(attachment, UserId(UUID(request.user_id)))
