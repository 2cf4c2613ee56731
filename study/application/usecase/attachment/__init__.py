"""Attachment use cases."""

from .delete_attachment import DeleteAttachmentRequest, DeleteAttachmentUseCase
from .items import AttachmentItem
from .list_attachments import (
    ListAttachmentsRequest,
    ListAttachmentsResponse,
    ListAttachmentsUseCase,
)
from .upload_attachment import (
    UploadAttachmentRequest,
    UploadAttachmentResponse,
    UploadAttachmentUseCase,
)

__all__ = [
    "AttachmentItem",
    "DeleteAttachmentRequest",
    "DeleteAttachmentUseCase",
    "ListAttachmentsRequest",
    "ListAttachmentsResponse",
    "ListAttachmentsUseCase",
    "UploadAttachmentRequest",
    "UploadAttachmentResponse",
    "UploadAttachmentUseCase",
]
