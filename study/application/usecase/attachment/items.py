"""Attachment response items."""

from datetime import datetime

from pydantic import BaseModel

from study.domain.model import Attachment


class AttachmentItem(BaseModel):
    """Attachment item in responses."""

    attachment_id: str
    topic_id: str | None
    comment_id: str | None
    file_url: str
    file_type: str
    file_name: str
    is_image: bool
    uploaded_by: str
    created_at: datetime

    @classmethod
    def from_domain(cls, attachment: Attachment) -> "AttachmentItem":
        return cls(
            attachment_id=str(attachment.id),
            topic_id=str(attachment.topic_id) if attachment.topic_id else None,
            comment_id=str(attachment.comment_id) if attachment.comment_id else None,
            file_url=attachment.file_url,
            file_type=attachment.file_type,
            file_name=attachment.file_name,
            is_image=attachment.is_image,
            uploaded_by=str(attachment.uploaded_by),
            created_at=attachment.created_at,
        )
