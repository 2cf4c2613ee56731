"""In-memory attachment repository for testing."""

from typing import Optional

from study.domain.model.attachment import Attachment
from study.domain.repository.attachment import AttachmentRepository
from study.domain.value import AttachmentId, CommentId, TopicId


class InMemoryAttachmentRepository(AttachmentRepository):
    """In-memory implementation of AttachmentRepository for testing."""

    def __init__(self) -> None:
        self._attachments: dict[AttachmentId, Attachment] = {}

    async def find_by_id(self, attachment_id: AttachmentId) -> Optional[Attachment]:
        """Find an attachment by ID."""
        return self._attachments.get(attachment_id)

    async def find_by_topic(self, topic_id: TopicId) -> list[Attachment]:
        """Find attachments of a topic, newest first."""
        attachments = [
            a for a in self._attachments.values() if a.topic_id == topic_id
        ]
        attachments.sort(key=lambda a: a.created_at, reverse=True)
        return attachments

    async def find_by_comment(self, comment_id: CommentId) -> list[Attachment]:
        """Find attachments of a comment, oldest first."""
        attachments = [
            a for a in self._attachments.values() if a.comment_id == comment_id
        ]
        attachments.sort(key=lambda a: a.created_at)
        return attachments

    async def save(self, attachment: Attachment) -> Attachment:
        """Save an attachment."""
        self._attachments[attachment.id] = attachment
        return attachment

    async def delete(self, attachment_id: AttachmentId) -> None:
        """Delete an attachment."""
        self._attachments.pop(attachment_id, None)
