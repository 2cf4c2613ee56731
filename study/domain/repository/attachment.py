"""Attachment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from study.domain.model.attachment import Attachment
from study.domain.value import AttachmentId, CommentId, TopicId


class AttachmentRepository(ABC):
    """Repository for Attachment entity."""

    @abstractmethod
    async def find_by_id(self, attachment_id: AttachmentId) -> Optional[Attachment]:
        """Find an attachment by ID."""
        pass

    @abstractmethod
    async def find_by_topic(self, topic_id: TopicId) -> List[Attachment]:
        """Find attachments of a topic, newest first."""
        pass

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> List[Attachment]:
        """Find attachments of a comment, oldest first."""
        pass

    @abstractmethod
    async def save(self, attachment: Attachment) -> Attachment:
        """Save an attachment record."""
        pass

    @abstractmethod
    async def delete(self, attachment_id: AttachmentId) -> None:
        """Delete an attachment record.

        The stored object is left in place; buckets are managed by the
        object store.
        """
        pass
