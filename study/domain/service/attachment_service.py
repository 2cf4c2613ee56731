"""Attachment domain service."""

import logfire
from pathlib import PurePosixPath
from uuid import uuid4

from study.config import StorageSettings
from study.domain.error import InvalidUploadError, NotAuthorizedError
from study.domain.model.attachment import Attachment
from study.domain.model.common import utcnow
from study.domain.repository import AttachmentRepository
from study.domain.value import AttachmentId, CommentId, TopicId, UserId

from .base import Service
from .storage_service import ObjectStorage


def is_allowed_type(content_type: str, allowed: list[str]) -> bool:
    """Match a MIME type against exact entries and ``family/*`` wildcards."""
    content_type = content_type.split(";", 1)[0].strip().lower()
    for pattern in allowed:
        pattern = pattern.lower()
        if pattern.endswith("/*"):
            if content_type.startswith(pattern[:-1]):
                return True
        elif content_type == pattern:
            return True
    return False


def storage_name(file_name: str) -> str:
    """Random object name that keeps the original extension."""
    suffix = PurePosixPath(file_name).suffix.lower()
    return f"{uuid4().hex}{suffix}"


class AttachmentService(Service):
    """Domain service for file attachments."""

    def __init__(
        self,
        attachment_repository: AttachmentRepository,
        object_storage: ObjectStorage,
        storage_settings: StorageSettings,
    ) -> None:
        """Initialize attachment service.

        Args:
            attachment_repository: Attachment repository
            object_storage: External object store
            storage_settings: Upload limits and bucket configuration
        """
        self.attachment_repository = attachment_repository
        self.object_storage = object_storage
        self.storage_settings = storage_settings

    def validate_upload(self, payload: bytes, content_type: str) -> None:
        """Reject uploads that are too large or of a disallowed type.

        Raises:
            InvalidUploadError: If the upload is rejected
        """
        limit = self.storage_settings.max_upload_bytes
        if len(payload) > limit:
            raise InvalidUploadError(
                f"File exceeds the {limit // (1024 * 1024)} MB limit", too_large=True
            )
        if not payload:
            raise InvalidUploadError("File is empty")
        if not is_allowed_type(content_type, self.storage_settings.allowed_types):
            raise InvalidUploadError(f"File type not allowed: {content_type}")

    async def upload(
        self,
        uploaded_by: UserId,
        file_name: str,
        payload: bytes,
        content_type: str,
        topic_id: TopicId | None = None,
        comment_id: CommentId | None = None,
    ) -> Attachment:
        """Store a file and record it against a topic or comment.

        Args:
            uploaded_by: Uploading user ID
            file_name: Original file name, used for its extension
            payload: File contents
            content_type: MIME type
            topic_id: Owning topic (exclusive with comment_id)
            comment_id: Owning comment (exclusive with topic_id)

        Returns:
            Recorded attachment

        Raises:
            InvalidUploadError: If the file is rejected
            StorageError: If the object store rejects the upload
        """
        with logfire.span(
            "attachment_service.upload",
            uploaded_by=str(uploaded_by),
            size=len(payload),
            content_type=content_type,
        ):
            try:
                self.validate_upload(payload, content_type)
            except InvalidUploadError as e:
                logfire.warn("Upload rejected", reason=e.reason)
                raise

            file_url = await self.object_storage.upload(
                storage_name(file_name), payload, content_type
            )
            attachment = Attachment(
                id=AttachmentId(uuid4()),
                topic_id=topic_id,
                comment_id=comment_id,
                file_url=file_url,
                file_type=content_type,
                uploaded_by=uploaded_by,
                created_at=utcnow(),
            )
            saved = await self.attachment_repository.save(attachment)
            logfire.info(
                "Attachment stored",
                attachment_id=str(saved.id),
                topic_id=str(topic_id) if topic_id else None,
                comment_id=str(comment_id) if comment_id else None,
            )
            return saved

    async def list_for_topic(self, topic_id: TopicId) -> list[Attachment]:
        """Attachments of a topic, newest first."""
        with logfire.span(
            "attachment_service.list_for_topic", topic_id=str(topic_id)
        ):
            return await self.attachment_repository.find_by_topic(topic_id)

    async def list_for_comment(self, comment_id: CommentId) -> list[Attachment]:
        """Attachments of a comment, oldest first."""
        with logfire.span(
            "attachment_service.list_for_comment", comment_id=str(comment_id)
        ):
            return await self.attachment_repository.find_by_comment(comment_id)

    async def get_attachment(self, attachment_id: AttachmentId) -> Attachment | None:
        """Get an attachment by ID."""
        return await self.attachment_repository.find_by_id(attachment_id)

    async def delete(self, attachment: Attachment, user_id: UserId) -> None:
        """Delete an attachment record.

        Args:
            attachment: Attachment to delete
            user_id: Requesting user

        Raises:
            NotAuthorizedError: If the user did not upload the file
        """
        with logfire.span(
            "attachment_service.delete", attachment_id=str(attachment.id)
        ):
            if attachment.uploaded_by != user_id:
                logfire.warn(
                    "Attachment delete denied",
                    attachment_id=str(attachment.id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError(
                    "attachment", str(attachment.id), str(user_id)
                )
            await self.attachment_repository.delete(attachment.id)
            logfire.info("Attachment deleted", attachment_id=str(attachment.id))
