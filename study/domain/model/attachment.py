"""Attachment entity."""

from typing import Optional
from urllib.parse import unquote, urlparse

from pydantic import Field, model_validator

from study.domain.model.common import DomainModel, UtcDatetime, utcnow
from study.domain.value import AttachmentId, CommentId, TopicId, UserId


class Attachment(DomainModel):
    """File attached to a topic or to a comment.

    The payload itself lives in the object store; only its public URL and
    MIME type are recorded here.
    """

    id: AttachmentId
    topic_id: Optional[TopicId] = None
    comment_id: Optional[CommentId] = None
    file_url: str = Field(min_length=1)
    file_type: str = Field(min_length=1)
    uploaded_by: UserId
    created_at: UtcDatetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def validate_owner(self) -> "Attachment":
        """Exactly one of topic_id / comment_id must be set."""
        if (self.topic_id is None) == (self.comment_id is None):
            raise ValueError("Attachment must belong to exactly one topic or comment")
        return self

    @property
    def file_name(self) -> str:
        """Last path segment of the public URL."""
        return unquote(urlparse(self.file_url).path.rsplit("/", 1)[-1])

    @property
    def is_image(self) -> bool:
        """Whether the file can be shown inline."""
        return self.file_type.startswith("image/")
