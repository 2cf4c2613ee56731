"""PostgreSQL repository implementations."""

from study.persistence.repository.attachment import PostgresAttachmentRepository
from study.persistence.repository.comment import PostgresCommentRepository
from study.persistence.repository.profile import PostgresProfileRepository
from study.persistence.repository.topic import PostgresTopicRepository

__all__ = [
    "PostgresAttachmentRepository",
    "PostgresCommentRepository",
    "PostgresProfileRepository",
    "PostgresTopicRepository",
]
