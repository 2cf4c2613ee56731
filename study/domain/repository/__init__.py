"""Repository interfaces for the study group domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from study.domain.repository.attachment import AttachmentRepository
from study.domain.repository.comment import CommentRepository
from study.domain.repository.profile import ProfileRepository
from study.domain.repository.topic import TopicRepository

__all__ = [
    "AttachmentRepository",
    "CommentRepository",
    "ProfileRepository",
    "TopicRepository",
]
