"""In-memory repository implementations for testing."""

from .attachment import InMemoryAttachmentRepository
from .comment import InMemoryCommentRepository
from .profile import InMemoryProfileRepository
from .topic import InMemoryTopicRepository

__all__ = [
    "InMemoryAttachmentRepository",
    "InMemoryCommentRepository",
    "InMemoryProfileRepository",
    "InMemoryTopicRepository",
]
