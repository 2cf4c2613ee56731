"""Domain value objects for the study group service."""

from study.domain.value.identifiers import (
    AttachmentId,
    CommentId,
    ScheduleId,
    TopicId,
    UserId,
)
from study.domain.value.types import (
    ChangeAction,
    ChangeKind,
    TopicCategory,
    TopicSortOrder,
    TopicStatus,
    Username,
    WeekStart,
)

__all__ = [
    # Identifiers
    "UserId",
    "TopicId",
    "ScheduleId",
    "CommentId",
    "AttachmentId",
    # Types
    "TopicCategory",
    "TopicStatus",
    "TopicSortOrder",
    "WeekStart",
    "ChangeKind",
    "ChangeAction",
    "Username",
]
