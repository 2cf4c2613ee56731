"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Iterable, List
from uuid import UUID

from study.domain.model import Attachment, Comment, Profile, Topic, TopicSchedule
from study.domain.value import (
    AttachmentId,
    CommentId,
    ScheduleId,
    TopicId,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_schedule(row: Dict[str, Any]) -> TopicSchedule:
    """Convert database row to TopicSchedule domain model."""
    return TopicSchedule(
        id=ScheduleId(_uuid(row["id"])),
        topic_id=TopicId(_uuid(row["topic_id"])),
        start_date=row["start_date"],
        end_date=row["end_date"],
    )


def schedule_to_dict(schedule: TopicSchedule) -> Dict[str, Any]:
    """Convert TopicSchedule domain model to database dict."""
    return schedule.model_dump()


def row_to_topic(
    row: Dict[str, Any], schedules: Iterable[TopicSchedule] = ()
) -> Topic:
    """Convert database row to Topic domain model.

    Args:
        row: Topic row, optionally joined with the owner's ``username``
        schedules: Schedules of the topic

    Returns:
        Topic domain model
    """
    return Topic(
        id=TopicId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description"),
        category=row.get("category"),
        tags=row.get("tags"),
        status=row.get("status"),
        created_by=UserId(_uuid(row["created_by"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        schedules=list(schedules),
        author_username=row.get("username"),
    )


def topic_to_dict(topic: Topic) -> Dict[str, Any]:
    """Convert Topic domain model to database dict.

    Schedules and denormalized profile fields live in other tables.
    """
    data = topic.model_dump(exclude={"schedules", "author_username"})
    data["category"] = topic.category.value
    data["status"] = topic.status.value
    return data


def topic_changes_to_dict(changes: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert a partial topic update to column values.

    Enum members are stored by value; columns not named are left out.
    """
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in changes.items()
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Comment row, optionally joined with ``username`` and
            ``avatar_url`` from the author's profile

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        topic_id=TopicId(_uuid(row["topic_id"])),
        author_id=UserId(_uuid(row["user_id"])),
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        author_username=row.get("username"),
        author_avatar_url=row.get("avatar_url"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return {
        "id": comment.id,
        "topic_id": comment.topic_id,
        "user_id": comment.author_id,
        "parent_id": comment.parent_id,
        "content": comment.content,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }


def row_to_attachment(row: Dict[str, Any]) -> Attachment:
    """Convert database row to Attachment domain model."""
    topic_id = _optional_uuid(row.get("topic_id"))
    comment_id = _optional_uuid(row.get("comment_id"))
    return Attachment(
        id=AttachmentId(_uuid(row["id"])),
        topic_id=TopicId(topic_id) if topic_id else None,
        comment_id=CommentId(comment_id) if comment_id else None,
        file_url=row["file_url"],
        file_type=row["file_type"],
        uploaded_by=UserId(_uuid(row["uploaded_by"])),
        created_at=row["created_at"],
    )


def attachment_to_dict(attachment: Attachment) -> Dict[str, Any]:
    """Convert Attachment domain model to database dict."""
    return attachment.model_dump()


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        avatar_url=row.get("avatar_url"),
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    return {
        "id": profile.id,
        "username": profile.username.root,
        "avatar_url": profile.avatar_url,
        "updated_at": profile.updated_at,
    }


def group_schedules(
    schedules: Iterable[TopicSchedule],
) -> Dict[TopicId, List[TopicSchedule]]:
    """Group schedules by topic, keeping their order."""
    grouped: Dict[TopicId, List[TopicSchedule]] = {}
    for schedule in schedules:
        grouped.setdefault(schedule.topic_id, []).append(schedule)
    return grouped
