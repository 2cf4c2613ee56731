"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

from study.config import Settings
from study.domain.model.comment import Comment
from study.domain.model.topic import Topic, TopicSchedule
from study.domain.value import (
    CommentId,
    ScheduleId,
    TopicCategory,
    TopicId,
    UserId,
)
from study.util.jwt import create_token

BASE_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_schedule(
    start: datetime, end: datetime, topic_id: UUID | None = None
) -> TopicSchedule:
    """Helper to build a schedule window."""
    return TopicSchedule(
        id=ScheduleId(uuid4()),
        topic_id=TopicId(topic_id or uuid4()),
        start_date=start,
        end_date=end,
    )


def make_topic(
    title: str = "Test Topic",
    category: TopicCategory = TopicCategory.VIBE_CODING,
    description: str | None = None,
    tags: list[str] | None = None,
    created_at: datetime = BASE_TIME,
    schedules: list[tuple[datetime, datetime]] | None = None,
    created_by: UUID | None = None,
) -> Topic:
    """Helper to build a topic snapshot row.

    Args:
        title: Topic title
        category: Topic category
        description: Optional description
        tags: Tag list
        created_at: Creation time
        schedules: (start, end) pairs
        created_by: Owner; random when omitted

    Returns:
        Topic with schedules attached
    """
    topic_id = TopicId(uuid4())
    return Topic(
        id=topic_id,
        title=title,
        category=category,
        description=description,
        tags=tags or [],
        created_by=UserId(created_by or uuid4()),
        created_at=created_at,
        updated_at=created_at,
        schedules=[
            make_schedule(start, end, topic_id) for start, end in schedules or []
        ],
    )


def make_comment(
    topic_id: UUID,
    parent_id: UUID | None = None,
    content: str = "A comment",
    created_at: datetime | None = None,
    comment_id: UUID | None = None,
    offset: int = 0,
) -> Comment:
    """Helper to build a comment.

    ``offset`` shifts creation time in seconds from a fixed base so that
    several comments get a predictable order.
    """
    created = created_at or BASE_TIME + timedelta(seconds=offset)
    return Comment(
        id=CommentId(comment_id or uuid4()),
        topic_id=TopicId(topic_id),
        author_id=UserId(uuid4()),
        parent_id=CommentId(parent_id) if parent_id else None,
        content=content,
        created_at=created,
        updated_at=created,
    )


def auth_headers(user_id: str | None = None) -> dict[str, str]:
    """Bearer header for a user; a random user when none is given."""
    token = create_token(user_id or str(uuid4()), Settings().auth)
    return {"Authorization": f"Bearer {token}"}
