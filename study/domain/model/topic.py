"""Topic aggregate root.

A topic is a study subject with a category, free-text tags, a progress
status and zero or more scheduling windows used for calendar placement.
"""

from typing import Any, Optional

from pydantic import Field, field_validator

from study.domain.model.common import DomainModel, UtcDatetime, utcnow
from study.domain.value import (
    ScheduleId,
    TopicCategory,
    TopicId,
    TopicStatus,
    UserId,
)


def normalize_tags(tags: Optional[list[str]]) -> list[str]:
    """Trim tags, drop empty ones and keep the first of any duplicates."""
    result: list[str] = []
    for tag in tags or []:
        trimmed = tag.strip()
        if trimmed and trimmed not in result:
            result.append(trimmed)
    return result


class TopicSchedule(DomainModel):
    """Date range during which a topic is studied.

    Both endpoints are inclusive at day granularity. Overlap between the
    schedules of one topic is allowed.
    """

    id: ScheduleId
    topic_id: TopicId
    start_date: UtcDatetime
    end_date: UtcDatetime


class Topic(DomainModel):
    """Topic aggregate root.

    Category and status are read leniently: anything the store holds that is
    not a known member resolves to the enum's fallback.
    """

    id: TopicId
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=20000)
    category: TopicCategory = TopicCategory.UNCATEGORIZED
    tags: list[str] = Field(default_factory=list)
    status: TopicStatus = TopicStatus.NOT_STARTED
    created_by: UserId
    created_at: UtcDatetime = Field(default_factory=utcnow)
    updated_at: UtcDatetime = Field(default_factory=utcnow)
    schedules: list[TopicSchedule] = Field(default_factory=list)

    # Denormalized from the owner's profile
    author_username: Optional[str] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Reject blank titles."""
        if not v.strip():
            raise ValueError("Title must not be blank")
        return v

    @field_validator("category", mode="before")
    @classmethod
    def parse_category(cls, v: Any) -> TopicCategory:
        """Map null or unknown categories to UNCATEGORIZED."""
        return TopicCategory.parse(v)

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v: Any) -> TopicStatus:
        """Map null or unknown statuses to NOT_STARTED."""
        return TopicStatus.parse(v)

    @field_validator("tags", mode="before")
    @classmethod
    def parse_tags(cls, v: Any) -> list[str]:
        """Treat a null tag array as empty."""
        return normalize_tags(v)
