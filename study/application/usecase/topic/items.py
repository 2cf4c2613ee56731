"""Topic request and response items shared by the topic use cases."""

from datetime import date, datetime

from pydantic import BaseModel, Field, model_validator

from study.domain.model import Topic, TopicSchedule
from study.domain.model.common import UtcDatetime
from study.domain.service import CalendarDay, TopicProjection
from study.domain.value import TopicCategory, TopicSortOrder, TopicStatus


class ScheduleInput(BaseModel):
    """Schedule row as submitted by a client.

    Date-only values are read as midnight UTC. Rows with a missing endpoint
    are accepted and dropped before storage.
    """

    start_date: UtcDatetime | None = None
    end_date: UtcDatetime | None = None

    @model_validator(mode="after")
    def validate_order(self) -> "ScheduleInput":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("Schedule end must not be before its start")
        return self

    def as_range(self) -> tuple[datetime | None, datetime | None]:
        return self.start_date, self.end_date


class ScheduleItem(BaseModel):
    """Schedule item in responses."""

    schedule_id: str
    start_date: datetime
    end_date: datetime

    @classmethod
    def from_domain(cls, schedule: TopicSchedule) -> "ScheduleItem":
        return cls(
            schedule_id=str(schedule.id),
            start_date=schedule.start_date,
            end_date=schedule.end_date,
        )


class TopicItem(BaseModel):
    """Topic item in responses."""

    topic_id: str
    title: str
    description: str | None
    category: TopicCategory
    tags: list[str]
    status: TopicStatus
    created_by: str
    author_username: str | None
    created_at: datetime
    updated_at: datetime
    schedules: list[ScheduleItem]

    @classmethod
    def from_domain(cls, topic: Topic) -> "TopicItem":
        return cls(
            topic_id=str(topic.id),
            title=topic.title,
            description=topic.description,
            category=topic.category,
            tags=list(topic.tags),
            status=topic.status,
            created_by=str(topic.created_by),
            author_username=topic.author_username,
            created_at=topic.created_at,
            updated_at=topic.updated_at,
            schedules=[ScheduleItem.from_domain(s) for s in topic.schedules],
        )


class CalendarTopicItem(BaseModel):
    """Topic as shown inside a calendar cell."""

    topic_id: str
    title: str
    category: TopicCategory
    status: TopicStatus

    @classmethod
    def from_domain(cls, topic: Topic) -> "CalendarTopicItem":
        return cls(
            topic_id=str(topic.id),
            title=topic.title,
            category=topic.category,
            status=topic.status,
        )


class CalendarDayItem(BaseModel):
    """Calendar cell in responses."""

    day: date
    in_month: bool
    topics: list[CalendarTopicItem]

    @classmethod
    def from_domain(cls, cell: CalendarDay) -> "CalendarDayItem":
        return cls(
            day=cell.day,
            in_month=cell.in_month,
            topics=[CalendarTopicItem.from_domain(t) for t in cell.topics],
        )


class TopicQuery(BaseModel):
    """Dashboard filter, search and sort state."""

    category: TopicCategory | None = None  # None shows every category
    query: str = Field(default="", max_length=200)
    sort: TopicSortOrder = TopicSortOrder.NEWEST

    def to_projection(self) -> TopicProjection:
        return TopicProjection(
            category=self.category, query=self.query, sort=self.sort
        )
