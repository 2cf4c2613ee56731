"""Update topic use cases."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from study.domain.error import NotAuthorizedError
from study.domain.model import Topic
from study.domain.service import TopicService
from study.domain.value import TopicCategory, TopicId, TopicStatus, UserId

from .items import ScheduleInput, TopicItem


class UpdateTopicRequest(BaseModel):
    """Update topic request.

    Fields left as None keep their current value. A submitted schedule list
    replaces all existing schedules.
    """

    topic_id: str  # UUID string
    user_id: str  # Current user ID (must be owner)
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=20000)
    category: TopicCategory | None = None
    tags: list[str] | None = None
    schedules: list[ScheduleInput] | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        """Reject blank titles."""
        if v is not None:
            v = v.strip()
            if not v:
                raise ValueError("Title must not be blank")
        return v

    @field_validator("category")
    @classmethod
    def validate_category(cls, v: TopicCategory | None) -> TopicCategory | None:
        """Only real categories can be picked."""
        if v is not None and v not in TopicCategory.selectable():
            raise ValueError(f"Category cannot be selected: {v.value}")
        return v


class UpdateTopicResponse(BaseModel):
    """Update topic response."""

    topic: TopicItem


class UpdateTopicStatusRequest(BaseModel):
    """Update topic status request."""

    topic_id: str  # UUID string
    user_id: str  # Current user ID (must be owner)
    status: TopicStatus


async def get_owned_topic(
    topic_service: TopicService, topic_id: str, user_id: str
) -> Topic:
    """Fetch a topic and require the user to own it."""
    topic = await topic_service.get_topic(TopicId(UUID(topic_id)))
    if topic.created_by != UserId(UUID(user_id)):
        raise NotAuthorizedError("topic", topic_id, user_id)
    return topic


class UpdateTopicUseCase:
    """Use case for editing a topic and its schedules."""

    def __init__(self, topic_service: TopicService) -> None:
        """Initialize update topic use case.

        Args:
            topic_service: Topic domain service
        """
        self.topic_service = topic_service

    async def execute(self, request: UpdateTopicRequest) -> UpdateTopicResponse:
        """Execute update topic flow.

        Raises:
            NotFoundError: If the topic does not exist
            NotAuthorizedError: If user doesn't own the topic
        """
        topic = await get_owned_topic(
            self.topic_service, request.topic_id, request.user_id
        )

        changes: dict[str, Any] = {}
        if request.title is not None:
            changes["title"] = request.title
        if request.category is not None:
            changes["category"] = request.category
        if "description" in request.model_fields_set:
            changes["description"] = request.description or None
        if request.tags is not None:
            changes["tags"] = request.tags

        schedules = None
        if request.schedules is not None:
            schedules = [s.as_range() for s in request.schedules]

        updated = await self.topic_service.update_topic(topic, changes, schedules)
        return UpdateTopicResponse(topic=TopicItem.from_domain(updated))


class UpdateTopicStatusUseCase:
    """Use case for moving a topic between progress states."""

    def __init__(self, topic_service: TopicService) -> None:
        self.topic_service = topic_service

    async def execute(self, request: UpdateTopicStatusRequest) -> UpdateTopicResponse:
        """Execute update status flow.

        Raises:
            NotFoundError: If the topic does not exist
            NotAuthorizedError: If user doesn't own the topic
        """
        topic = await get_owned_topic(
            self.topic_service, request.topic_id, request.user_id
        )
        updated = await self.topic_service.update_status(topic, request.status)
        return UpdateTopicResponse(topic=TopicItem.from_domain(updated))

