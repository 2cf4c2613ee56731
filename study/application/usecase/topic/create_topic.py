"""Create topic use case."""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from study.application.usecase.base import BaseUseCase
from study.domain.service import ProfileService, TopicService
from study.domain.value import TopicCategory, UserId

from .items import ScheduleInput, TopicItem


class CreateTopicRequest(BaseModel):
    """Create topic request."""

    user_id: str  # Owner, from the authenticated user
    title: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=20000)
    category: TopicCategory = TopicCategory.VIBE_CODING
    tags: list[str] = Field(default_factory=list)
    schedules: list[ScheduleInput] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Reject blank titles."""
        v = v.strip()
        if not v:
            raise ValueError("Title must not be blank")
        return v

    @field_validator("category")
    @classmethod
    def validate_category(cls, v: TopicCategory) -> TopicCategory:
        """Only real categories can be picked."""
        if v not in TopicCategory.selectable():
            raise ValueError(f"Category cannot be selected: {v.value}")
        return v


class CreateTopicResponse(BaseModel):
    """Create topic response."""

    topic: TopicItem


class CreateTopicUseCase(BaseUseCase[CreateTopicRequest, CreateTopicResponse]):
    """Use case for creating a topic with its schedules."""

    def __init__(
        self, topic_service: TopicService, profile_service: ProfileService
    ) -> None:
        """Initialize create topic use case.

        Args:
            topic_service: Topic domain service
            profile_service: Profile service for the owner's display name
        """
        self.topic_service = topic_service
        self.profile_service = profile_service

    async def execute(self, request: CreateTopicRequest) -> CreateTopicResponse:
        """Execute create topic flow."""
        user_id = UserId(UUID(request.user_id))
        profile = await self.profile_service.find_profile(user_id)

        topic = await self.topic_service.create_topic(
            created_by=user_id,
            title=request.title,
            category=request.category,
            description=request.description or None,
            tags=request.tags,
            schedules=[s.as_range() for s in request.schedules],
            author_username=profile.username.root if profile else None,
        )
        return CreateTopicResponse(topic=TopicItem.from_domain(topic))
