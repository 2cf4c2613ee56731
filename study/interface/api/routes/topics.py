"""Topic routes."""

from datetime import date, datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from study.adapter.error import AdapterError
from study.application.usecase.topic import (
    CreateTopicRequest,
    CreateTopicResponse,
    CreateTopicUseCase,
    DeleteTopicRequest,
    DeleteTopicUseCase,
    GetCalendarRequest,
    GetCalendarResponse,
    GetCalendarUseCase,
    GetTopicRequest,
    GetTopicResponse,
    GetTopicsForDayRequest,
    GetTopicsForDayResponse,
    GetTopicsForDayUseCase,
    GetTopicUseCase,
    ListTopicsRequest,
    ListTopicsResponse,
    ListTopicsUseCase,
    ScheduleInput,
    UpdateTopicRequest,
    UpdateTopicResponse,
    UpdateTopicStatusRequest,
    UpdateTopicStatusUseCase,
    UpdateTopicUseCase,
)
from study.domain.error import DomainError
from study.domain.value import TopicCategory, TopicSortOrder, TopicStatus, WeekStart
from study.interface.api.auth import CurrentUserId
from study.interface.error import to_http_error

router = APIRouter(prefix="/topics", tags=["topics"], route_class=DishkaRoute)

ALL_CATEGORIES = "All"


def parse_category(category: str | None) -> TopicCategory | None:
    """Read the category filter; missing or "All" means no filter.

    Raises:
        HTTPException: 400 for names that are not categories
    """
    if not category or category == ALL_CATEGORIES:
        return None
    try:
        return TopicCategory(category)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown category: {category}",
        )


def parse_month(month: str | None) -> tuple[int, int]:
    """Read a ``YYYY-MM`` month, defaulting to the current one.

    Raises:
        HTTPException: 400 for malformed months
    """
    if not month:
        today = datetime.now(timezone.utc).date()
        return today.year, today.month
    try:
        parsed = datetime.strptime(month, "%Y-%m")
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Month must be formatted as YYYY-MM",
        )
    return parsed.year, parsed.month


class CreateTopicAPIRequest(BaseModel):
    """API request for creating a topic."""

    title: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=20000)
    category: TopicCategory = TopicCategory.VIBE_CODING
    tags: list[str] = Field(default_factory=list)
    schedules: list[ScheduleInput] = Field(default_factory=list)


class UpdateTopicAPIRequest(BaseModel):
    """API request for editing a topic.

    Omitted fields keep their value; a schedule list replaces all schedules.
    """

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=20000)
    category: TopicCategory | None = None
    tags: list[str] | None = None
    schedules: list[ScheduleInput] | None = None


class UpdateTopicStatusAPIRequest(BaseModel):
    """API request for changing a topic's status."""

    status: TopicStatus


@router.get("", response_model=ListTopicsResponse)
async def list_topics(
    list_topics_use_case: FromDishka[ListTopicsUseCase],
    user_id: CurrentUserId,
    category: str | None = Query(default=None),
    q: str = Query(default="", max_length=200),
    sort: TopicSortOrder = Query(default=TopicSortOrder.NEWEST),
) -> ListTopicsResponse:
    """List topics for the dashboard.

    Args:
        category: Category name, or "All"
        q: Free-text search over title, description and tags
        sort: newest, oldest, az or za

    Returns:
        Filtered, searched and sorted topics
    """
    request = ListTopicsRequest(category=parse_category(category), query=q, sort=sort)
    return await list_topics_use_case.execute(request)


@router.post(
    "", response_model=CreateTopicResponse, status_code=status.HTTP_201_CREATED
)
async def create_topic(
    request: CreateTopicAPIRequest,
    create_topic_use_case: FromDishka[CreateTopicUseCase],
    user_id: CurrentUserId,
) -> CreateTopicResponse:
    """Create a topic with optional schedules.

    Incomplete schedule rows are dropped.
    """
    try:
        use_case_request = CreateTopicRequest(
            user_id=user_id,
            title=request.title,
            description=request.description,
            category=request.category,
            tags=request.tags,
            schedules=request.schedules,
        )
        return await create_topic_use_case.execute(use_case_request)
    except (DomainError, AdapterError, ValueError) as e:
        raise to_http_error(e, "Create topic")


@router.get("/calendar", response_model=GetCalendarResponse)
async def get_calendar(
    get_calendar_use_case: FromDishka[GetCalendarUseCase],
    user_id: CurrentUserId,
    month: str | None = Query(default=None, description="YYYY-MM"),
    week_start: WeekStart | None = Query(default=None),
    category: str | None = Query(default=None),
    q: str = Query(default="", max_length=200),
    sort: TopicSortOrder = Query(default=TopicSortOrder.NEWEST),
) -> GetCalendarResponse:
    """Month grid with the topics scheduled on each day.

    Takes the same filters as the topic list.
    """
    year, month_number = parse_month(month)
    request = GetCalendarRequest(
        year=year,
        month=month_number,
        week_start=week_start,
        category=parse_category(category),
        query=q,
        sort=sort,
    )
    return await get_calendar_use_case.execute(request)


@router.get("/calendar/{day}", response_model=GetTopicsForDayResponse)
async def get_topics_for_day(
    day: date,
    get_topics_for_day_use_case: FromDishka[GetTopicsForDayUseCase],
    user_id: CurrentUserId,
    category: str | None = Query(default=None),
    q: str = Query(default="", max_length=200),
    sort: TopicSortOrder = Query(default=TopicSortOrder.NEWEST),
) -> GetTopicsForDayResponse:
    """Topics scheduled on one day (YYYY-MM-DD)."""
    request = GetTopicsForDayRequest(
        day=day, category=parse_category(category), query=q, sort=sort
    )
    return await get_topics_for_day_use_case.execute(request)


@router.get("/{topic_id}", response_model=GetTopicResponse)
async def get_topic(
    topic_id: str,
    get_topic_use_case: FromDishka[GetTopicUseCase],
    user_id: CurrentUserId,
) -> GetTopicResponse:
    """Topic detail with its comment thread and attachments."""
    try:
        return await get_topic_use_case.execute(
            GetTopicRequest(topic_id=topic_id, user_id=user_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e, "Get topic")


@router.patch("/{topic_id}", response_model=UpdateTopicResponse)
async def update_topic(
    topic_id: str,
    request: UpdateTopicAPIRequest,
    update_topic_use_case: FromDishka[UpdateTopicUseCase],
    user_id: CurrentUserId,
) -> UpdateTopicResponse:
    """Edit a topic. Only the owner can edit."""
    try:
        use_case_request = UpdateTopicRequest(
            topic_id=topic_id,
            user_id=user_id,
            **request.model_dump(exclude_unset=True),
        )
        return await update_topic_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_error(e, "Update topic")


@router.put("/{topic_id}/status", response_model=UpdateTopicResponse)
async def update_topic_status(
    topic_id: str,
    request: UpdateTopicStatusAPIRequest,
    update_topic_status_use_case: FromDishka[UpdateTopicStatusUseCase],
    user_id: CurrentUserId,
) -> UpdateTopicResponse:
    """Move a topic to another status. Only the owner can change it."""
    try:
        return await update_topic_status_use_case.execute(
            UpdateTopicStatusRequest(
                topic_id=topic_id, user_id=user_id, status=request.status
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e, "Update topic status")


@router.delete("/{topic_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_topic(
    topic_id: str,
    delete_topic_use_case: FromDishka[DeleteTopicUseCase],
    user_id: CurrentUserId,
) -> None:
    """Delete a topic with its schedules, comments and attachments."""
    try:
        await delete_topic_use_case.execute(
            DeleteTopicRequest(topic_id=topic_id, user_id=user_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e, "Delete topic")
