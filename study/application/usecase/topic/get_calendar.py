"""Calendar use cases."""

from datetime import date
from zoneinfo import ZoneInfo

import logfire
from pydantic import BaseModel, Field

from study.config import CalendarSettings
from study.domain.service import TopicService
from study.domain.service.topic_projection import (
    build_calendar,
    project_topics,
    topics_on_day,
)
from study.domain.value import WeekStart

from .items import CalendarDayItem, TopicItem, TopicQuery


class GetCalendarRequest(TopicQuery):
    """Month calendar request."""

    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)
    week_start: WeekStart | None = None  # Defaults to the configured week start


class GetCalendarResponse(BaseModel):
    """Month calendar response."""

    year: int
    month: int
    week_start: WeekStart
    timezone: str
    weeks: list[list[CalendarDayItem]]


class GetTopicsForDayRequest(TopicQuery):
    """Topics scheduled on one day."""

    day: date


class GetTopicsForDayResponse(BaseModel):
    """Topics scheduled on one day."""

    day: date
    topics: list[TopicItem]
    total: int


class GetCalendarUseCase:
    """Use case for the month grid of the calendar view."""

    def __init__(
        self, topic_service: TopicService, calendar_settings: CalendarSettings
    ) -> None:
        """Initialize calendar use case.

        Args:
            topic_service: Topic domain service
            calendar_settings: Time zone and default week start
        """
        self.topic_service = topic_service
        self.calendar_settings = calendar_settings

    async def execute(self, request: GetCalendarRequest) -> GetCalendarResponse:
        """Execute calendar flow.

        The grid shows the same projected topics as the list view.
        """
        week_start = request.week_start or WeekStart(
            self.calendar_settings.week_start
        )
        tz = ZoneInfo(self.calendar_settings.timezone)

        with logfire.span(
            "get_calendar.execute",
            year=request.year,
            month=request.month,
            week_start=week_start.value,
        ):
            topics = await self.topic_service.list_topics()
            visible = project_topics(topics, request.to_projection())
            grid = build_calendar(
                visible, date(request.year, request.month, 1), week_start, tz
            )

            return GetCalendarResponse(
                year=request.year,
                month=request.month,
                week_start=week_start,
                timezone=self.calendar_settings.timezone,
                weeks=[[CalendarDayItem.from_domain(c) for c in week] for week in grid],
            )


class GetTopicsForDayUseCase:
    """Use case for the topic list shown when a calendar day is selected."""

    def __init__(
        self, topic_service: TopicService, calendar_settings: CalendarSettings
    ) -> None:
        self.topic_service = topic_service
        self.calendar_settings = calendar_settings

    async def execute(self, request: GetTopicsForDayRequest) -> GetTopicsForDayResponse:
        tz = ZoneInfo(self.calendar_settings.timezone)
        topics = await self.topic_service.list_topics()
        visible = project_topics(topics, request.to_projection())
        scheduled = topics_on_day(visible, request.day, tz)

        return GetTopicsForDayResponse(
            day=request.day,
            topics=[TopicItem.from_domain(t) for t in scheduled],
            total=len(scheduled),
        )
