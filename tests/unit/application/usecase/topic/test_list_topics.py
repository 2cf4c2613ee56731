"""Unit tests for the dashboard list and calendar use cases."""

from datetime import date, datetime, timezone
from uuid import uuid4

import pytest

from study.application.usecase.topic import (
    GetCalendarRequest,
    GetCalendarUseCase,
    GetTopicsForDayRequest,
    GetTopicsForDayUseCase,
    ListTopicsRequest,
    ListTopicsUseCase,
)
from study.domain.service import TopicService
from study.domain.value import (
    TopicCategory,
    TopicSortOrder,
    UserId,
    WeekStart,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


def _at(month, day):
    return datetime(2024, month, day, tzinfo=timezone.utc)


async def _seed(unit_env):
    """Three topics: two game engine, one modeling, one unscheduled."""
    topic_service = await unit_env.get(TopicService)
    owner = UserId(uuid4())
    await topic_service.create_topic(
        owner,
        "Godot shaders",
        TopicCategory.GAME_ENGINE,
        schedules=[(_at(3, 10), _at(3, 12))],
    )
    await topic_service.create_topic(
        owner,
        "Blender rigging",
        TopicCategory.MODELING_3D,
        tags=["animation"],
        schedules=[(_at(3, 11), _at(3, 11))],
    )
    await topic_service.create_topic(
        owner, "Unity animation", TopicCategory.GAME_ENGINE
    )


class TestListTopicsUseCase:
    """Tests for ListTopicsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_everything_by_default(self, unit_env):
        # Arrange
        await _seed(unit_env)
        use_case = await unit_env.get(ListTopicsUseCase)

        # Act
        response = await use_case.execute(ListTopicsRequest())

        # Assert
        assert response.total == 3

    @pytest.mark.asyncio
    async def test_category_search_and_sort(self, unit_env):
        """The projection is applied to the full snapshot."""
        # Arrange
        await _seed(unit_env)
        use_case = await unit_env.get(ListTopicsUseCase)

        # Act
        by_category = await use_case.execute(
            ListTopicsRequest(
                category=TopicCategory.GAME_ENGINE, sort=TopicSortOrder.TITLE_DESC
            )
        )
        by_tag = await use_case.execute(
            ListTopicsRequest(query="ANIMATION", sort=TopicSortOrder.TITLE_ASC)
        )

        # Assert
        assert [t.title for t in by_category.topics] == [
            "Unity animation",
            "Godot shaders",
        ]
        assert [t.title for t in by_tag.topics] == [
            "Blender rigging",
            "Unity animation",
        ]


class TestGetCalendarUseCase:
    """Tests for GetCalendarUseCase."""

    @pytest.mark.asyncio
    async def test_month_grid_places_topics(self, unit_env):
        """Scheduled topics land on their days; unscheduled ones nowhere."""
        # Arrange
        await _seed(unit_env)
        use_case = await unit_env.get(GetCalendarUseCase)

        # Act
        response = await use_case.execute(
            GetCalendarRequest(year=2024, month=3, sort=TopicSortOrder.TITLE_ASC)
        )

        # Assert
        assert response.week_start == WeekStart.SUNDAY
        assert len(response.weeks) == 6
        cells = {cell.day: cell for week in response.weeks for cell in week}
        assert [t.title for t in cells[date(2024, 3, 11)].topics] == [
            "Blender rigging",
            "Godot shaders",
        ]
        assert [t.title for t in cells[date(2024, 3, 12)].topics] == [
            "Godot shaders"
        ]
        assert cells[date(2024, 3, 13)].topics == []

    @pytest.mark.asyncio
    async def test_calendar_honours_filters(self, unit_env):
        """The calendar shows only the projected topics."""
        # Arrange
        await _seed(unit_env)
        use_case = await unit_env.get(GetCalendarUseCase)

        # Act
        response = await use_case.execute(
            GetCalendarRequest(
                year=2024,
                month=3,
                category=TopicCategory.MODELING_3D,
                week_start=WeekStart.MONDAY,
            )
        )

        # Assert
        assert response.weeks[0][0].day == date(2024, 2, 26)
        placed = {
            cell.day for week in response.weeks for cell in week if cell.topics
        }
        assert placed == {date(2024, 3, 11)}


class TestGetTopicsForDayUseCase:
    """Tests for GetTopicsForDayUseCase."""

    @pytest.mark.asyncio
    async def test_topics_for_selected_day(self, unit_env):
        # Arrange
        await _seed(unit_env)
        use_case = await unit_env.get(GetTopicsForDayUseCase)

        # Act
        response = await use_case.execute(
            GetTopicsForDayRequest(day=date(2024, 3, 10), sort=TopicSortOrder.OLDEST)
        )

        # Assert
        assert response.total == 1
        assert response.topics[0].title == "Godot shaders"
