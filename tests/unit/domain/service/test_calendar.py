"""Unit tests for calendar placement of topics."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from study.domain.service.topic_projection import (
    build_calendar,
    calendar_grid,
    is_topic_on_day,
    local_day,
    topics_on_day,
)
from study.domain.value import WeekStart
from tests.conftest import make_topic


def _at(year, month, day, hour=0, tzinfo=timezone.utc):
    return datetime(year, month, day, hour, tzinfo=tzinfo)


class TestIsTopicOnDay:
    """Tests for day membership of scheduled topics."""

    def test_range_is_inclusive_on_both_ends(self):
        """A 10th-12th schedule covers the 10th and 11th but not the 13th."""
        # Arrange
        topic = make_topic(schedules=[(_at(2024, 3, 10), _at(2024, 3, 12))])

        # Act & Assert
        assert is_topic_on_day(topic, date(2024, 3, 10))
        assert is_topic_on_day(topic, date(2024, 3, 11))
        assert is_topic_on_day(topic, date(2024, 3, 12))
        assert not is_topic_on_day(topic, date(2024, 3, 13))
        assert not is_topic_on_day(topic, date(2024, 3, 9))

    def test_single_day_schedule(self):
        """A schedule starting and ending on the same day covers that day."""
        # Arrange
        topic = make_topic(schedules=[(_at(2024, 3, 10, 9), _at(2024, 3, 10, 17))])

        # Act & Assert
        assert is_topic_on_day(topic, date(2024, 3, 10))

    def test_time_of_day_is_ignored(self):
        """An end late in the day still covers only its own day."""
        # Arrange
        topic = make_topic(schedules=[(_at(2024, 3, 10, 23), _at(2024, 3, 11, 1))])

        # Act & Assert
        assert is_topic_on_day(topic, date(2024, 3, 11))
        assert not is_topic_on_day(topic, date(2024, 3, 12))

    def test_unscheduled_topic_is_never_placed(self):
        """A topic without schedules appears on no day."""
        # Arrange
        topic = make_topic()

        # Act & Assert
        assert not is_topic_on_day(topic, date(2024, 3, 1))

    def test_any_schedule_places_topic(self):
        """Several windows each place the topic."""
        # Arrange
        topic = make_topic(
            schedules=[
                (_at(2024, 3, 1), _at(2024, 3, 2)),
                (_at(2024, 3, 20), _at(2024, 3, 20)),
            ]
        )

        # Act & Assert
        assert is_topic_on_day(topic, date(2024, 3, 2))
        assert is_topic_on_day(topic, date(2024, 3, 20))
        assert not is_topic_on_day(topic, date(2024, 3, 10))

    def test_inverted_schedule_covers_span_between_endpoints(self):
        """An end before start is read as the span between the two dates."""
        # Arrange
        topic = make_topic(schedules=[(_at(2024, 3, 12), _at(2024, 3, 10))])

        # Act & Assert
        assert is_topic_on_day(topic, date(2024, 3, 11))
        assert not is_topic_on_day(topic, date(2024, 3, 13))

    def test_days_follow_the_viewing_zone(self):
        """An instant late on the 10th UTC is the 11th in Tokyo."""
        # Arrange
        tokyo = ZoneInfo("Asia/Tokyo")
        topic = make_topic(schedules=[(_at(2024, 3, 10, 20), _at(2024, 3, 10, 20))])

        # Act & Assert
        assert is_topic_on_day(topic, date(2024, 3, 10))
        assert not is_topic_on_day(topic, date(2024, 3, 10), tokyo)
        assert is_topic_on_day(topic, date(2024, 3, 11), tokyo)

    def test_topics_on_day_keeps_input_order(self):
        """Topics on a day come back in the order given."""
        # Arrange
        window = [(_at(2024, 3, 5), _at(2024, 3, 6))]
        first = make_topic("first", schedules=window)
        skipped = make_topic("skipped")
        second = make_topic("second", schedules=window)

        # Act
        result = topics_on_day([first, skipped, second], date(2024, 3, 5))

        # Assert
        assert [t.title for t in result] == ["first", "second"]


class TestLocalDay:
    """Tests for local_day."""

    def test_naive_instant_is_read_as_utc(self):
        """A naive datetime is taken to be UTC."""
        assert local_day(datetime(2024, 3, 10, 23)) == date(2024, 3, 10)
        assert local_day(
            datetime(2024, 3, 10, 23), ZoneInfo("Asia/Tokyo")
        ) == date(2024, 3, 11)


class TestCalendarGrid:
    """Tests for calendar_grid."""

    def test_sunday_start_covers_whole_weeks(self):
        """March 2024 starts on a Friday; the grid opens on Sunday Feb 25."""
        # Act
        grid = calendar_grid(date(2024, 3, 15))

        # Assert
        assert grid[0][0] == date(2024, 2, 25)
        assert grid[-1][-1] == date(2024, 4, 6)
        assert all(len(week) == 7 for week in grid)
        assert all(week[0].weekday() == 6 for week in grid)

    def test_monday_start(self):
        """With Monday as the first column the grid opens on Feb 26."""
        # Act
        grid = calendar_grid(date(2024, 3, 1), WeekStart.MONDAY)

        # Assert
        assert grid[0][0] == date(2024, 2, 26)
        assert all(week[0].weekday() == 0 for week in grid)

    def test_february_2015_fits_four_rows(self):
        """A 28-day month starting on Sunday fills exactly four weeks."""
        # Act
        grid = calendar_grid(date(2015, 2, 1))

        # Assert
        assert len(grid) == 4
        assert grid[0][0] == date(2015, 2, 1)
        assert grid[-1][-1] == date(2015, 2, 28)

    def test_long_month_needs_six_rows(self):
        """March 2024 on a Sunday grid spans six weeks."""
        assert len(calendar_grid(date(2024, 3, 1))) == 6

    def test_every_month_has_four_to_six_rows(self):
        """Grids are always between four and six weeks long."""
        for month in range(1, 13):
            for start in WeekStart:
                rows = len(calendar_grid(date(2024, month, 1), start))
                assert 4 <= rows <= 6

    def test_first_supported_month_clips_leading_days(self):
        """January of year 1 opens on a Monday; no earlier day exists."""
        # Act
        sunday_grid = calendar_grid(date(1, 1, 1))
        monday_grid = calendar_grid(date(1, 1, 1), WeekStart.MONDAY)

        # Assert
        assert sunday_grid[0][0] == date.min
        assert len(sunday_grid[0]) == 6
        assert all(len(week) == 7 for week in sunday_grid[1:])
        assert monday_grid[0][0] == date.min
        assert len(monday_grid[0]) == 7

    def test_last_supported_month_clips_trailing_days(self):
        """December 9999 ends on a Friday; no later day exists."""
        # Act
        sunday_grid = calendar_grid(date(9999, 12, 1))
        monday_grid = calendar_grid(date(9999, 12, 1), WeekStart.MONDAY)

        # Assert
        assert sunday_grid[-1][-1] == date.max
        assert len(sunday_grid[-1]) == 6
        assert monday_grid[-1][-1] == date.max
        assert len(monday_grid[-1]) == 5

    def test_edge_months_build_without_error(self):
        """Topics far from the range limits are simply absent."""
        # Arrange
        topic = make_topic(schedules=[(_at(2024, 3, 1), _at(2024, 3, 2))])

        # Act
        first = build_calendar([topic], date(1, 1, 1))
        last = build_calendar([topic], date(9999, 12, 1))

        # Assert
        assert first[0][0].day == date.min
        assert last[-1][-1].day == date.max
        assert not any(cell.topics for week in first + last for cell in week)


class TestBuildCalendar:
    """Tests for build_calendar."""

    def test_days_outside_month_are_flagged(self):
        """Leading and trailing days belong to the neighbouring months."""
        # Act
        weeks = build_calendar([], date(2024, 3, 1))

        # Assert
        assert weeks[0][0].day == date(2024, 2, 25)
        assert not weeks[0][0].in_month
        assert weeks[0][5].day == date(2024, 3, 1)
        assert weeks[0][5].in_month

    def test_topics_are_placed_on_covered_days(self):
        """Each covered day lists the topic, including spill-over days."""
        # Arrange
        topic = make_topic(schedules=[(_at(2024, 2, 28), _at(2024, 3, 2))])

        # Act
        weeks = build_calendar([topic], date(2024, 3, 1))

        # Assert
        placed = [
            cell.day for week in weeks for cell in week if cell.topics == [topic]
        ]
        assert placed == [
            date(2024, 2, 28),
            date(2024, 2, 29),
            date(2024, 3, 1),
            date(2024, 3, 2),
        ]
