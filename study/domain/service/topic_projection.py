"""Topic list projection.

Turns the full topic snapshot into what the dashboard shows: category
filter, free-text search, stable sort, and the calendar view that places
topics on the days their schedules cover. Every function here is pure and
returns new lists; inputs are never mutated.
"""

import calendar
import unicodedata
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timezone, tzinfo

from study.domain.model.topic import Topic, TopicSchedule
from study.domain.value import TopicCategory, TopicSortOrder, WeekStart


@dataclass(frozen=True)
class TopicProjection:
    """Dashboard state applied to a topic snapshot.

    A category of None stands for "All".
    """

    category: TopicCategory | None = None
    query: str = ""
    sort: TopicSortOrder = TopicSortOrder.NEWEST


@dataclass
class CalendarDay:
    """One cell of the month grid."""

    day: date
    in_month: bool
    topics: list[Topic] = field(default_factory=list)


def filter_by_category(
    topics: Sequence[Topic], category: TopicCategory | None
) -> list[Topic]:
    """Keep topics of exactly the selected category; None keeps everything."""
    if category is None:
        return list(topics)
    return [topic for topic in topics if topic.category == category]


def matches_query(topic: Topic, query: str) -> bool:
    """Case-insensitive substring match on title, description and tags.

    The category is not searched.
    """
    needle = query.lower()
    if needle in topic.title.lower():
        return True
    if topic.description and needle in topic.description.lower():
        return True
    return any(needle in tag.lower() for tag in topic.tags)


def search_topics(topics: Sequence[Topic], query: str) -> list[Topic]:
    """Filter topics by a search query; a blank query keeps everything."""
    if not query.strip():
        return list(topics)
    return [topic for topic in topics if matches_query(topic, query)]


def title_sort_key(title: str) -> tuple[str, str]:
    """Collation key approximating a locale-aware title comparison.

    Compares accent-insensitively and case-insensitively first, then
    accent-sensitively.
    """
    folded = title.casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base, folded


def sort_topics(topics: Sequence[Topic], order: TopicSortOrder) -> list[Topic]:
    """Stable sort; topics that compare equal keep their input order."""
    if order is TopicSortOrder.NEWEST:
        return sorted(topics, key=lambda t: t.created_at, reverse=True)
    if order is TopicSortOrder.OLDEST:
        return sorted(topics, key=lambda t: t.created_at)
    if order is TopicSortOrder.TITLE_ASC:
        return sorted(topics, key=lambda t: title_sort_key(t.title))
    if order is TopicSortOrder.TITLE_DESC:
        return sorted(topics, key=lambda t: title_sort_key(t.title), reverse=True)
    return list(topics)


def project_topics(topics: Sequence[Topic], projection: TopicProjection) -> list[Topic]:
    """Apply category filter, search and sort, in that order."""
    visible = filter_by_category(topics, projection.category)
    visible = search_topics(visible, projection.query)
    return sort_topics(visible, projection.sort)


def local_day(instant: datetime, tz: tzinfo = timezone.utc) -> date:
    """Calendar day of an instant in the given zone."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(tz).date()


def schedule_covers(
    schedule: TopicSchedule, day: date, tz: tzinfo = timezone.utc
) -> bool:
    """Whether a schedule includes the day, both endpoints inclusive.

    An inverted schedule (end before start) is read as the span between its
    two endpoints.
    """
    start = local_day(schedule.start_date, tz)
    end = local_day(schedule.end_date, tz)
    if end < start:
        start, end = end, start
    return start <= day <= end


def is_topic_on_day(topic: Topic, day: date, tz: tzinfo = timezone.utc) -> bool:
    """Whether any schedule of the topic covers the day."""
    return any(schedule_covers(schedule, day, tz) for schedule in topic.schedules)


def topics_on_day(
    topics: Iterable[Topic], day: date, tz: tzinfo = timezone.utc
) -> list[Topic]:
    """Topics scheduled on a day, in input order."""
    return [topic for topic in topics if is_topic_on_day(topic, day, tz)]


def calendar_grid(
    month: date, week_start: WeekStart = WeekStart.SUNDAY
) -> list[list[date]]:
    """Whole weeks covering the month of the given date.

    Runs from the start of the week holding the 1st to the end of the week
    holding the last day: seven columns, four to six rows. In January of year 1
    and December of year 9999 the outer row is cut short where neighbouring
    days fall outside the supported date range.
    """
    _, days_in_month = calendar.monthrange(month.year, month.month)
    first = month.replace(day=1).toordinal()
    last = first + days_in_month - 1
    lead = (date.fromordinal(first).weekday() - week_start.firstweekday) % 7
    trail = 6 - (date.fromordinal(last).weekday() - week_start.firstweekday) % 7

    lowest, highest = date.min.toordinal(), date.max.toordinal()
    weeks: list[list[date]] = []
    for week_first in range(first - lead, last + trail + 1, 7):
        week = [
            date.fromordinal(ordinal)
            for ordinal in range(week_first, week_first + 7)
            if lowest <= ordinal <= highest
        ]
        weeks.append(week)
    return weeks


def build_calendar(
    topics: Sequence[Topic],
    month: date,
    week_start: WeekStart = WeekStart.SUNDAY,
    tz: tzinfo = timezone.utc,
) -> list[list[CalendarDay]]:
    """Place topics on every day of the month grid.

    Each day is computed on its own from the given topics, keeping their
    order, so pass an already projected list to get a filtered calendar.
    """
    return [
        [
            CalendarDay(
                day=day,
                in_month=day.month == month.month,
                topics=topics_on_day(topics, day, tz),
            )
            for day in week
        ]
        for week in calendar_grid(month, week_start)
    ]
