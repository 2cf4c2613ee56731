"""In-memory topic repository for testing."""

from collections.abc import Mapping
from typing import Any, Optional

from study.domain.model.topic import Topic, TopicSchedule
from study.domain.repository.topic import TopicRepository
from study.domain.value import TopicId


class InMemoryTopicRepository(TopicRepository):
    """In-memory implementation of TopicRepository for testing."""

    def __init__(self) -> None:
        self._topics: dict[TopicId, Topic] = {}
        self._schedules: dict[TopicId, list[TopicSchedule]] = {}

    def _with_schedules(self, topic: Topic) -> Topic:
        schedules = sorted(
            self._schedules.get(topic.id, []), key=lambda s: s.start_date
        )
        return topic.model_copy(update={"schedules": schedules})

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find a topic by ID."""
        topic = self._topics.get(topic_id)
        return self._with_schedules(topic) if topic else None

    async def find_all(self) -> list[Topic]:
        """Find all topics, newest first."""
        topics = sorted(
            self._topics.values(), key=lambda t: t.created_at, reverse=True
        )
        return [self._with_schedules(topic) for topic in topics]

    async def save(self, topic: Topic) -> Topic:
        """Save or update a topic; embedded schedules are ignored."""
        existing = self._topics.get(topic.id)
        if existing and topic.author_username is None:
            topic = topic.model_copy(
                update={"author_username": existing.author_username}
            )
        self._topics[topic.id] = topic.model_copy(update={"schedules": []})
        return self._with_schedules(topic)

    async def update(
        self, topic_id: TopicId, changes: Mapping[str, Any]
    ) -> Optional[Topic]:
        """Apply a partial update to a stored topic."""
        topic = self._topics.get(topic_id)
        if topic is None:
            return None
        self._topics[topic_id] = Topic.model_validate({**topic.model_dump(), **changes})
        return self._with_schedules(self._topics[topic_id])

    async def replace_schedules(
        self, topic_id: TopicId, schedules: list[TopicSchedule]
    ) -> list[TopicSchedule]:
        """Replace all schedules of a topic."""
        self._schedules[topic_id] = list(schedules)
        return sorted(schedules, key=lambda s: s.start_date)

    async def delete(self, topic_id: TopicId) -> None:
        """Delete a topic and its schedules."""
        self._topics.pop(topic_id, None)
        self._schedules.pop(topic_id, None)
