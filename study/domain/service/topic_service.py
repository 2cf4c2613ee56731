"""Topic domain service."""

import logfire
from collections.abc import Mapping
from datetime import datetime
from typing import Any
from uuid import uuid4

from study.domain.error import NotFoundError
from study.domain.model.common import utcnow
from study.domain.model.topic import Topic, TopicSchedule, normalize_tags
from study.domain.repository import TopicRepository
from study.domain.value import (
    ChangeAction,
    ChangeKind,
    ScheduleId,
    TopicCategory,
    TopicId,
    TopicStatus,
    UserId,
)

from .base import Service
from .change_service import ChangeService

ScheduleRange = tuple[datetime | None, datetime | None]

EDITABLE_FIELDS = frozenset({"title", "description", "category", "tags"})


def _complete_schedules(
    topic_id: TopicId, ranges: list[ScheduleRange]
) -> list[TopicSchedule]:
    """Build schedules from (start, end) pairs, dropping incomplete ones."""
    return [
        TopicSchedule(
            id=ScheduleId(uuid4()),
            topic_id=topic_id,
            start_date=start,
            end_date=end,
        )
        for start, end in ranges
        if start is not None and end is not None
    ]


class TopicService(Service):
    """Domain service for topic operations."""

    def __init__(
        self, topic_repository: TopicRepository, change_service: ChangeService
    ) -> None:
        """Initialize topic service.

        Args:
            topic_repository: Topic repository
            change_service: Publishes change signals after mutations
        """
        self.topic_repository = topic_repository
        self.change_service = change_service

    async def create_topic(
        self,
        created_by: UserId,
        title: str,
        category: TopicCategory,
        description: str | None = None,
        tags: list[str] | None = None,
        schedules: list[ScheduleRange] | None = None,
        author_username: str | None = None,
    ) -> Topic:
        """Create a topic with its schedules.

        Args:
            created_by: Owner user ID
            title: Topic title
            category: Topic category
            description: Optional markdown description
            tags: Free-text tags
            schedules: (start, end) pairs; incomplete pairs are skipped
            author_username: Owner display name

        Returns:
            Created topic with schedules
        """
        with logfire.span(
            "topic_service.create_topic",
            created_by=str(created_by),
            category=category.value,
        ):
            now = utcnow()
            topic_id = TopicId(uuid4())
            topic = Topic(
                id=topic_id,
                title=title,
                description=description,
                category=category,
                tags=tags or [],
                status=TopicStatus.NOT_STARTED,
                created_by=created_by,
                created_at=now,
                updated_at=now,
                author_username=author_username,
            )

            await self.topic_repository.save(topic)
            stored_schedules = await self.topic_repository.replace_schedules(
                topic_id, _complete_schedules(topic_id, schedules or [])
            )
            saved = topic.model_copy(update={"schedules": stored_schedules})

            logfire.info(
                "Topic created",
                topic_id=str(topic_id),
                schedule_count=len(stored_schedules),
            )
            await self.change_service.publish(
                ChangeKind.TOPICS, ChangeAction.INSERT, topic_id, topic_id
            )
            return saved

    async def get_topic(self, topic_id: TopicId) -> Topic:
        """Get a topic by ID.

        Args:
            topic_id: Topic ID

        Returns:
            Topic with schedules

        Raises:
            NotFoundError: If topic not found
        """
        with logfire.span("topic_service.get_topic", topic_id=str(topic_id)):
            topic = await self.topic_repository.find_by_id(topic_id)
            if not topic:
                logfire.warn("Topic not found", topic_id=str(topic_id))
                raise NotFoundError("Topic", str(topic_id))
            return topic

    async def list_topics(self) -> list[Topic]:
        """Get every topic with schedules, newest first."""
        with logfire.span("topic_service.list_topics"):
            topics = await self.topic_repository.find_all()
            logfire.info("Topics retrieved", count=len(topics))
            return topics

    async def update_topic(
        self,
        topic: Topic,
        changes: Mapping[str, Any],
        schedules: list[ScheduleRange] | None = None,
    ) -> Topic:
        """Update the given topic fields and optionally replace its schedules.

        Only the named fields are written, so a stored category or status
        outside the known values is left alone unless it is being changed.

        Args:
            topic: Current topic
            changes: New values keyed by title, description, category or tags
            schedules: Complete new set of (start, end) pairs; None keeps the
                current schedules

        Returns:
            Updated topic with its schedules

        Raises:
            ValueError: If a field cannot be edited
            NotFoundError: If the topic was deleted meanwhile
        """
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be edited: {sorted(unknown)}")
        changes = dict(changes)
        if "tags" in changes:
            changes["tags"] = normalize_tags(changes["tags"])

        with logfire.span(
            "topic_service.update_topic",
            topic_id=str(topic.id),
            fields=sorted(changes),
        ):
            updated = await self.topic_repository.update(
                topic.id, {**changes, "updated_at": utcnow()}
            )
            if updated is None:
                raise NotFoundError("Topic", str(topic.id))

            if schedules is not None:
                stored_schedules = await self.topic_repository.replace_schedules(
                    topic.id, _complete_schedules(topic.id, schedules)
                )
                updated = updated.model_copy(update={"schedules": stored_schedules})

            logfire.info(
                "Topic updated",
                topic_id=str(topic.id),
                schedule_count=len(updated.schedules),
            )
            await self.change_service.publish(
                ChangeKind.TOPICS, ChangeAction.UPDATE, topic.id, topic.id
            )
            return updated

    async def update_status(self, topic: Topic, status: TopicStatus) -> Topic:
        """Change the progress status of a topic, leaving other columns alone.

        Args:
            topic: Current topic
            status: New status

        Returns:
            Updated topic

        Raises:
            NotFoundError: If the topic was deleted meanwhile
        """
        with logfire.span(
            "topic_service.update_status",
            topic_id=str(topic.id),
            status=status.value,
        ):
            updated = await self.topic_repository.update(topic.id, {"status": status})
            if updated is None:
                raise NotFoundError("Topic", str(topic.id))

            logfire.info(
                "Topic status updated",
                topic_id=str(topic.id),
                previous=topic.status.value,
                status=status.value,
            )
            await self.change_service.publish(
                ChangeKind.TOPICS, ChangeAction.UPDATE, topic.id, topic.id
            )
            return updated

    async def delete_topic(self, topic: Topic) -> None:
        """Delete a topic with its schedules, comments and attachments.

        Args:
            topic: Topic to delete
        """
        with logfire.span("topic_service.delete_topic", topic_id=str(topic.id)):
            await self.topic_repository.delete(topic.id)
            logfire.info("Topic deleted", topic_id=str(topic.id))
            await self.change_service.publish(
                ChangeKind.TOPICS, ChangeAction.DELETE, topic.id, topic.id
            )
