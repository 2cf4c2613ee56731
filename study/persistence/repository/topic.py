"""PostgreSQL implementation of Topic repository."""

from collections.abc import Mapping
from typing import Any, List, Optional

from sqlalchemy import desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from study.domain.model import Topic, TopicSchedule
from study.domain.repository import TopicRepository
from study.domain.value import TopicId
from study.persistence.mappers import (
    group_schedules,
    row_to_schedule,
    row_to_topic,
    schedule_to_dict,
    topic_changes_to_dict,
    topic_to_dict,
)
from study.persistence.tables import (
    profiles_table,
    topic_schedules_table,
    topics_table,
)


class PostgresTopicRepository(TopicRepository):
    """PostgreSQL implementation of TopicRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _select_topics(self):
        return select(topics_table, profiles_table.c.username).outerjoin(
            profiles_table, profiles_table.c.id == topics_table.c.created_by
        )

    async def _find_schedules(self, topic_ids: List[TopicId]) -> List[TopicSchedule]:
        if not topic_ids:
            return []
        stmt = (
            select(topic_schedules_table)
            .where(topic_schedules_table.c.topic_id.in_(topic_ids))
            .order_by(topic_schedules_table.c.start_date)
        )
        result = await self.session.execute(stmt)
        return [row_to_schedule(row._asdict()) for row in result.fetchall()]

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find a topic by ID, with schedules."""
        stmt = self._select_topics().where(topics_table.c.id == topic_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        schedules = await self._find_schedules([topic_id])
        return row_to_topic(row._asdict(), schedules)

    async def find_all(self) -> List[Topic]:
        """Find all topics with schedules, newest first."""
        stmt = self._select_topics().order_by(desc(topics_table.c.created_at))
        result = await self.session.execute(stmt)
        rows = [row._asdict() for row in result.fetchall()]

        schedules = group_schedules(
            await self._find_schedules([row["id"] for row in rows])
        )
        return [row_to_topic(row, schedules.get(row["id"], [])) for row in rows]

    async def save(self, topic: Topic) -> Topic:
        """Insert a topic row; embedded schedules are ignored."""
        await self.session.execute(insert(topics_table).values(**topic_to_dict(topic)))
        await self.session.flush()

        return await self.find_by_id(topic.id) or topic

    async def update(
        self, topic_id: TopicId, changes: Mapping[str, Any]
    ) -> Optional[Topic]:
        """Write only the changed columns of a topic."""
        stmt = (
            update(topics_table)
            .where(topics_table.c.id == topic_id)
            .values(**topic_changes_to_dict(changes))
            .returning(topics_table.c.id)
        )
        result = await self.session.execute(stmt)
        if result.fetchone() is None:
            return None

        await self.session.flush()
        return await self.find_by_id(topic_id)

    async def replace_schedules(
        self, topic_id: TopicId, schedules: List[TopicSchedule]
    ) -> List[TopicSchedule]:
        """Delete all schedules of a topic and insert the given set."""
        await self.session.execute(
            topic_schedules_table.delete().where(
                topic_schedules_table.c.topic_id == topic_id
            )
        )
        if schedules:
            await self.session.execute(
                topic_schedules_table.insert(),
                [schedule_to_dict(schedule) for schedule in schedules],
            )
        await self.session.flush()
        return await self._find_schedules([topic_id])

    async def delete(self, topic_id: TopicId) -> None:
        """Delete a topic; schedules, comments and attachments cascade."""
        stmt = topics_table.delete().where(topics_table.c.id == topic_id)
        await self.session.execute(stmt)
        await self.session.flush()
