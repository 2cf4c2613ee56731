"""Topic repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, List, Optional

from study.domain.model.topic import Topic, TopicSchedule
from study.domain.value import TopicId


class TopicRepository(ABC):
    """Repository for the Topic aggregate.

    Topics are always returned with their schedules embedded.
    """

    @abstractmethod
    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find a topic by ID.

        Args:
            topic_id: The topic's unique identifier

        Returns:
            The topic with its schedules if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Topic]:
        """Find every topic, newest first.

        Filtering, searching and re-sorting happen in the projection engine,
        not in the store.

        Returns:
            All topics ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, topic: Topic) -> Topic:
        """Insert a new topic row.

        Schedules embedded in the model are ignored; use replace_schedules.
        Existing topics are changed through update, which leaves untouched
        columns as stored.

        Args:
            topic: The topic to save

        Returns:
            The saved topic with its current schedules
        """
        pass

    @abstractmethod
    async def update(
        self, topic_id: TopicId, changes: Mapping[str, Any]
    ) -> Optional[Topic]:
        """Write only the given columns of a topic.

        Category and status values the domain does not know are read as
        fallbacks; writing just the changed columns keeps them intact.

        Args:
            topic_id: The topic ID
            changes: Topic field names mapped to their new values

        Returns:
            The updated topic with its schedules, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def replace_schedules(
        self, topic_id: TopicId, schedules: List[TopicSchedule]
    ) -> List[TopicSchedule]:
        """Delete every schedule of a topic and insert the given set.

        Args:
            topic_id: The topic ID
            schedules: The complete new set of schedules

        Returns:
            The stored schedules
        """
        pass

    @abstractmethod
    async def delete(self, topic_id: TopicId) -> None:
        """Delete a topic.

        The store cascades the delete to schedules, comments and attachments.

        Args:
            topic_id: The topic ID to delete
        """
        pass
