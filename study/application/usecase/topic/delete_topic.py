"""Delete topic use case."""

from pydantic import BaseModel

from study.domain.service import TopicService

from .update_topic import get_owned_topic


class DeleteTopicRequest(BaseModel):
    """Delete topic request."""

    topic_id: str  # UUID string
    user_id: str  # Current user ID (must be owner)


class DeleteTopicUseCase:
    """Use case for deleting a topic with everything attached to it."""

    def __init__(self, topic_service: TopicService) -> None:
        self.topic_service = topic_service

    async def execute(self, request: DeleteTopicRequest) -> None:
        """Execute delete topic flow.

        Raises:
            NotFoundError: If the topic does not exist
            NotAuthorizedError: If user doesn't own the topic
        """
        topic = await get_owned_topic(
            self.topic_service, request.topic_id, request.user_id
        )
        await self.topic_service.delete_topic(topic)
