"""List topics use case."""

import logfire
from pydantic import BaseModel

from study.domain.service import TopicService
from study.domain.service.topic_projection import project_topics

from .items import TopicItem, TopicQuery


class ListTopicsRequest(TopicQuery):
    """List topics request."""

    pass


class ListTopicsResponse(BaseModel):
    """List topics response."""

    topics: list[TopicItem]
    total: int


class ListTopicsUseCase:
    """Use case for the dashboard list: filter, search and sort."""

    def __init__(self, topic_service: TopicService) -> None:
        """Initialize list topics use case.

        Args:
            topic_service: Topic domain service
        """
        self.topic_service = topic_service

    async def execute(self, request: ListTopicsRequest) -> ListTopicsResponse:
        """Execute list topics flow."""
        with logfire.span(
            "list_topics.execute",
            category=request.category.value if request.category else None,
            sort=request.sort.value,
            has_query=bool(request.query.strip()),
        ):
            topics = await self.topic_service.list_topics()
            visible = project_topics(topics, request.to_projection())
            logfire.info("Topics projected", total=len(topics), visible=len(visible))

            return ListTopicsResponse(
                topics=[TopicItem.from_domain(t) for t in visible],
                total=len(visible),
            )
