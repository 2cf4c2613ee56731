"""Change signal domain service.

Mutations of comments and topics emit a signal so that open views know to
refetch. A signal carries no row data and is never diffed against anything;
its only contract is "something of this kind changed".
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncGenerator
from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from study.domain.model.common import utcnow
from study.domain.value import ChangeAction, ChangeKind

from .base import Service


class ChangeEvent(BaseModel):
    """Out-of-band notice that a row changed."""

    kind: ChangeKind
    action: ChangeAction
    record_id: str
    topic_id: str | None = None
    occurred_at: datetime = Field(default_factory=utcnow)


class ChangeFeed(ABC):
    """Port to the pub/sub channel that delivers change signals."""

    @abstractmethod
    async def publish(self, event: ChangeEvent) -> None:
        """Deliver a signal to every current subscriber."""
        pass

    @abstractmethod
    def subscribe(self) -> AsyncGenerator[ChangeEvent, None]:
        """Stream signals published once iteration starts, until it is closed."""
        pass


class ChangeService(Service):
    """Domain service for publishing change signals."""

    def __init__(self, change_feed: ChangeFeed) -> None:
        """Initialize change service.

        Args:
            change_feed: Pub/sub channel
        """
        self.change_feed = change_feed

    async def publish(
        self,
        kind: ChangeKind,
        action: ChangeAction,
        record_id: UUID,
        topic_id: UUID | None = None,
    ) -> None:
        """Publish a change signal.

        The mutation that triggered the signal has already happened, so a
        failing feed is logged and swallowed rather than failing the request.

        Args:
            kind: Record kind
            action: Insert, update or delete
            record_id: ID of the changed row
            topic_id: Topic the row belongs to, when known
        """
        event = ChangeEvent(
            kind=kind,
            action=action,
            record_id=str(record_id),
            topic_id=str(topic_id) if topic_id else None,
        )
        try:
            await self.change_feed.publish(event)
            logfire.debug(
                "Change published",
                kind=kind.value,
                action=action.value,
                record_id=event.record_id,
            )
        except Exception as e:
            logfire.error(
                "Change publish failed",
                kind=kind.value,
                action=action.value,
                record_id=event.record_id,
                error=str(e),
            )
