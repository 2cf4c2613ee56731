"""In-process change feed.

Fans change signals out to every subscriber of this process. Each subscriber
owns a bounded queue; when a consumer falls behind, its oldest pending
signal is dropped so publishers never block.
"""

import asyncio
from collections.abc import AsyncGenerator

import logfire

from study.domain.service.change_service import ChangeEvent, ChangeFeed


class InProcessChangeFeed(ChangeFeed):
    """Change feed backed by per-subscriber asyncio queues."""

    def __init__(self, max_pending: int = 100) -> None:
        """Initialize change feed.

        Args:
            max_pending: Signals kept per subscriber before the oldest is dropped
        """
        self.max_pending = max_pending
        self._subscribers: set[asyncio.Queue[ChangeEvent]] = set()

    @property
    def subscriber_count(self) -> int:
        """Number of open subscriptions."""
        return len(self._subscribers)

    async def publish(self, event: ChangeEvent) -> None:
        """Deliver a signal to every current subscriber."""
        for queue in list(self._subscribers):
            if queue.full():
                queue.get_nowait()
                logfire.debug("Change feed subscriber lagging, dropped oldest")
            queue.put_nowait(event)

    async def subscribe(self) -> AsyncGenerator[ChangeEvent, None]:
        """Stream signals to a new subscriber.

        The subscriber is registered on the first ``__anext__`` and removed
        when the iterator is closed; an iterator that is never started holds
        no queue.
        """
        queue: asyncio.Queue[ChangeEvent] = asyncio.Queue(maxsize=self.max_pending)
        self._subscribers.add(queue)
        logfire.info("Change feed subscribed", subscribers=len(self._subscribers))
        try:
            while True:
                yield await queue.get()
        finally:
            self._subscribers.discard(queue)
            logfire.info(
                "Change feed unsubscribed", subscribers=len(self._subscribers)
            )
