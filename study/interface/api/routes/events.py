"""Change signal stream.

Open views subscribe here and refetch whenever a signal for the record kind
they display arrives. Signals carry ids only, never row data.
"""

from collections.abc import AsyncGenerator, AsyncIterator

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request
from fastapi.responses import StreamingResponse

from study.domain.service import ChangeEvent, ChangeFeed
from study.domain.value import ChangeKind
from study.interface.api.auth import CurrentUserId

router = APIRouter(tags=["events"], route_class=DishkaRoute)


def format_event(event: ChangeEvent) -> str:
    """Render a signal as one server-sent event."""
    return f"event: {event.kind.value}\ndata: {event.model_dump_json()}\n\n"


async def stream_events(
    request: Request,
    events: AsyncGenerator[ChangeEvent, None],
    kinds: set[ChangeKind],
    topic_id: str | None,
) -> AsyncIterator[str]:
    """Relay matching signals until the client disconnects."""
    try:
        async for event in events:
            if await request.is_disconnected():
                break
            if event.kind not in kinds:
                continue
            if topic_id and event.topic_id != topic_id:
                continue
            yield format_event(event)
    finally:
        await events.aclose()
        logfire.debug("Event stream closed")


@router.get("/events")
async def subscribe_events(
    request: Request,
    change_feed: FromDishka[ChangeFeed],
    user_id: CurrentUserId,
    kind: list[ChangeKind] = Query(default=[ChangeKind.COMMENTS, ChangeKind.TOPICS]),
    topic_id: str | None = Query(default=None),
) -> StreamingResponse:
    """Stream change signals as server-sent events.

    Args:
        kind: Record kinds to receive (comments, topics)
        topic_id: Only receive signals for one topic
    """
    logfire.info("Event stream opened", user_id=user_id, kinds=[k.value for k in kind])

    return StreamingResponse(
        stream_events(request, change_feed.subscribe(), set(kind), topic_id),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )
