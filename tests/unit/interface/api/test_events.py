"""Tests for the change signal stream."""

import asyncio
import json
from uuid import uuid4

import pytest

from study.adapter.realtime import InProcessChangeFeed
from study.domain.service import ChangeEvent
from study.domain.value import ChangeAction, ChangeKind
from study.interface.api.routes.events import format_event, stream_events


class _ConnectedRequest:
    async def is_disconnected(self) -> bool:
        return False


def _event(kind: ChangeKind, topic_id: str | None = None) -> ChangeEvent:
    return ChangeEvent(
        kind=kind,
        action=ChangeAction.UPDATE,
        record_id=str(uuid4()),
        topic_id=topic_id,
    )


class TestFormatEvent:
    """Tests for format_event."""

    def test_server_sent_event_layout(self):
        event = _event(ChangeKind.TOPICS)

        rendered = format_event(event)

        assert rendered.startswith("event: topics\ndata: ")
        assert rendered.endswith("\n\n")
        payload = json.loads(rendered.split("data: ", 1)[1])
        assert payload["record_id"] == event.record_id
        assert payload["action"] == "UPDATE"


class TestStreamEvents:
    """Tests for stream_events."""

    @pytest.mark.asyncio
    async def test_filters_by_kind_and_topic(self):
        """Only signals of the requested kinds and topic are relayed."""
        # Arrange
        feed = InProcessChangeFeed()
        topic_id = str(uuid4())
        stream = stream_events(
            _ConnectedRequest(), feed.subscribe(), {ChangeKind.COMMENTS}, topic_id
        )
        wanted = _event(ChangeKind.COMMENTS, topic_id)
        read = asyncio.ensure_future(anext(stream))
        await asyncio.sleep(0)

        # Act
        await feed.publish(_event(ChangeKind.TOPICS, topic_id))
        await feed.publish(_event(ChangeKind.COMMENTS, str(uuid4())))
        await feed.publish(wanted)
        first = await asyncio.wait_for(read, timeout=1)
        await stream.aclose()

        # Assert
        assert first == format_event(wanted)
        assert feed.subscriber_count == 0
