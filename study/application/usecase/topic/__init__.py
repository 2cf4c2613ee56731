"""Topic use cases."""

from .create_topic import CreateTopicRequest, CreateTopicResponse, CreateTopicUseCase
from .get_calendar import (
    GetCalendarRequest,
    GetCalendarResponse,
    GetCalendarUseCase,
    GetTopicsForDayRequest,
    GetTopicsForDayResponse,
    GetTopicsForDayUseCase,
)
from .get_topic import GetTopicRequest, GetTopicResponse, GetTopicUseCase
from .items import (
    CalendarDayItem,
    CalendarTopicItem,
    ScheduleInput,
    ScheduleItem,
    TopicItem,
    TopicQuery,
)
from .list_topics import ListTopicsRequest, ListTopicsResponse, ListTopicsUseCase
from .delete_topic import DeleteTopicRequest, DeleteTopicUseCase
from .update_topic import (
    UpdateTopicRequest,
    UpdateTopicResponse,
    UpdateTopicStatusRequest,
    UpdateTopicStatusUseCase,
    UpdateTopicUseCase,
)

__all__ = [
    "CalendarDayItem",
    "CalendarTopicItem",
    "CreateTopicRequest",
    "CreateTopicResponse",
    "CreateTopicUseCase",
    "DeleteTopicRequest",
    "DeleteTopicUseCase",
    "GetCalendarRequest",
    "GetCalendarResponse",
    "GetCalendarUseCase",
    "GetTopicRequest",
    "GetTopicResponse",
    "GetTopicUseCase",
    "GetTopicsForDayRequest",
    "GetTopicsForDayResponse",
    "GetTopicsForDayUseCase",
    "ListTopicsRequest",
    "ListTopicsResponse",
    "ListTopicsUseCase",
    "ScheduleInput",
    "ScheduleItem",
    "TopicItem",
    "TopicQuery",
    "UpdateTopicRequest",
    "UpdateTopicResponse",
    "UpdateTopicStatusRequest",
    "UpdateTopicStatusUseCase",
    "UpdateTopicUseCase",
]
