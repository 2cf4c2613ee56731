"""Domain services."""

from .attachment_service import AttachmentService
from .base import Service
from .change_service import ChangeEvent, ChangeFeed, ChangeService
from .comment_service import CommentService
from .comment_tree import CommentNode, build_comment_forest, count_nodes, walk_forest
from .jwt_service import JWTService
from .profile_service import ProfileService
from .storage_service import ObjectStorage
from .topic_projection import CalendarDay, TopicProjection
from .topic_service import TopicService

__all__ = [
    "AttachmentService",
    "CalendarDay",
    "ChangeEvent",
    "ChangeFeed",
    "ChangeService",
    "CommentNode",
    "CommentService",
    "JWTService",
    "ObjectStorage",
    "ProfileService",
    "Service",
    "TopicProjection",
    "TopicService",
    "build_comment_forest",
    "count_nodes",
    "walk_forest",
]
