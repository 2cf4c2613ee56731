"""Domain model entities for the study group service."""

from study.domain.model.attachment import Attachment
from study.domain.model.comment import Comment
from study.domain.model.profile import Profile
from study.domain.model.topic import Topic, TopicSchedule

__all__ = [
    "Attachment",
    "Comment",
    "Profile",
    "Topic",
    "TopicSchedule",
]
