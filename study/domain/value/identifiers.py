"""Typed identifiers.

Every row in the hosted store is keyed by a UUID; the NewTypes keep a topic
ID from being passed where a comment ID is expected.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
TopicId = NewType("TopicId", UUID)
ScheduleId = NewType("ScheduleId", UUID)
CommentId = NewType("CommentId", UUID)
AttachmentId = NewType("AttachmentId", UUID)
