"""SQLAlchemy table definitions for the study group store.

The schema is owned by the hosted relational store; these definitions mirror
it for query building only and are never used to create tables.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

metadata = MetaData()


def _timestamp(name: str, defaulted: bool = True) -> Column:
    """Timezone-aware timestamp column, defaulting to the insert time."""
    return Column(
        name,
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()" if defaulted else None,
    )


def _uuid_pk() -> Column:
    return Column("id", UUID, primary_key=True, server_default="gen_random_uuid()")


def _ref(name: str, target: str, nullable: bool = False) -> Column:
    """UUID foreign key removed together with the row it points at."""
    return Column(
        name, UUID, ForeignKey(f"{target}.id", ondelete="CASCADE"), nullable=nullable
    )


profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),  # Identity provider subject
    Column("username", String(50), nullable=True),
    Column("avatar_url", Text, nullable=True),
    _timestamp("updated_at"),
)

topics_table = Table(
    "topics",
    metadata,
    _uuid_pk(),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=True),
    Column("category", String(50), nullable=True),  # Unknown values read leniently
    Column("tags", ARRAY(Text), nullable=True),
    Column("status", String(50), nullable=True),
    _ref("created_by", "profiles"),
    _timestamp("created_at"),
    _timestamp("updated_at"),
)

Index("idx_topics_created_at", topics_table.c.created_at.desc())
Index("idx_topics_created_by", topics_table.c.created_by)

topic_schedules_table = Table(
    "topic_schedules",
    metadata,
    _uuid_pk(),
    _ref("topic_id", "topics"),
    _timestamp("start_date", defaulted=False),
    _timestamp("end_date", defaulted=False),
)

Index("idx_topic_schedules_topic_id", topic_schedules_table.c.topic_id)

comments_table = Table(
    "comments",
    metadata,
    _uuid_pk(),
    _ref("topic_id", "topics"),
    _ref("parent_id", "comments", nullable=True),
    _ref("user_id", "profiles"),
    Column("content", Text, nullable=False),
    _timestamp("created_at"),
    _timestamp("updated_at"),
)

Index("idx_comments_topic_id", comments_table.c.topic_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at)

attachments_table = Table(
    "attachments",
    metadata,
    _uuid_pk(),
    _ref("topic_id", "topics", nullable=True),
    _ref("comment_id", "comments", nullable=True),
    Column("file_url", Text, nullable=False),
    Column("file_type", String(255), nullable=False),
    _ref("uploaded_by", "profiles"),
    _timestamp("created_at"),
    CheckConstraint(
        "(topic_id IS NULL) <> (comment_id IS NULL)",
        name="attachment_single_owner",
    ),
)

Index("idx_attachments_topic_id", attachments_table.c.topic_id)
Index("idx_attachments_comment_id", attachments_table.c.comment_id)
