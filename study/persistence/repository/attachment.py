"""PostgreSQL implementation of Attachment repository."""

from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from study.domain.model import Attachment
from study.domain.repository import AttachmentRepository
from study.domain.value import AttachmentId, CommentId, TopicId
from study.persistence.mappers import attachment_to_dict, row_to_attachment
from study.persistence.tables import attachments_table


class PostgresAttachmentRepository(AttachmentRepository):
    """PostgreSQL implementation of AttachmentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, attachment_id: AttachmentId) -> Optional[Attachment]:
        """Find an attachment by ID."""
        stmt = select(attachments_table).where(attachments_table.c.id == attachment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_attachment(row._asdict()) if row else None

    async def find_by_topic(self, topic_id: TopicId) -> List[Attachment]:
        """Find attachments of a topic, newest first."""
        stmt = (
            select(attachments_table)
            .where(attachments_table.c.topic_id == topic_id)
            .order_by(desc(attachments_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_attachment(row._asdict()) for row in result.fetchall()]

    async def find_by_comment(self, comment_id: CommentId) -> List[Attachment]:
        """Find attachments of a comment, oldest first."""
        stmt = (
            select(attachments_table)
            .where(attachments_table.c.comment_id == comment_id)
            .order_by(attachments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_attachment(row._asdict()) for row in result.fetchall()]

    async def save(self, attachment: Attachment) -> Attachment:
        """Save an attachment record."""
        stmt = attachments_table.insert().values(**attachment_to_dict(attachment))
        await self.session.execute(stmt)
        await self.session.flush()
        return attachment

    async def delete(self, attachment_id: AttachmentId) -> None:
        """Delete an attachment record."""
        stmt = attachments_table.delete().where(attachments_table.c.id == attachment_id)
        await self.session.execute(stmt)
        await self.session.flush()
