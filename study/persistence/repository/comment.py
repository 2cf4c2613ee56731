"""PostgreSQL implementation of Comment repository."""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from study.domain.model import Comment
from study.domain.repository import CommentRepository
from study.domain.value import CommentId, TopicId
from study.persistence.mappers import comment_to_dict, row_to_comment
from study.persistence.tables import comments_table, profiles_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _select_comments(self):
        return select(
            comments_table, profiles_table.c.username, profiles_table.c.avatar_url
        ).outerjoin(profiles_table, profiles_table.c.id == comments_table.c.user_id)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = self._select_comments().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_topic(self, topic_id: TopicId) -> List[Comment]:
        """Find all comments for a topic in creation order."""
        stmt = (
            self._select_comments()
            .where(comments_table.c.topic_id == topic_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)
        await self.session.execute(stmt)
        await self.session.flush()

        # Fetch back to pick up the author's profile fields
        return await self.find_by_id(comment.id) or comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(content=content, updated_at=datetime.now(timezone.utc))
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        if result.fetchone() is None:
            return None

        await self.session.flush()
        return await self.find_by_id(comment_id)

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment; replies cascade."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

