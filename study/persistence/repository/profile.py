"""PostgreSQL implementation of Profile repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from study.domain.model import Profile
from study.domain.repository import ProfileRepository
from study.domain.value import UserId
from study.persistence.mappers import profile_to_dict, row_to_profile
from study.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID.

        Rows created by the identity provider without a username yet are
        reported as missing.
        """
        stmt = select(profiles_table).where(profiles_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row or not (row.username or "").strip():
            return None
        return row_to_profile(row._asdict())

    async def save(self, profile: Profile) -> Profile:
        """Insert or update a profile."""
        profile_dict = profile_to_dict(profile)
        stmt = insert(profiles_table).values(**profile_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[profiles_table.c.id],
            set_={k: v for k, v in profile_dict.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return profile

    async def ping(self) -> None:
        """Run a trivial read against the profiles table."""
        await self.session.execute(select(profiles_table.c.id).limit(1))
