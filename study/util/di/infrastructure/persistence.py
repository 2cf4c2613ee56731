"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from study.config import Settings
from study.domain.repository import (
    AttachmentRepository,
    CommentRepository,
    ProfileRepository,
    TopicRepository,
)
from study.persistence.database import create_engine, create_session_factory
from study.persistence.repository import (
    PostgresAttachmentRepository,
    PostgresCommentRepository,
    PostgresProfileRepository,
    PostgresTopicRepository,
)
from study.util.di.base import ProviderBase
from study.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repositories and the database session behind them."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL-backed repositories, one session per request."""

    __is_mock__ = False

    topics = provide(
        PostgresTopicRepository, provides=TopicRepository, scope=Scope.REQUEST
    )
    comments = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
    attachments = provide(
        PostgresAttachmentRepository,
        provides=AttachmentRepository,
        scope=Scope.REQUEST,
    )
    profiles = provide(
        PostgresProfileRepository, provides=ProfileRepository, scope=Scope.REQUEST
    )

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Create the engine and dispose of its pool on shutdown."""
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Yield a session committed when the request succeeds.

        Any exception raised while the request runs rolls the session back.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rolled back", error=str(e))
                await session.rollback()
                raise
