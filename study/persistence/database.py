"""Async engine and session factory for the relational store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from study.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the async engine.

    Hosted stores usually sit behind a transaction pooler that cannot keep
    prepared statements, so asyncpg's statement cache follows the settings.

    Args:
        database: Connection settings
        echo: Log every SQL statement

    Returns:
        Configured async engine
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        connect_args={"statement_cache_size": database.statement_cache_size},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory; one session per request, committed by the DI scope."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
