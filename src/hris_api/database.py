"""Async engine and request-scoped sessions for the HRIS database."""

from collections.abc import AsyncGenerator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from hris_api.config import Settings, get_settings


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg engine from settings.

    Connections are tagged with the application name so HRIS sessions can
    be told apart in ``pg_stat_activity``. Statement echo stays off: rows
    carry employee personal data and salaries.
    """
    return create_async_engine(
        settings.async_database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_pre_ping=True,
        pool_recycle=3600,
        echo=False,
        connect_args={"server_settings": {"application_name": settings.app_name}},
    )


engine = build_engine(get_settings())

# Loaded rows stay readable after commit; services build responses from them
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per request.

    Services only flush. The unit of work is committed here once the
    handler returns, and rolled back when the database raises.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError:
            await session.rollback()
            raise
