"""Database engine and session management."""

from collections.abc import AsyncGenerator
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from reddit.config import get_settings


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def make_engine(url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for the given database URL.

    In-memory SQLite databases live only as long as their connection, so
    they get a StaticPool to share one connection across sessions.
    """
    if url.startswith("sqlite") and ":memory:" in url:
        return create_async_engine(
            url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(url, echo=echo, pool_pre_ping=True)


def make_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


async def init_models(engine: AsyncEngine) -> None:
    """Create all tables registered on Base."""
    # Models register themselves on Base.metadata at import time
    import reddit.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


_engine: AsyncEngine | None = None
_sessionmaker: async_sessionmaker[AsyncSession] | None = None


def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    """Lazily build the application-wide sessionmaker from settings."""
    global _engine, _sessionmaker
    if _sessionmaker is None:
        settings = get_settings()
        _engine = make_engine(settings.database_url, echo=settings.debug)
        _sessionmaker = make_sessionmaker(_engine)
    return _sessionmaker


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session, closed when the caller is done."""
    async with get_sessionmaker()() as session:
        yield session


async def dispose_engine() -> None:
    """Close the application-wide engine, if one was created."""
    global _engine, _sessionmaker
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _sessionmaker = None
