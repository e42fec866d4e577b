"""Shared test fixtures."""

from collections.abc import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from reddit.database import init_models, make_engine, make_sessionmaker
from reddit.models import Post


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database for each test."""
    engine = make_engine("sqlite+aiosqlite:///:memory:")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Session bound to the per-test database, rolled back afterwards."""
    async with make_sessionmaker(engine)() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def posts(db_session: AsyncSession) -> list[Post]:
    """Seed ten posts with ids 1..10."""
    created = [
        Post(
            id=i,
            title=f"Title {i}",
            content=f"Content {i}",
            upvote=10 * i - 5,
            downvote=10 * i - 9,
        )
        for i in range(1, 11)
    ]
    db_session.add_all(created)
    await db_session.commit()
    return created
