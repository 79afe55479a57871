from fastapi import Request
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from app.core.config import Settings

Base = declarative_base()


def build_engine(settings: Settings) -> AsyncEngine:
    kwargs = {"echo": settings.DATABASE_ECHO}
    if settings.DATABASE_URL.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # in-memory databases live as long as their single connection
        if ":memory:" in settings.DATABASE_URL or settings.DATABASE_URL.endswith("://"):
            kwargs["poolclass"] = StaticPool
    return create_async_engine(settings.DATABASE_URL, **kwargs)


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def create_tables(engine: AsyncEngine) -> None:
    # models must be imported so their tables are registered on Base.metadata
    from app.models import task, user  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db(request: Request) -> AsyncSession:
    async_session = request.app.state.sessionmaker
    async with async_session() as session:
        yield session
