"""
Database session management.

The store handle is a `Database` object built once by the application
lifespan (see `grindlog.main`) and kept on `app.state.database` for the
lifetime of the process. Each request borrows one `AsyncSession` from it
through the `get_db` dependency.
"""

from collections.abc import AsyncGenerator
from typing import Any

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from grindlog.config import Settings


class Database:
    """Async engine plus session factory."""

    def __init__(self, url: str, **engine_kwargs: Any) -> None:
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build the production handle (asyncpg, pooled, pre-ping reconnects)."""
        connect_args: dict[str, Any] = {}
        if settings.database_requires_ssl:
            connect_args["ssl"] = "require"
        return cls(
            settings.database_url,
            echo=settings.debug,
            pool_pre_ping=True,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            connect_args=connect_args,
        )

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
