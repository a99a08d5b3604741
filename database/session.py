"""
Async SQLAlchemy engine and session factory.

A ``Database`` is built once per application from ``Settings`` and stored
on ``app.state``; routes get sessions from ``auth.dependencies.db_session``.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from config.settings import Settings
from database.models import Base

logger = logging.getLogger(__name__)


def _engine_options(settings: Settings) -> dict:
    url = settings.sqlalchemy_url
    if url.startswith("sqlite"):
        # in-memory databases live on a single shared connection
        return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    return {
        "pool_size": 10,
        "max_overflow": 20,
        "pool_recycle": 3600,
        "pool_timeout": settings.db_pool_timeout,
        "connect_args": {
            "timeout": settings.db_connect_timeout,
            "command_timeout": settings.db_command_timeout,
        },
    }


class Database:
    """Owns the engine, its connection pool and the session factory."""

    def __init__(self, settings: Settings) -> None:
        self.engine = create_async_engine(
            settings.sqlalchemy_url,
            echo=False,
            hide_parameters=True,
            **_engine_options(settings),
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_all(self) -> None:
        """Create any missing tables for the mapped models."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Schema synchronised: %s", ", ".join(Base.metadata.tables))

    async def dispose(self) -> None:
        await self.engine.dispose()
