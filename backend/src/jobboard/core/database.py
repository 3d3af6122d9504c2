"""
Async Database Configuration
SQLAlchemy 2.0 with async support
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    AsyncEngine,
    create_async_engine,
    async_sessionmaker
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool
from loguru import logger

from .config import Settings


# Base class for ORM models
Base = declarative_base()


class Database:
    """
    Engine and session factory owned by the application lifespan.

    Created once at startup, stored on ``app.state.db`` and disposed on
    shutdown. Request handlers receive sessions through ``get_db``.
    """

    def __init__(self, url: str, **engine_args):
        self.engine: AsyncEngine = create_async_engine(url, **engine_args)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        engine_args = {
            "echo": settings.DEBUG,
            "pool_pre_ping": True,
        }

        if settings.DEBUG:
            engine_args["poolclass"] = NullPool
        else:
            engine_args.update({
                "pool_size": settings.DB_POOL_SIZE,
                "max_overflow": settings.DB_MAX_OVERFLOW,
                "pool_timeout": settings.DB_POOL_TIMEOUT,
                "pool_recycle": settings.DB_POOL_RECYCLE,
            })

        return cls(settings.DATABASE_URL, **engine_args)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Transactional session scope

        Usage:
            async with db.session() as session:
                result = await session.execute(query)
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_all(self):
        """Initialize database (create tables)"""
        # Models must be imported so their tables are registered on Base.metadata
        from jobboard.infrastructure.persistence import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self):
        """Close database connections"""
        await self.engine.dispose()

    async def health_check(self) -> bool:
        """Database health check"""
        try:
            async with self.session() as session:
                await session.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False
