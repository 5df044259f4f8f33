"""
Database session management with async SQLAlchemy 2.0.
Handles connection pooling and session lifecycle.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
)
from typing import AsyncGenerator

from textile_billing.core.config import settings
from textile_billing.core.logging import get_logger

logger = get_logger(__name__)

# Global engine and sessionmaker
engine: AsyncEngine = None
async_session_maker: async_sessionmaker[AsyncSession] = None


def create_engine() -> AsyncEngine:
    """Create async SQLAlchemy engine."""
    global engine
    
    engine_kwargs = {
        "echo": settings.DATABASE_ECHO,
        "pool_pre_ping": True,  # Verify connections before using
    }
    # SQLite uses a single-connection pool that rejects sizing arguments
    if not settings.DATABASE_URL.startswith("sqlite"):
        engine_kwargs.update(pool_size=5, max_overflow=10)
    
    engine = create_async_engine(settings.DATABASE_URL, **engine_kwargs)
    
    logger.info(
        "Database engine created",
        extra={"dialect": engine.dialect.name},
    )
    
    return engine


def create_sessionmaker() -> async_sessionmaker[AsyncSession]:
    """Create async sessionmaker."""
    global async_session_maker
    
    if engine is None:
        create_engine()
    
    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    
    logger.info("Sessionmaker created")
    return async_session_maker


def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    """Return the global sessionmaker, creating it on first use."""
    if async_session_maker is None:
        create_sessionmaker()
    return async_session_maker


def get_engine() -> AsyncEngine:
    """Return the global engine, creating it on first use."""
    if engine is None:
        create_engine()
    return engine


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting database session.
    Yields a session and ensures it's closed after use.
    """
    async with get_sessionmaker()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db() -> None:
    """Initialize database connection."""
    get_engine()
    get_sessionmaker()
    logger.info("Database initialized")


async def close_db() -> None:
    """Close database connections."""
    global engine, async_session_maker
    
    if engine:
        await engine.dispose()
        engine = None
        async_session_maker = None
        logger.info("Database connections closed")
