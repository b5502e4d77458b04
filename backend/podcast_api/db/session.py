"""
Database Session Management
Creates and manages the async SQLAlchemy engine and session factory.

This module sets up the database connection using SQLAlchemy 2.0 asyncio
support and provides a session dependency for FastAPI endpoints.
"""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from podcast_api.core.config import settings


# Create async SQLAlchemy engine
#
# Configuration:
# - echo=settings.DEBUG: Log all SQL queries when debug mode is enabled
# - pool_pre_ping=True: Verify connections before using them
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
)

# Session factory
#
# Configuration:
# - expire_on_commit=False: saved entities stay readable after commit,
#   attribute access must never trigger implicit IO under asyncio
# - autoflush=False: Require explicit flush() calls
SessionLocal = async_sessionmaker(
    bind=engine,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function that provides database sessions to FastAPI endpoints.

    The session is closed after the endpoint returns, even if an
    exception occurs.
    """
    async with SessionLocal() as db:
        yield db
