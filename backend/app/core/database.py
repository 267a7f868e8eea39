"""
PostgreSQL connection (async SQLAlchemy).

One AsyncSession per request via ``get_db``; services open explicit
transaction scopes with ``transaction()``.
"""
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncIterator

from sqlalchemy import JSON, String
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import get_settings

logger = logging.getLogger(__name__)

# TEXT[] on PostgreSQL, JSON on SQLite (test suite)
StringList = ARRAY(String).with_variant(JSON(), "sqlite")


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


@lru_cache
def get_engine() -> AsyncEngine:
    """Get the process-wide async engine."""
    settings = get_settings()
    return create_async_engine(settings.database_url, echo=settings.debug, pool_pre_ping=True)


@lru_cache
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the session factory bound to the engine."""
    return async_sessionmaker(get_engine(), class_=AsyncSession, expire_on_commit=False)


async def get_db() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency — one session per request, committed on success."""
    async with get_session_maker()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


@asynccontextmanager
async def transaction(session: AsyncSession) -> AsyncIterator[AsyncSession]:
    """
    Scoped transaction: commit on normal exit, rollback on any error.

    The rollback always completes before the error propagates, so callers
    can reclassify the exception knowing nothing was persisted.
    """
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        logger.debug("Transaction rolled back")
        raise
