"""Database dependency injection for FastAPI.

Provides async session factories for read and write operations. Engines
and sessionmakers are created lazily on first use and disposed on shutdown.
"""

from __future__ import annotations

import threading
from typing import AsyncGenerator, Callable

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infrastructure.database.engines import create_read_engine, create_write_engine
from infrastructure.observability import DefaultDatabaseProbe
from infrastructure.settings import DatabaseSettings, get_database_settings

_probe = DefaultDatabaseProbe()

# role -> (engine, sessionmaker)
_engines: dict[str, tuple[AsyncEngine, async_sessionmaker[AsyncSession]]] = {}

_engine_lock = threading.Lock()


def _get_or_create(
    role: str, factory: Callable[[DatabaseSettings], AsyncEngine]
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    entry = _engines.get(role)
    if entry is None:
        with _engine_lock:
            # Double-check after acquiring lock
            entry = _engines.get(role)
            if entry is None:
                settings = get_database_settings()
                engine = factory(settings)
                entry = (
                    engine,
                    async_sessionmaker(
                        engine,
                        expire_on_commit=False,
                        class_=AsyncSession,
                    ),
                )
                _engines[role] = entry
                _probe.engine_created(role, settings.connection_string)
    return entry


def get_write_engine() -> AsyncEngine:
    """Get the write database engine (singleton)."""
    return _get_or_create("write", create_write_engine)[0]


def get_read_engine() -> AsyncEngine:
    """Get the read database engine (singleton)."""
    return _get_or_create("read", create_read_engine)[0]


async def get_write_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a write session for mutations (FastAPI dependency).

    The session does NOT auto-commit. Application services own the
    transaction boundary with ``async with session.begin()``.

    Yields:
        AsyncSession for database operations
    """
    _, sessionmaker = _get_or_create("write", create_write_engine)
    async with sessionmaker() as session:
        yield session


async def get_read_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a session bound to the read engine (FastAPI dependency).

    Yields:
        AsyncSession for read-only database operations
    """
    _, sessionmaker = _get_or_create("read", create_read_engine)
    async with sessionmaker() as session:
        yield session


async def close_database_connections() -> None:
    """Dispose every engine created so far.

    Called on application shutdown. Engines are recreated on next use.
    """
    with _engine_lock:
        entries = list(_engines.items())
        _engines.clear()

    for role, (engine, _) in entries:
        await engine.dispose()
        _probe.engine_disposed(role)
