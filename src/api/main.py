"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.dependencies import (
    close_database_connections,
    get_read_session,
)
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultDatabaseProbe, DefaultStartupProbe
from infrastructure.settings import get_settings
from infrastructure.version import __version__
from registry.presentation import router as registry_router

_startup_probe = DefaultStartupProbe()
_database_probe = DefaultDatabaseProbe()


@asynccontextmanager
async def launchpad_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - structlog configuration
    - Database engine lifecycle (created lazily, disposed on shutdown)
    """
    settings = get_settings()
    configure_logging(debug=settings.debug)
    _startup_probe.application_started(settings.app_name, __version__)

    yield

    _startup_probe.application_stopping()
    await close_database_connections()


app = FastAPI(
    title="Launchpad API",
    description="Registry of launchable web applications, categories and client workspaces",
    version=__version__,
    lifespan=launchpad_lifespan,
)

app.include_router(registry_router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}


@app.get("/health/db")
async def health_db(
    session: Annotated[AsyncSession, Depends(get_read_session)],
) -> dict:
    """Check database connection health."""
    try:
        await session.execute(text("SELECT 1"))
        return {"status": "ok", "connected": True}
    except (SQLAlchemyError, OSError) as e:
        _database_probe.health_check_failed(e)
        return {
            "status": "error",
            "connected": False,
            "error": str(e),
        }
