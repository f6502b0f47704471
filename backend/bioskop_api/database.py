"""
Bioskop API: Database Handle and Session Management
====================================================

What:  The `Database` handle (async engine + session factory), the ORM base
       class, and the FastAPI dependency that hands out one session per request.
How:   The application lifespan builds a single `Database` from settings and
       stores it on `app.state.db`. Route dependencies read it from there, so
       nothing in this module holds a process-wide engine.
Who:   main.py (lifespan), route handlers (via Depends), health check, tests.

Connection Pooling:
    The engine's pool is shared by all concurrent requests. Each request
    checks out a connection through its own AsyncSession and returns it when
    the session closes.
"""

from typing import Any, AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from bioskop_api.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares one metadata object between the models and Alembic's autogenerate.
    """
    pass


class Database:
    """
    Owns the async engine and its session factory.

    Constructed once per process. `expire_on_commit=False` keeps ORM
    attributes readable after the service commits, since responses are built
    from the same objects.
    """

    def __init__(self, url: str, **engine_options: Any):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, **engine_options)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.sqlalchemy_url, **settings.engine_options())

    async def ping(self) -> None:
        """
        Round-trip `SELECT 1` on a pooled connection.

        Raises whatever the driver raises when the store is unreachable;
        callers decide whether that is fatal (startup) or reportable (health).
        """
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_tables(self) -> None:
        """Create every mapped table that does not exist yet (tests, local dev)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Close all pooled connections. Called on application shutdown."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Looks up the shared `Database` on `request.app.state.db`
        2. Opens a new session and yields it to the handler
        3. On any error: rolls back, then re-raises for the exception handlers
        4. Always: closes the session (connection goes back to the pool)

    Commits are issued by the service for the operations that write, so a
    failed commit surfaces as that operation's store error.

    Example usage in a route:
        @router.get("")
        async def list_bioskop(db: AsyncSession = Depends(get_db_session)):
            return await bioskop_service.list_bioskop(db)
    """
    database: Database = request.app.state.db
    async with database.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
