# app/database/postgres.py
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession
from sqlalchemy.orm import sessionmaker

from app.core.exceptions import DatabaseConnectionException
from app.core.log_config import logger
from app.models.base import Base
from app.models.message import Message  # noqa: F401
from app.models.user import User  # noqa: F401


class Database:
    """
    Owns the async engine and hands out sessions to the directory service.

    Construct it once at process start, call ``connect()`` (or use it as an
    async context manager) and pass it to whatever needs a session.
    """

    def __init__(self, url: str, echo: bool = False, **engine_kwargs):
        self.url = url
        self.echo = echo
        self.engine_kwargs = engine_kwargs
        self.engine: Optional[AsyncEngine] = None
        self._session_factory = None

    @property
    def is_connected(self) -> bool:
        return self.engine is not None

    async def connect(self) -> None:
        if self.engine is not None:
            return
        self.engine = create_async_engine(
            self.url,
            echo=self.echo,
            pool_pre_ping=True,
            **self.engine_kwargs,
        )
        self._session_factory = sessionmaker(
            self.engine, expire_on_commit=False, class_=AsyncSession
        )
        logger.info(f"Database engine created for {self.engine.url.render_as_string(hide_password=True)}")

    async def disconnect(self) -> None:
        if self.engine is None:
            return
        await self.engine.dispose()
        self.engine = None
        self._session_factory = None
        logger.info("Database engine disposed")

    async def __aenter__(self) -> "Database":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.disconnect()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Provide a database session, committed on success and rolled back on error.
        """
        if self._session_factory is None:
            raise DatabaseConnectionException(detail="Database is not connected")
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """
        Create all tables defined in the SQLAlchemy models.
        This method is idempotent and safe to run at startup.
        """
        if self.engine is None:
            raise DatabaseConnectionException(detail="Database is not connected")
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")
