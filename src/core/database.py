import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncGenerator, Callable, Optional

from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel import Column, DateTime, Field, SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Database:
    """Owns the async engine. Opened at startup, disposed at shutdown."""

    def __init__(
        self,
        db_url: str,
        echo: bool = False,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.url = db_url
        self.now = clock or utc_now
        self.engine = create_async_engine(db_url, echo=echo, future=True)

    async def connect(self) -> None:
        async with self.get_session() as session:
            await session.exec(select(1))
        logger.info("Database connection established (%s)", self.engine.url.drivername)

    async def create_all(self) -> None:
        # registers every table on SQLModel.metadata
        import src.shared.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def disconnect(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, Any]:
        async with AsyncSession(self.engine, expire_on_commit=False) as session:
            yield session


class BaseModel(SQLModel):
    """Base model with common fields.

    Repositories stamp ``created_at`` and ``updated_at`` with their clock; the
    UTC default only covers rows built outside a repository.
    """

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True))
    )
    updated_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
    )
