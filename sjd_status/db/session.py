from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from sjd_status.core.config.settings import Settings
from sjd_status.core.types import RowSet

logger = logging.getLogger(__name__)


class DatabaseError(Exception):
    """Any failure to reach the database or run a query against it."""


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


class Database:
    """Owned handle over a pooled async engine.

    Each ``execute`` call checks a connection out of the pool and returns it
    when the call finishes, so one handle can serve concurrent requests.
    """

    def __init__(
        self,
        url: str,
        *,
        echo: bool = False,
        pool_size: int | None = None,
        max_overflow: int | None = None,
    ) -> None:
        options: dict[str, Any] = {"echo": echo, "pool_pre_ping": True}
        if not _is_sqlite(url):
            if pool_size is not None:
                options["pool_size"] = pool_size
            if max_overflow is not None:
                options["max_overflow"] = max_overflow
        self._engine: AsyncEngine = create_async_engine(url, **options)

    @classmethod
    def from_settings(cls, settings: Settings) -> Database:
        return cls(
            settings.database_url,
            echo=settings.database_echo,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )

    @property
    def dialect(self) -> str:
        return self._engine.dialect.name

    async def execute(self, query: str) -> RowSet:
        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(text(query))
                return [dict(row) for row in result.mappings().all()]
        except (SQLAlchemyError, OSError) as exc:
            raise DatabaseError(str(exc)) from exc

    async def dispose(self) -> None:
        await self._engine.dispose()
        logger.info("Database pool disposed dialect=%s", self.dialect)

    async def __aenter__(self) -> Database:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.dispose()
