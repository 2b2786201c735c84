from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol

from sjd_status.core.types import RowSet
from sjd_status.db.session import DatabaseError

CURRENT_TIME_QUERY = "SELECT CURRENT_TIMESTAMP AS now"


class QueryExecutor(Protocol):
    async def execute(self, query: str) -> RowSet: ...


class HealthRepository:
    def __init__(self, database: QueryExecutor) -> None:
        self._database = database

    async def current_time(self) -> datetime:
        rows = await self._database.execute(CURRENT_TIME_QUERY)
        if not rows:
            raise DatabaseError("Current time query returned no rows")
        return _coerce_timestamp(rows[0].get("now"))


def _coerce_timestamp(value: object) -> datetime:
    # SQLite hands CURRENT_TIMESTAMP back as a UTC string without an offset.
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError as exc:
            raise DatabaseError(f"Unparseable database timestamp: {value!r}") from exc
    if not isinstance(value, datetime):
        raise DatabaseError(f"Unexpected database timestamp type: {type(value).__name__}")
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
