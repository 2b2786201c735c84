from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from sjd_status.db.session import DatabaseError
from sjd_status.modules.health.repository import CURRENT_TIME_QUERY, HealthRepository
from sjd_status.modules.health.schemas import HealthResponse
from sjd_status.modules.health.service import SERVER_RUNNING_MESSAGE, HealthService

pytestmark = pytest.mark.unit


class FakeDatabase:
    def __init__(self, rows):
        self.rows = rows
        self.queries: list[str] = []

    async def execute(self, query: str):
        self.queries.append(query)
        return self.rows


@pytest.mark.asyncio
async def test_current_time_parses_sqlite_string_as_utc():
    database = FakeDatabase([{"now": "2024-01-01 00:00:00"}])
    result = await HealthRepository(database).current_time()

    assert database.queries == [CURRENT_TIME_QUERY]
    assert result == datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_current_time_keeps_aware_datetimes():
    value = datetime(2024, 6, 1, 12, 30, tzinfo=timezone(timedelta(hours=8)))
    result = await HealthRepository(FakeDatabase([{"now": value}])).current_time()

    assert result == value
    assert result.utcoffset() == timedelta(hours=8)


@pytest.mark.asyncio
async def test_current_time_without_rows_is_database_error():
    with pytest.raises(DatabaseError, match="no rows"):
        await HealthRepository(FakeDatabase([])).current_time()


@pytest.mark.asyncio
async def test_current_time_rejects_unparseable_value():
    with pytest.raises(DatabaseError, match="Unparseable"):
        await HealthRepository(FakeDatabase([{"now": "yesterday"}])).current_time()


@pytest.mark.asyncio
async def test_check_builds_fixed_message():
    database = FakeDatabase([{"now": datetime(2024, 1, 1, tzinfo=timezone.utc)}])
    response = await HealthService(HealthRepository(database)).check()

    assert response.message == SERVER_RUNNING_MESSAGE == "Server is running!"
    assert response.db_time == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_response_serializes_exactly_two_fields():
    response = HealthResponse(message="Server is running!", db_time=datetime(2024, 1, 1, tzinfo=timezone.utc))

    assert response.model_dump(mode="json") == {
        "message": "Server is running!",
        "db_time": "2024-01-01T00:00:00Z",
    }
