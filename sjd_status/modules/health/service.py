from __future__ import annotations

from typing import Final

from sjd_status.modules.health.repository import HealthRepository
from sjd_status.modules.health.schemas import HealthResponse

SERVER_RUNNING_MESSAGE: Final[str] = "Server is running!"


class HealthService:
    def __init__(self, repo: HealthRepository) -> None:
        self._repo = repo

    async def check(self) -> HealthResponse:
        db_time = await self._repo.current_time()
        return HealthResponse(message=SERVER_RUNNING_MESSAGE, db_time=db_time)
