from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request

from sjd_status.db.session import Database
from sjd_status.modules.health.repository import HealthRepository
from sjd_status.modules.health.service import HealthService


@dataclass(slots=True)
class HealthContext:
    database: Database
    service: HealthService


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_health_context(request: Request) -> HealthContext:
    database = get_database(request)
    return HealthContext(database=database, service=HealthService(HealthRepository(database)))
