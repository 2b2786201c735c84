from __future__ import annotations

import asyncio
import logging

import aiohttp
from pydantic import BaseModel, ConfigDict, ValidationError

from sjd_status.core.config.settings import get_settings

logger = logging.getLogger(__name__)


class HealthStatus(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str
    db_time: str


class StatusFetchError(Exception):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


async def fetch_health_status(
    url: str | None = None,
    *,
    timeout_seconds: float | None = None,
    session: aiohttp.ClientSession | None = None,
) -> HealthStatus:
    settings = get_settings()
    target = url or settings.status_server_url
    timeout = aiohttp.ClientTimeout(total=timeout_seconds or settings.status_timeout_seconds)

    if session is None:
        async with aiohttp.ClientSession() as owned:
            return await _get_status(owned, target, timeout)
    return await _get_status(session, target, timeout)


async def _get_status(
    session: aiohttp.ClientSession,
    url: str,
    timeout: aiohttp.ClientTimeout,
) -> HealthStatus:
    try:
        async with session.get(url, timeout=timeout) as resp:
            if resp.status >= 400:
                logger.warning("Status request failed url=%s status=%s", url, resp.status)
                raise StatusFetchError(f"Status request failed with status {resp.status}", resp.status)
            data = await resp.json(content_type=None)
    except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
        raise StatusFetchError(f"Status request failed: {exc}") from exc
    except ValueError as exc:
        raise StatusFetchError("Status response is not valid JSON") from exc

    try:
        return HealthStatus.model_validate(data)
    except ValidationError as exc:
        raise StatusFetchError("Status response invalid") from exc
