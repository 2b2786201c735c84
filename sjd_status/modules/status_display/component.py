from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from enum import StrEnum
from typing import Final, TypeAlias

from sjd_status.core.clients.status import HealthStatus, StatusFetchError, fetch_health_status

logger = logging.getLogger(__name__)

LOADING_TEXT: Final[str] = "Loading..."
FAILURE_TEXT: Final[str] = "Error connecting to server"

StatusFetcher: TypeAlias = Callable[[str], Awaitable[HealthStatus]]


class DisplayState(StrEnum):
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


def format_status(status: HealthStatus) -> str:
    return f"{status.message} DB Time: {status.db_time}"


class StatusDisplay:
    """Renders the server status after a single fetch.

    The display starts in ``LOADING`` and moves once to ``SUCCESS`` or
    ``FAILURE`` when the fetch settles. ``unmount`` cancels a pending fetch,
    and a cancelled fetch never moves the state.
    """

    def __init__(self, url: str, *, fetcher: StatusFetcher = fetch_health_status) -> None:
        self._url = url
        self._fetcher = fetcher
        self._state = DisplayState.LOADING
        self._status: HealthStatus | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def state(self) -> DisplayState:
        return self._state

    def render(self) -> str:
        if self._state is DisplayState.SUCCESS and self._status is not None:
            return format_status(self._status)
        if self._state is DisplayState.FAILURE:
            return FAILURE_TEXT
        return LOADING_TEXT

    def mount(self) -> asyncio.Task[None]:
        if self._task is not None:
            raise RuntimeError("StatusDisplay is already mounted")
        self._task = asyncio.get_running_loop().create_task(self._load())
        return self._task

    def unmount(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def settled(self) -> str:
        task = self._task or self.mount()
        await asyncio.wait({task})
        if not task.cancelled():
            task.result()
        return self.render()

    async def _load(self) -> None:
        try:
            status = await self._fetcher(self._url)
        except StatusFetchError as exc:
            logger.error("Error connecting to server url=%s error=%s", self._url, exc)
            self._transition(DisplayState.FAILURE)
            return
        self._status = status
        self._transition(DisplayState.SUCCESS)

    def _transition(self, state: DisplayState) -> None:
        if self._state is not DisplayState.LOADING:
            raise RuntimeError(f"StatusDisplay already settled state={self._state}")
        self._state = state
