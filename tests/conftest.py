from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from sjd_status.core.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'status.db'}"


@pytest.fixture
def sqlite_settings(sqlite_url: str) -> Settings:
    return Settings(_env_file=None, database_url=sqlite_url)


@pytest.fixture
def unreachable_settings(tmp_path: Path) -> Settings:
    missing = tmp_path / "missing" / "nested" / "status.db"
    return Settings(_env_file=None, database_url=f"sqlite+aiosqlite:///{missing}")
