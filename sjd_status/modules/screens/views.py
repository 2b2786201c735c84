from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final


class ScreenNotFoundError(KeyError):
    pass


@dataclass(frozen=True, slots=True)
class StaticScreen:
    name: str
    source: str

    def render(self) -> str:
        return f"Edit {self.source} to edit this screen."


SCREENS: Final[Mapping[str, StaticScreen]] = MappingProxyType(
    {
        screen.name: screen
        for screen in (
            StaticScreen("index", "app/index.tsx"),
            StaticScreen("about-us", "app/aboutUs.tsx"),
            StaticScreen("inventory", "app/Inventory.tsx"),
        )
    }
)


def get_screen(name: str) -> StaticScreen:
    try:
        return SCREENS[name]
    except KeyError:
        raise ScreenNotFoundError(name) from None
