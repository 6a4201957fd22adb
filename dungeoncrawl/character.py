"""Characters that move through the dungeon, and line-of-sight helpers."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .layout import Terrain


class Color(Enum):
    """Colours a monster may be drawn in."""

    RED = 0
    GREEN = 1
    BLUE = 2
    CYAN = 3
    YELLOW = 4
    MAGENTA = 5
    WHITE = 6
    BLACK = 7


class Character:
    """Anything that takes turns: the player or a monster."""

    def __init__(
        self,
        x: int,
        y: int,
        symbol: str,
        speed: int = 10,
        is_pc: bool = False,
    ) -> None:
        self.x = x
        self.y = y
        self.next_x = x
        self.next_y = y
        self.symbol = symbol
        self.speed = speed
        self.is_pc = is_pc
        self.is_alive = True
        self.move_time = 1000 // speed

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.symbol!r} at {self.x},{self.y})"


def _step(a: int, b: int) -> int:
    if b > a:
        return a + 1
    if b < a:
        return a - 1
    return a


def next_pos(x0: int, y0: int, x1: int, y1: int) -> tuple[int, int]:
    """One step from (x0, y0) toward (x1, y1), moving on both axes."""
    return _step(x0, x1), _step(y0, y1)


_SEE_THROUGH = (Terrain.FLOOR, Terrain.CORRIDOR)


def can_see(dungeon: Any, viewer: Character, viewee: Character) -> bool:
    """Whether ``viewer`` has an unobstructed line to ``viewee``.

    The walk stops as soon as the two share a row or a column.
    """
    x0, y0 = viewer.x, viewer.y
    x1, y1 = viewee.x, viewee.y
    while x0 != x1 and y0 != y1:
        x0, y0 = next_pos(x0, y0, x1, y1)
        if dungeon.map[y0][x0] not in _SEE_THROUGH:
            return False
    return True