"""Dungeon dimensions, terrain kinds, rooms and stairs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DUNGEON_Y = 21
DUNGEON_X = 80
MIN_ROOMS = 6
MAX_ROOMS = 10
MIN_UP = 1
MIN_DOWN = 1
MAX_UP = 3
MAX_DOWN = 3
ROOM_MIN_X = 4
ROOM_MIN_Y = 3
ROOM_MAX_X = 20
ROOM_MAX_Y = 15
MAX_MONSTERS = 50


class Terrain(Enum):
    """What occupies a dungeon cell."""

    WALL = 0
    IMMUTABLE = 1
    FLOOR = 2
    CORRIDOR = 3
    STAIR_UP = 4
    STAIR_DOWN = 5
    UNKNOWN = 6

    def glyph(self) -> str:
        """The character used to draw this terrain."""
        return _GLYPHS[self]


_GLYPHS = {
    Terrain.WALL: " ",
    Terrain.IMMUTABLE: " ",
    Terrain.UNKNOWN: " ",
    Terrain.FLOOR: ".",
    Terrain.CORRIDOR: "#",
    Terrain.STAIR_UP: ">",
    Terrain.STAIR_DOWN: "<",
}


@dataclass
class Room:
    """A rectangular room; ``x``/``y`` is its top-left cell."""

    x: int
    y: int
    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        """Whether the cell lies inside the room."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


@dataclass
class Stair:
    """A staircase at a cell; ``direction`` is ``'u'`` or ``'d'``."""

    x: int
    y: int
    direction: str