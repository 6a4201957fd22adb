"""The dungeon level: terrain, rooms, stairs, characters and distance maps."""

from __future__ import annotations

import random
from typing import Any, Optional

from .layout import (
    DUNGEON_X,
    DUNGEON_Y,
    MAX_DOWN,
    MAX_MONSTERS,
    MAX_ROOMS,
    MAX_UP,
    MIN_DOWN,
    MIN_ROOMS,
    MIN_UP,
    ROOM_MAX_X,
    ROOM_MAX_Y,
    ROOM_MIN_X,
    ROOM_MIN_Y,
    Room,
    Stair,
    Terrain,
)
from .npc import NPC
from .pathfinder import Pathfinder
from .pc import PC

_SIGHT_RADIUS = 3
_MAX_ROOM_ATTEMPTS = 2000


def _is_border(x: int, y: int) -> bool:
    return y in (0, DUNGEON_Y - 1) or x in (0, DUNGEON_X - 1)


class Dungeon:
    """One level of the dungeon; grids are indexed ``[y][x]``."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.hardness = [
            [255 if _is_border(x, y) else 0 for x in range(DUNGEON_X)]
            for y in range(DUNGEON_Y)
        ]
        self.map = [
            [Terrain.IMMUTABLE if _is_border(x, y) else Terrain.WALL for x in range(DUNGEON_X)]
            for y in range(DUNGEON_Y)
        ]
        self.seen = [row[:] for row in self.map]
        self.output = [[" "] * DUNGEON_X for _ in range(DUNGEON_Y)]
        self.characters: list[list[Any]] = [[None] * DUNGEON_X for _ in range(DUNGEON_Y)]
        self.rooms: list[Room] = []
        self.up_stairs: list[Stair] = []
        self.down_stairs: list[Stair] = []
        self.nummon = 0
        self.message = ""
        self.player = PC()
        self.floor_pathfinder = Pathfinder(self.hardness)
        self.all_pathfinder = Pathfinder(self.hardness)
        self.monster_templates: list = []
        self.file_version = 0
        self.file_size = 0

    # Generation

    def generate(self) -> None:
        """Randomise the rock, then carve rooms, corridors and stairs."""
        rng = self.rng
        for y in range(1, DUNGEON_Y - 1):
            for x in range(1, DUNGEON_X - 1):
                self.hardness[y][x] = rng.randrange(254) + 1
                self.map[y][x] = Terrain.WALL
                self.seen[y][x] = Terrain.UNKNOWN
        self.place_rooms()
        self.place_corridors()
        self.place_stairs()

    def _room_fits(self, room: Room) -> bool:
        bottom = room.y + room.height
        right = room.x + room.width
        if bottom >= DUNGEON_Y or right >= DUNGEON_X:
            return False
        return all(
            0 < self.hardness[r][c] < 255
            for r in range(room.y - 1, bottom + 1)
            for c in range(room.x - 1, right + 1)
        )

    def _random_room(self) -> Room:
        rng = self.rng
        y = rng.randrange(DUNGEON_Y - ROOM_MIN_Y) + 1
        x = rng.randrange(DUNGEON_X - ROOM_MIN_X) + 1
        width = rng.randrange(ROOM_MAX_X - ROOM_MIN_X) + ROOM_MIN_X
        height = rng.randrange(ROOM_MAX_Y - ROOM_MIN_Y) + ROOM_MIN_Y
        return Room(x, y, width, height)

    def _try_place_rooms(self) -> Optional[list[Room]]:
        count = self.rng.randrange(MAX_ROOMS - MIN_ROOMS) + MIN_ROOMS
        rooms = []
        for _ in range(count):
            for _attempt in range(_MAX_ROOM_ATTEMPTS):
                room = self._random_room()
                if self._room_fits(room):
                    break
            else:
                return None
            for r in range(room.y, room.y + room.height):
                for c in range(room.x, room.x + room.width):
                    self.map[r][c] = Terrain.FLOOR
                    self.hardness[r][c] = 0
            rooms.append(room)
        return rooms

    def place_rooms(self) -> None:
        """Carve between six and nine rooms that neither touch nor overlap."""
        saved_hardness = [row[:] for row in self.hardness]
        saved_map = [row[:] for row in self.map]
        while True:
            rooms = self._try_place_rooms()
            if rooms is not None:
                self.rooms = rooms
                return
            self.hardness = [row[:] for row in saved_hardness]
            self.map = [row[:] for row in saved_map]

    def place_corridors(self) -> None:
        """Join each room's corner to the next room's, rows first, then columns."""
        if not self.rooms:
            return
        for room, target in zip(self.rooms, self.rooms[1:] + self.rooms[:1]):
            r, c = room.y, room.x
            while True:
                if r < target.y:
                    r += 1
                elif r > target.y:
                    r -= 1
                elif c < target.x:
                    c += 1
                elif c > target.x:
                    c -= 1
                if self.hardness[r][c] != 255 and self.map[r][c] is not Terrain.FLOOR:
                    self.map[r][c] = Terrain.CORRIDOR
                    self.hardness[r][c] = 0
                if (r, c) == (target.y, target.x):
                    break

    def _random_stair(self, room: Room, direction: str) -> Stair:
        row = self.rng.randrange(room.height) + room.y
        col = self.rng.randrange(room.width) + room.x
        return Stair(col, row, direction)

    def place_stairs(self) -> None:
        """Put one to three up and down staircases in rooms, taken in turn."""
        rng = self.rng
        num_up = rng.randrange(MAX_UP) + MIN_UP
        num_down = rng.randrange(MAX_DOWN) + MIN_DOWN
        order = [("u", Terrain.STAIR_UP)] * num_up + [("d", Terrain.STAIR_DOWN)] * num_down
        self.up_stairs = []
        self.down_stairs = []
        for index, (direction, terrain) in enumerate(order):
            stair = self._random_stair(self.rooms[index % len(self.rooms)], direction)
            self.map[stair.y][stair.x] = terrain
            (self.up_stairs if direction == "u" else self.down_stairs).append(stair)

    def place_characters(self, queue: Any) -> None:
        """Put the player in the first room and scatter monsters in the rooms.

        Every character is inserted into ``queue``.  If ``nummon`` is zero a
        random count is chosen; it is lowered if the rooms run out of space.
        """
        self.clear_characters()
        first = self.rooms[0]
        player = self.player
        player.reset(first.x, first.y)
        self.characters[player.y][player.x] = player
        queue.insert(player)

        rng = self.rng
        if not self.nummon:
            self.nummon = rng.randrange(MAX_MONSTERS - 1) + 1

        candidates = {
            (x, y)
            for room in self.rooms
            for y in range(room.y, room.y + room.height)
            for x in range(room.x, room.x + room.width)
            if abs(player.y - y) >= 3 and abs(player.x - x) >= 3
        }
        placed = 0
        for _ in range(self.nummon):
            if not candidates:
                break
            while True:
                room = self.rooms[rng.randrange(len(self.rooms))]
                x = room.x + rng.randrange(room.width)
                y = room.y + rng.randrange(room.height)
                if (x, y) in candidates:
                    break
            candidates.discard((x, y))
            monster = NPC.random(x, y, rng)
            self.characters[y][x] = monster
            queue.insert(monster)
            placed += 1
        self.nummon = placed

    def clear_characters(self) -> None:
        """Remove every character from the grid."""
        for row in self.characters:
            for x in range(len(row)):
                row[x] = None

    # Distances and output

    def update_distances(self) -> None:
        """Recompute both distance maps from the player's position."""
        self.floor_pathfinder = Pathfinder(self.hardness)
        self.floor_pathfinder.dijkstra_floor(self.player.x, self.player.y)
        self.all_pathfinder = Pathfinder(self.hardness)
        self.all_pathfinder.dijkstra_all(self.player.x, self.player.y)

    def update_output(self) -> None:
        """Reveal the cells around the player and redraw the remembered map."""
        px, py = self.player.x, self.player.y
        for r in range(DUNGEON_Y):
            for c in range(DUNGEON_X):
                near = abs(r - py) < _SIGHT_RADIUS and abs(c - px) < _SIGHT_RADIUS
                if near:
                    self.seen[r][c] = self.map[r][c]
                    occupant = self.characters[r][c]
                    if occupant is not None:
                        self.output[r][c] = occupant.symbol
                        continue
                self.output[r][c] = self.seen[r][c].glyph()

    def render_cost_floor(self) -> str:
        """The walking distance map as rows of digits."""
        return self.floor_pathfinder.render()

    def render_cost_all(self) -> str:
        """The tunneling distance map as rows of digits."""
        return self.all_pathfinder.render()