"""Monsters and the ways they move."""

from __future__ import annotations

import random
from enum import Enum
from typing import Any, Optional

from .character import Character
from .layout import Terrain

_SYMBOLS = "0123456789abcdef"

# Orthogonal steps in the order ties are broken: up, right, left, down.
_STEPS = ((0, -1), (1, 0), (-1, 0), (0, 1))


class Ability(Enum):
    """Abilities a monster description may grant."""

    SMART = 0
    TELEPATHIC = 1
    TUNNELING = 2
    ERRATIC = 3
    PASS = 4
    PICKUP = 5
    DESTROY = 6
    UNIQUE = 7
    BOSS = 8


class NPC(Character):
    """A monster whose movement is chosen by its characteristic bits."""

    def __init__(self, x: int, y: int, characteristics: int, speed: int) -> None:
        if not 0 <= characteristics < len(_SYMBOLS):
            raise ValueError(f"characteristics out of range: {characteristics}")
        super().__init__(x, y, _SYMBOLS[characteristics], speed, is_pc=False)
        self.characteristics = characteristics
        self.last_seen_x = x
        self.last_seen_y = y

    @classmethod
    def random(cls, x: int, y: int, rng: Optional[random.Random] = None) -> "NPC":
        """A monster that is telepathic, smart or tunneling, with speed 5 to 20."""
        source = rng if rng is not None else random
        characteristics = (1, 3, 7)[source.randrange(3)]
        speed = source.randrange(16) + 5
        return cls(x, y, characteristics, speed)

    def move(self, dungeon: Any) -> None:
        """Take one turn: choose a target cell, then attack or step into it."""
        kind = self.characteristics
        if kind in (0, 8):
            self.move_erratic(dungeon)
        elif kind == 1:
            self.move_telepathic(dungeon)
        elif kind in (2, 3):
            self.move_smart(dungeon)
        elif 4 <= kind <= 7:
            self.move_tunneling(dungeon)

        tx, ty = self.next_x, self.next_y
        target = dungeon.characters[ty][tx]
        if target is not None and (tx, ty) != (self.x, self.y):
            if target.symbol != "@":
                target.is_alive = False
                dungeon.nummon -= 1
                dungeon.characters[ty][tx] = None
            else:
                dungeon.player.is_alive = False
        else:
            dungeon.characters[self.y][self.x] = None
            self.x, self.y = tx, ty
            dungeon.characters[self.y][self.x] = self

    def move_erratic(self, dungeon: Any) -> None:
        """Pick a random orthogonal open cell; stay put if there is none."""
        open_steps = [
            (dx, dy)
            for dx, dy in _STEPS
            if dungeon.hardness[self.y + dy][self.x + dx] == 0
        ]
        if not open_steps:
            self.next_x, self.next_y = self.x, self.y
            return
        rng = dungeon.rng
        while True:
            if rng.randrange(2):
                dx, dy = (0, 1) if rng.randrange(2) else (0, -1)
            else:
                dx, dy = (1, 0) if rng.randrange(2) else (-1, 0)
            if (dx, dy) in open_steps:
                break
        self.next_x, self.next_y = self.x + dx, self.y + dy

    def move_telepathic(self, dungeon: Any) -> None:
        """Step right and/or down when the player lies that way; otherwise hold."""
        player = dungeon.player
        self.next_x = self.x + 1 if self.x < player.x else self.x
        self.next_y = self.y + 1 if self.y < player.y else self.y

    def _cheapest_step(self, pathfinder: Any) -> tuple[int, int]:
        return min(_STEPS, key=lambda s: pathfinder.cost(self.x + s[0], self.y + s[1]))

    def move_smart(self, dungeon: Any) -> None:
        """Follow the walking distance map toward the player."""
        dx, dy = self._cheapest_step(dungeon.floor_pathfinder)
        self.next_x, self.next_y = self.x + dx, self.y + dy

    def move_tunneling(self, dungeon: Any) -> None:
        """Follow the tunneling distance map, wearing down rock in the way."""
        dx, dy = self._cheapest_step(dungeon.all_pathfinder)
        tx, ty = self.x + dx, self.y + dy
        if dungeon.hardness[ty][tx] < 86:
            dungeon.hardness[ty][tx] = 0
            if dungeon.map[ty][tx] is Terrain.WALL:
                dungeon.map[ty][tx] = Terrain.CORRIDOR
            self.next_x, self.next_y = tx, ty
        else:
            dungeon.hardness[ty][tx] -= 85