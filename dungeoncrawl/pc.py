"""The player character and its keyboard commands."""

from __future__ import annotations

from typing import Any, NamedTuple, Union

from .character import Character
from .layout import Terrain

WALL_MESSAGE = "There's a wall in the way!"
NO_UPSTAIRS_MESSAGE = "There is no set of upstairs here!"
NO_DOWNSTAIRS_MESSAGE = "There is no set of downstairs here!"
REST_MESSAGE = "The PC bides his (or her) time..."


class QuitGame(Exception):
    """Raised when the player asks to leave the game."""


class _Step(NamedTuple):
    check_dx: int
    check_dy: int
    move_dx: int
    move_dy: int
    attacks: bool


# The cell that is checked and the cell moved to are kept apart because the
# two differ for the down-left command, and the up-left command never attacks.
_UP_LEFT = _Step(-1, -1, -1, -1, False)
_UP = _Step(0, -1, 0, -1, True)
_UP_RIGHT = _Step(1, -1, 1, -1, True)
_RIGHT = _Step(1, 0, 1, 0, True)
_DOWN_RIGHT = _Step(1, 1, 1, 1, True)
_DOWN = _Step(0, 1, 0, 1, True)
_DOWN_LEFT = _Step(-1, 1, 0, 1, True)
_LEFT = _Step(-1, 0, -1, 0, True)

_STEPS = {
    "7": _UP_LEFT,
    "y": _UP_LEFT,
    "8": _UP,
    "k": _UP,
    "9": _UP_RIGHT,
    "u": _UP_RIGHT,
    "6": _RIGHT,
    "l": _RIGHT,
    "3": _DOWN_RIGHT,
    "n": _DOWN_RIGHT,
    "2": _DOWN,
    "j": _DOWN,
    "1": _DOWN_LEFT,
    "b": _DOWN_LEFT,
    "4": _LEFT,
    "h": _LEFT,
}

_REST_KEYS = ("5", ".", " ")


def _normalize(key: Union[str, int]) -> str:
    if isinstance(key, int):
        return chr(key) if 0 <= key < 0x110000 else ""
    return key


class PC(Character):
    """The player, drawn as ``@``."""

    def __init__(self, x: int = 0, y: int = 0) -> None:
        super().__init__(x, y, "@", 10, is_pc=True)

    def reset(self, x: int, y: int) -> None:
        """Bring the player back to life at (x, y) with default stats."""
        self.is_pc = True
        self.is_alive = True
        self.speed = 10
        self.move_time = 1000 // self.speed
        self.symbol = "@"
        self.x = self.next_x = x
        self.y = self.y_start = y
        self.next_y = y

    def move(self, dungeon: Any, key: Union[str, int], queue: Any) -> None:
        """Carry out one command key; raises QuitGame on ``Q``."""
        key = _normalize(key)
        step = _STEPS.get(key)
        if step is not None:
            self._walk(dungeon, step)
        elif key == ">":
            self._take_stairs(dungeon, queue, Terrain.STAIR_UP, NO_UPSTAIRS_MESSAGE)
        elif key == "<":
            self._take_stairs(dungeon, queue, Terrain.STAIR_DOWN, NO_DOWNSTAIRS_MESSAGE)
        elif key in _REST_KEYS:
            dungeon.message = REST_MESSAGE
        elif key == "Q":
            raise QuitGame()

    def _walk(self, dungeon: Any, step: _Step) -> None:
        tx, ty = self.x + step.check_dx, self.y + step.check_dy
        if dungeon.hardness[ty][tx] != 0:
            dungeon.message = WALL_MESSAGE
            return
        occupant = dungeon.characters[ty][tx]
        if step.attacks and occupant is not None:
            occupant.is_alive = False
            dungeon.nummon -= 1
            dungeon.characters[ty][tx] = None
            return
        dungeon.characters[self.y][self.x] = None
        self.x += step.move_dx
        self.y += step.move_dy
        dungeon.characters[self.y][self.x] = self

    def _take_stairs(
        self, dungeon: Any, queue: Any, stair: Terrain, refusal: str
    ) -> None:
        if dungeon.map[self.y][self.x] is not stair:
            dungeon.message = refusal
            return
        dungeon.clear_characters()
        dungeon.generate()
        first = dungeon.rooms[0]
        self.x, self.y = first.x, first.y
        dungeon.place_characters(queue)