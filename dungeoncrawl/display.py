"""Drawing the dungeon and the interactive screens on a curses-like window."""

from __future__ import annotations

import random
from typing import Any, Sequence, Union

from .layout import DUNGEON_X, DUNGEON_Y

try:
    import curses

    _SCREEN_ERRORS: tuple = (curses.error,)
except ImportError:  # pragma: no cover - platforms without curses
    _SCREEN_ERRORS = ()

KEY_DOWN = 258
KEY_UP = 259
KEY_NEWLINE = 10
KEY_ESCAPE = 27

_PAGE = 16
_LIST_COLUMN = 25
_BLANK_LIST_ROW = " " * 32

_TELEPORT_STEPS = {
    "7": (-1, -1),
    "y": (-1, -1),
    "8": (0, -1),
    "k": (0, -1),
    "9": (1, -1),
    "u": (1, -1),
    "6": (1, 0),
    "l": (1, 0),
    "3": (1, 1),
    "n": (1, 1),
    "2": (0, 1),
    "j": (0, 1),
    "1": (-1, 1),
    "b": (-1, 1),
    "4": (-1, 0),
    "h": (-1, 0),
}


def _key_char(key: Union[int, str]) -> str:
    if isinstance(key, str):
        return key
    return chr(key) if 0 <= key < 0x110000 else ""


def monster_summary(player: Any, monster: Any) -> str:
    """One line of the monster list: the monster's symbol and where it lies."""
    dis_x = player.x - monster.x
    dis_y = player.y - monster.y
    dir_x = "west" if dis_x > 0 else "east"
    dir_y = "north" if dis_y > 0 else "south"
    return f"  {monster.symbol}, {abs(dis_x)} {dir_x} and {abs(dis_y)} {dir_y}      "


def teleport_step(x: int, y: int, key: Union[int, str]) -> tuple[int, int]:
    """Move the teleport cursor one cell for a direction key, staying in bounds."""
    step = _TELEPORT_STEPS.get(_key_char(key))
    if step is None:
        return x, y
    dx, dy = step
    nx, ny = x + dx, y + dy
    if dx < 0 and not nx > 0:
        return x, y
    if dx > 0 and not nx < DUNGEON_X:
        return x, y
    if dy < 0 and not ny > 0:
        return x, y
    if dy > 0 and not ny < DUNGEON_Y:
        return x, y
    return nx, ny


class Display:
    """Draws dungeon views on ``screen`` and runs the interactive screens."""

    def __init__(self, screen: Any) -> None:
        self.screen = screen

    def _put(self, y: int, x: int, text: str) -> None:
        try:
            self.screen.addstr(y, x, text)
        except _SCREEN_ERRORS:
            pass

    def show_all(self, dungeon: Any) -> None:
        """Draw the whole dungeon with every character, ignoring what was seen."""
        self._put(0, 0, dungeon.message)
        for r in range(DUNGEON_Y):
            line = "".join(
                occupant.symbol if occupant is not None else terrain.glyph()
                for occupant, terrain in zip(dungeon.characters[r], dungeon.map[r])
            )
            self._put(r + 1, 0, line)

    def show_map(self, dungeon: Any) -> None:
        """Draw the player's view of the dungeon."""
        self._put(0, 0, dungeon.message)
        for r in range(DUNGEON_Y):
            self._put(r + 1, 0, "".join(dungeon.output[r]))

    def show_monsters(self, dungeon: Any) -> None:
        """List the monsters relative to the player until Escape is pressed."""
        monsters = [
            occupant
            for row in dungeon.characters
            for occupant in row
            if occupant is not None and occupant.symbol != "@"
        ]
        key: Union[int, str] = ord("m")
        first = 0
        while True:
            self._put(1, _LIST_COLUMN, "--------------------------------")
            self._put(2, _LIST_COLUMN, "|         Monster List         |")
            self._put(3, _LIST_COLUMN, "--------------------------------")
            self._put(4, _LIST_COLUMN, f"       Live Monsters = {dungeon.nummon}       ")
            if len(monsters) > _PAGE:
                if key == KEY_UP and first > 0:
                    first -= _PAGE
                elif key == KEY_DOWN and len(monsters) - first >= _PAGE:
                    first += _PAGE
            for row in range(5, DUNGEON_Y + 1):
                index = first + row - 5
                if index < len(monsters):
                    text = monster_summary(dungeon.player, monsters[index])
                else:
                    text = _BLANK_LIST_ROW
                self._put(row, _LIST_COLUMN, text)
            key = self.screen.getch()
            if key == KEY_ESCAPE:
                return

    def teleport(self, dungeon: Any) -> None:
        """Let the player pick a cell ('t') or a random open cell ('r') to jump to."""
        player = dungeon.player
        tx, ty = player.x, player.y
        self._put(0, 0, dungeon.message)
        while True:
            self.show_all(dungeon)
            self._put(ty + 1, tx, "*")
            key = _key_char(self.screen.getch())
            if key == "r":
                rng = getattr(dungeon, "rng", None) or random
                while True:
                    ty = rng.randrange(DUNGEON_Y - 1) + 1
                    tx = rng.randrange(DUNGEON_X - 1) + 1
                    if not dungeon.hardness[ty][tx]:
                        break
            else:
                tx, ty = teleport_step(tx, ty, key)
            if key in ("t", "r"):
                break
        dungeon.characters[player.y][player.x] = None
        dungeon.characters[ty][tx] = player
        player.x, player.y = tx, ty

    def show_monster_templates(self, templates: Sequence[Any]) -> None:
        """Page through monster templates with the arrow keys until Enter."""
        if not templates:
            raise ValueError("no monster templates to show")
        index = 0
        while True:
            self.screen.clear()
            self._put(
                0,
                0,
                "Press enter to proceed to game, use arrow keys to navigate templates\n\n"
                "MONSTER TEMPLATES\n\n" + templates[index].describe(),
            )
            key = self.screen.getch()
            if key == KEY_UP and index > 0:
                index -= 1
            elif key == KEY_DOWN and index < len(templates) - 1:
                index += 1
            if key == KEY_NEWLINE:
                return