"""The game loop and the command-line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Optional, Sequence

from .display import Display
from .dungeon import Dungeon
from .dungeon_file import (
    DungeonFileError,
    load_dungeon,
    save_dungeon,
    saved_dungeon_path,
)
from .heap import FibonacciHeap
from .monster_template import MonsterFileError, load_monster_descriptions
from .pc import QuitGame

try:
    import curses as _curses

    _SCREEN_ERRORS: tuple = (_curses.error,)
except ImportError:  # pragma: no cover - platforms without curses
    _SCREEN_ERRORS = ()

WIN_SCREEN = (
    "           .__    _\n"
    "           @ V; .Z~M\n"
    "          || :|:@  d\n"
    "          d' d\\@  jf\n"
    "   .*\\   :P  #P  |P\n"
    "   M `|  W  .@   Z\n"
    "   | .b :!  d'  W'\n"
    "   |  V W   #  .W**=m_\n"
    "    |  !||   @  W'_   ~V;\n"
    "    ||  M| _ Nm4| YmjL|PN               Way 2 Go\n"
    "     #   W#~    YN_W'YL#W#b\n"
    "     |;  +       |f   `#'#8L\n"
    "     W        ._#L_  .#,`'||\n"
    "     |,     .WMP' ~Mm#`Nm;d|\n"
    "     `|       W   Mmd#; .df\n"
    "      |       M    `M#@-W'\n"
    "      W       !b     WtZ'\n"
    "      M        V;    |P\n"
    "      ||        b   .@\n"
    "       D        Y| .W'\n"
    "      j|         'j@'\n"
    "     jP'  L_mq=-_@'\n"
    "   .Z!         jf\n"
    "  mf         .W'\n"
    "            .@'\n"
    "           .@'\n"
    "          .@\n"
    "         :@\n"
)

LOSS_SCREEN = (
    "                           ___________________________\n"
    "               ...        /                           \\\n"
    "             ;::::;      /  oof thats some hot tea ... \\\n"
    "           ;::::; :;     \\ better luck next time bucko /\n"
    "         ;:::::'   :;     \\___________________________/\n"
    "        ;:::::;     ;.     /\n"
    "       ,:::::'       ;    /      OOO\\\n"
    "       ::::::;       ;   /      OOOOO\\\n"
    "       ;:::::;       ;         OOOOOOOO\n"
    "      ,;::::::;     ;'         / OOOOOOO\n"
    "    ;:::::::::`. ,,,;.        /  / DOOOOOO\n"
    "  .';:::::::::::::::::;,     /  /     DOOOO\n"
    " ,::::::;::::::;;;;::::;,   /  /        DOOO\n"
    ";`::::::`'::::::;;;::::: ,#/  /          DOOO\n"
    ":`:::::::`;::::::;;::: ;::#  /            DOOO\n"
    "::`:::::::`;:::::::: ;::::# /              DOO\n"
    "`:`:::::::`;:::::: ;::::::#/               DOO\n"
    " :::`:::::::`;; ;:::::::::##                OO\n"
    " ::::`:::::::`;::::::::;:::#                OO\n"
    " `:::::`::::::::::::;'`:;::#                O\n"
    "  `:::::`::::::::;' /  / `:#\n"
    "   ::::::`:::::;'  /  /   `#\n"
)

QUIT_MESSAGE = "You're a quitter!                         "
REVEAL_MESSAGE = "Revealing dungeon.... (Press f to exit)"
TELEPORT_MESSAGE = "Entering teleport mode... (Press t to teleport, r for random)"

_VIEW_KEYS = (ord("m"), ord("f"), ord("t"))


def _write(screen: Any, y: int, x: int, text: str) -> None:
    try:
        screen.addstr(y, x, text)
    except _SCREEN_ERRORS:
        pass


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    """Read the command-line options; unknown arguments are ignored."""
    parser = argparse.ArgumentParser(prog="dungeoncrawl", description="A dungeon crawl.")
    parser.add_argument("-l", "--load", action="store_true", help="load the saved dungeon")
    parser.add_argument(
        "-lt", dest="saved", action="append", default=[], metavar="FILE",
        help="load a dungeon from the saved-dungeons directory",
    )
    parser.add_argument("-s", "--save", action="store_true", help="save the dungeon")
    parser.add_argument("--pathfind", action="store_true", help="print the distance maps")
    parser.add_argument("--nummon", type=int, default=None, help="number of monsters")
    parser.add_argument("--parse", action="store_true", help="show the monster templates")
    args, _unknown = parser.parse_known_args(list(argv))
    return args


class Game:
    """Runs turns in order of move time until the player wins, loses or quits."""

    def __init__(self, dungeon: Any, display: Display) -> None:
        self.dungeon = dungeon
        self.display = display

    def _player_turn(self, player: Any, queue: FibonacciHeap) -> bool:
        """Handle keys until the player acts; False means the player quit."""
        dungeon = self.dungeon
        display = self.display
        screen = display.screen
        while True:
            dungeon.update_output()
            screen.clear()
            display.show_map(dungeon)
            key = screen.getch()
            if key == ord("m"):
                display.show_monsters(dungeon)
            elif key == ord("f"):
                screen.clear()
                dungeon.message = REVEAL_MESSAGE
                while True:
                    display.show_all(dungeon)
                    if screen.getch() == ord("f"):
                        break
                dungeon.message = ""
            elif key == ord("t"):
                screen.clear()
                dungeon.message = TELEPORT_MESSAGE
                display.teleport(dungeon)
                dungeon.message = ""
            else:
                try:
                    player.move(dungeon, key, queue)
                except QuitGame:
                    _write(screen, 0, 0, QUIT_MESSAGE)
                    screen.getch()
                    return False
            dungeon.update_distances()
            if key not in _VIEW_KEYS:
                return True

    def run(self) -> str:
        """Play until the end; returns ``"won"``, ``"lost"`` or ``"quit"``."""
        dungeon = self.dungeon
        screen = self.display.screen
        queue = FibonacciHeap(key=lambda character: character.move_time)
        dungeon.place_characters(queue)
        dungeon.update_distances()

        while dungeon.player.is_alive and dungeon.nummon:
            current = queue.remove_min()
            if current.is_pc:
                if not self._player_turn(current, queue):
                    return "quit"
            elif current.is_alive:
                current.move(dungeon)
            current.move_time += 1000 // current.speed
            queue.insert(current)

        screen.clear()
        if dungeon.nummon:
            _write(screen, 1, 0, LOSS_SCREEN)
            outcome = "lost"
        else:
            _write(screen, 0, 0, WIN_SCREEN)
            outcome = "won"
        screen.getch()
        return outcome


def _play(screen: Any, dungeon: Dungeon, templates: list) -> str:
    display = Display(screen)
    if templates:
        display.show_monster_templates(templates)
    return Game(dungeon, display).run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    dungeon = Dungeon()
    try:
        if args.load:
            load_dungeon(dungeon)
        for name in args.saved:
            load_dungeon(dungeon, saved_dungeon_path(name))
        if not (args.load or args.saved):
            dungeon.generate()
        if args.save:
            save_dungeon(dungeon)
    except DungeonFileError as exc:
        print(f"dungeoncrawl: {exc}", file=sys.stderr)
        return 1

    if args.pathfind:
        dungeon.update_distances()
        sys.stdout.write(dungeon.render_cost_floor())
        sys.stdout.write(dungeon.render_cost_all())

    if args.nummon is not None:
        dungeon.nummon = args.nummon

    templates: list = []
    if args.parse:
        try:
            templates = load_monster_descriptions()
        except MonsterFileError as exc:
            print(f"dungeoncrawl: {exc}", file=sys.stderr)
        dungeon.monster_templates = templates

    import curses

    curses.wrapper(_play, dungeon, templates)
    return 0