import random
from unittest import mock

from dungeoncrawl.dungeon import Dungeon
from dungeoncrawl.game import Game, QUIT_MESSAGE, main, parse_args
from dungeoncrawl.display import Display, KEY_ESCAPE
from dungeoncrawl.layout import DUNGEON_X, DUNGEON_Y, Room, Terrain
from dungeoncrawl.pc import REST_MESSAGE


class FakeScreen:
    def __init__(self, keys=()):
        self.keys = list(keys)
        self.cells = {}

    def addstr(self, y, x, text):
        for offset, line in enumerate(text.split("\n")):
            col = x if offset == 0 else 0
            for i, ch in enumerate(line):
                self.cells[(y + offset, col + i)] = ch

    def getch(self):
        if not self.keys:
            raise RuntimeError("no more keys")
        key = self.keys.pop(0)
        return ord(key) if isinstance(key, str) else key

    def clear(self):
        self.cells.clear()

    def row(self, y):
        return "".join(self.cells.get((y, x), " ") for x in range(120)).rstrip()


def open_dungeon(nummon=3, seed=11):
    d = Dungeon(random.Random(seed))
    for y in range(1, DUNGEON_Y - 1):
        for x in range(1, DUNGEON_X - 1):
            d.map[y][x] = Terrain.FLOOR
            d.hardness[y][x] = 0
    d.rooms = [Room(1, 1, DUNGEON_X - 2, DUNGEON_Y - 2)]
    d.nummon = nummon
    return d


def test_parse_args_defaults():
    args = parse_args([])
    assert args.load is False
    assert args.saved == []
    assert args.save is False
    assert args.pathfind is False
    assert args.nummon is None
    assert args.parse is False


def test_parse_args_flags():
    args = parse_args(["-l", "-s", "--pathfind", "--nummon", "7", "--parse"])
    assert args.load and args.save and args.pathfind and args.parse
    assert args.nummon == 7


def test_parse_args_saved_dungeon():
    args = parse_args(["-lt", "level1"])
    assert args.saved == ["level1"]
    assert args.load is False


def test_parse_args_ignores_unknown():
    args = parse_args(["--bogus", "--save"])
    assert args.save is True


def test_run_quit():
    d = open_dungeon()
    screen = FakeScreen(["Q", " "])
    assert Game(d, Display(screen)).run() == "quit"
    assert screen.row(0) == QUIT_MESSAGE.rstrip()


def test_run_rest_then_quit():
    d = open_dungeon()
    screen = FakeScreen(["5", "Q", " "])
    assert Game(d, Display(screen)).run() == "quit"
    assert d.message == REST_MESSAGE


def test_run_reveal_mode_restores_message():
    d = open_dungeon()
    screen = FakeScreen(["f", "x", "f", "Q", " "])
    assert Game(d, Display(screen)).run() == "quit"
    assert d.message == ""


def test_run_monster_list_then_quit():
    d = open_dungeon()
    screen = FakeScreen(["m", KEY_ESCAPE, "Q", " "])
    assert Game(d, Display(screen)).run() == "quit"
    assert screen.row(0) == QUIT_MESSAGE.rstrip()


def test_run_teleport_in_place():
    d = open_dungeon()
    screen = FakeScreen(["t", "t", "Q", " "])
    assert Game(d, Display(screen)).run() == "quit"
    first = d.rooms[0]
    assert (d.player.x, d.player.y) == (first.x, first.y)
    assert d.characters[d.player.y][d.player.x] is d.player


def test_main_load_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert main(["--load"]) == 1


def test_main_save_and_start(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    with mock.patch("curses.wrapper") as wrapper:
        assert main(["--save", "--nummon", "4"]) == 0
    assert (tmp_path / ".rlg327" / "Dungeon").is_file()
    assert wrapper.call_count == 1
    dungeon = wrapper.call_args.args[1]
    assert isinstance(dungeon, Dungeon)
    assert dungeon.nummon == 4


def test_main_save_then_load(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    with mock.patch("curses.wrapper") as wrapper:
        assert main(["-s"]) == 0
        saved = wrapper.call_args.args[1]
        assert main(["-l"]) == 0
        loaded = wrapper.call_args.args[1]
    assert loaded.hardness == saved.hardness
    assert loaded.rooms == saved.rooms


def test_main_pathfind_prints_two_maps(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    with mock.patch("curses.wrapper"):
        assert main(["--pathfind"]) == 0
    lines = capsys.readouterr().out.split("\n")
    assert lines[-1] == ""
    assert len(lines) - 1 == 2 * DUNGEON_Y
    assert all(len(line) == DUNGEON_X for line in lines[:-1])