import random

import pytest

from dungeoncrawl.character import Character
from dungeoncrawl.layout import Terrain
from dungeoncrawl.npc import NPC, Ability
from dungeoncrawl.pathfinder import Pathfinder


class FakeDungeon:
    def __init__(self, hardness, player_pos, seed=0):
        self.hardness = [list(row) for row in hardness]
        self.map = [
            [
                Terrain.FLOOR if h == 0 else Terrain.IMMUTABLE if h == 255 else Terrain.WALL
                for h in row
            ]
            for row in self.hardness
        ]
        self.characters = [[None for _ in row] for row in self.hardness]
        self.player = Character(player_pos[0], player_pos[1], "@", is_pc=True)
        self.characters[self.player.y][self.player.x] = self.player
        self.rng = random.Random(seed)
        self.nummon = 0
        self.floor_pathfinder = Pathfinder(self.hardness)
        self.floor_pathfinder.dijkstra_floor(self.player.x, self.player.y)
        self.all_pathfinder = Pathfinder(self.hardness)
        self.all_pathfinder.dijkstra_all(self.player.x, self.player.y)

    def add(self, npc):
        self.characters[npc.y][npc.x] = npc
        self.nummon += 1
        return npc


def bordered(width, height, inner=0):
    return [
        [255 if y in (0, height - 1) or x in (0, width - 1) else inner for x in range(width)]
        for y in range(height)
    ]


def test_symbol_and_move_time():
    npc = NPC(1, 1, 7, 10)
    assert npc.symbol == "7"
    assert npc.move_time == 100
    assert not npc.is_pc
    assert (npc.last_seen_x, npc.last_seen_y) == (1, 1)


def test_bad_characteristics():
    with pytest.raises(ValueError):
        NPC(1, 1, 16, 10)


def test_random_npc_ranges():
    rng = random.Random(5)
    for _ in range(50):
        npc = NPC.random(2, 3, rng)
        assert npc.characteristics in (1, 3, 7)
        assert 5 <= npc.speed <= 20
        assert npc.symbol == str(npc.characteristics)


def test_ability_names():
    names = [Ability(a.value).name for a in Ability]
    assert names == [
        "SMART", "TELEPATHIC", "TUNNELING", "ERRATIC",
        "PASS", "PICKUP", "DESTROY", "UNIQUE", "BOSS",
    ]


def test_smart_moves_closer():
    d = FakeDungeon(bordered(8, 5), (1, 2))
    npc = d.add(NPC(5, 2, 3, 10))
    before = d.floor_pathfinder.cost(5, 2)
    npc.move(d)
    assert d.floor_pathfinder.cost(npc.x, npc.y) < before
    assert d.characters[npc.y][npc.x] is npc
    assert d.characters[2][5] is None


def test_smart_kills_monster_in_the_way():
    d = FakeDungeon(bordered(7, 5), (1, 2))
    npc = d.add(NPC(4, 2, 3, 10))
    other = d.add(NPC(3, 2, 3, 10))
    npc.move(d)
    assert other.is_alive is False
    assert d.nummon == 1
    assert d.characters[2][3] is None
    assert (npc.x, npc.y) == (4, 2)


def test_attacking_player_kills_player():
    d = FakeDungeon(bordered(7, 5), (2, 2))
    npc = d.add(NPC(3, 2, 3, 10))
    npc.move(d)
    assert d.player.is_alive is False
    assert (npc.x, npc.y) == (3, 2)


def test_tunneling_wears_down_then_breaks_through():
    grid = bordered(7, 5)
    for x in range(1, 6):
        grid[2][x] = 200
    d = FakeDungeon(grid, (3, 1))
    npc = d.add(NPC(3, 3, 7, 10))
    npc.move(d)
    assert d.hardness[2][3] == 200 - 85
    assert (npc.x, npc.y) == (3, 3)
    npc.move(d)
    npc.move(d)
    assert d.hardness[2][3] == 0
    assert d.map[2][3] is Terrain.CORRIDOR
    assert (npc.x, npc.y) == (3, 2)
    assert d.characters[2][3] is npc


def test_erratic_moves_to_open_neighbour():
    d = FakeDungeon(bordered(9, 7), (1, 1), seed=11)
    npc = d.add(NPC(4, 3, 0, 10))
    npc.move(d)
    assert abs(npc.x - 4) + abs(npc.y - 3) == 1
    assert d.hardness[npc.y][npc.x] == 0
    assert d.characters[npc.y][npc.x] is npc


def test_erratic_enclosed_stays():
    grid = bordered(7, 7, inner=100)
    grid[3][3] = 0
    grid[1][1] = 0
    d = FakeDungeon(grid, (1, 1))
    npc = d.add(NPC(3, 3, 8, 10))
    npc.move(d)
    assert (npc.x, npc.y) == (3, 3)
    assert d.characters[3][3] is npc


def test_telepathic_steps_toward_lower_right_player():
    d = FakeDungeon(bordered(8, 6), (4, 3))
    npc = d.add(NPC(2, 1, 1, 10))
    npc.move(d)
    assert (npc.x, npc.y) == (3, 2)


def test_telepathic_holds_when_player_upper_left():
    d = FakeDungeon(bordered(8, 6), (1, 1))
    npc = d.add(NPC(3, 3, 1, 10))
    npc.move(d)
    assert (npc.x, npc.y) == (3, 3)
    assert d.characters[3][3] is npc


def test_unhandled_characteristics_do_not_move():
    d = FakeDungeon(bordered(8, 6), (1, 1))
    npc = d.add(NPC(4, 3, 12, 10))
    npc.move(d)
    assert (npc.x, npc.y) == (4, 3)
    assert d.player.is_alive is True