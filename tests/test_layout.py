import pytest

from dungeoncrawl.layout import Room, Stair, Terrain


@pytest.mark.parametrize(
    "terrain, glyph",
    [
        (Terrain.WALL, " "),
        (Terrain.IMMUTABLE, " "),
        (Terrain.UNKNOWN, " "),
        (Terrain.FLOOR, "."),
        (Terrain.CORRIDOR, "#"),
        (Terrain.STAIR_UP, ">"),
        (Terrain.STAIR_DOWN, "<"),
    ],
)
def test_glyphs(terrain, glyph):
    assert terrain.glyph() == glyph


def test_every_terrain_has_single_char_glyph():
    glyphs = [Terrain(t.value).glyph() for t in Terrain]
    assert len(glyphs) == 7
    assert all(len(g) == 1 for g in glyphs)


def test_room_contains_interior_and_edges():
    room = Room(2, 3, 4, 5)
    assert room.contains(2, 3)
    assert room.contains(5, 7)
    assert room.contains(3, 4)


def test_room_excludes_outside():
    room = Room(2, 3, 4, 5)
    assert not room.contains(6, 3)
    assert not room.contains(2, 8)
    assert not room.contains(1, 3)
    assert not room.contains(2, 2)


def test_room_cell_count_matches_area():
    room = Room(1, 1, 4, 3)
    cells = [(x, y) for x in range(10) for y in range(10) if room.contains(x, y)]
    assert len(cells) == room.width * room.height


def test_stair_fields():
    stair = Stair(4, 9, "u")
    assert (stair.x, stair.y, stair.direction) == (4, 9, "u")