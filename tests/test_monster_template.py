import pytest

from dungeoncrawl.character import Color
from dungeoncrawl.dice import Dice
from dungeoncrawl.monster_template import (
    MonsterFileError,
    MonsterTemplate,
    default_monster_path,
    load_monster_descriptions,
    parse_monster_descriptions,
)
from dungeoncrawl.npc import Ability

SAMPLE = """RLG327 MONSTER DESCRIPTION 1

BEGIN MONSTER
NAME Junior Barbarian
SYMB p
COLOR BLUE
DESC
This is a junior barbarian.
He is small.
.
SPEED 7+1d4
DAM 0+1d4
HP 12+2d6
ABIL SMART
RRTY 50
END

BEGIN MONSTER
NAME Amazon Lich Queen
DESC
A queen of the dead.
.
COLOR RED GREEN
SPEED 10+2d6
ABIL SMART TELE TUNNEL UNIQ
HP 1000+0d1
DAM 30+5d9
SYMB L
RRTY 20
END
"""


def parse(text):
    return parse_monster_descriptions(text.splitlines(keepends=True))


def test_parses_all_monsters():
    templates = parse(SAMPLE)
    assert [t.name for t in templates] == ["Junior Barbarian", "Amazon Lich Queen"]


def test_fields_of_first_monster():
    t = parse(SAMPLE)[0]
    assert t.description == "This is a junior barbarian.\nHe is small."
    assert t.colors == [Color.BLUE]
    assert t.speed == Dice(7, 1, 4)
    assert t.hitpoints == Dice(12, 2, 6)
    assert t.damage == Dice(0, 1, 4)
    assert t.abilities == [Ability.SMART]
    assert t.symbol == "p"
    assert t.rarity == 50


def test_multiple_colors_and_abilities():
    t = parse(SAMPLE)[1]
    assert t.colors == [Color.RED, Color.GREEN]
    assert t.abilities == [
        Ability.SMART, Ability.TELEPATHIC, Ability.TUNNELING, Ability.UNIQUE
    ]


def test_duplicate_field_drops_monster():
    text = SAMPLE.replace("RRTY 50\n", "RRTY 50\nRRTY 40\n")
    assert [t.name for t in parse(text)] == ["Amazon Lich Queen"]


def test_missing_field_drops_monster():
    text = SAMPLE.replace("SYMB L\n", "")
    assert [t.name for t in parse(text)] == ["Junior Barbarian"]


def test_bad_header_raises():
    with pytest.raises(MonsterFileError):
        parse("RLG327 OBJECT DESCRIPTION 1\n")


def test_empty_input_raises():
    with pytest.raises(MonsterFileError):
        parse_monster_descriptions([])


def test_unterminated_description_raises():
    text = "RLG327 MONSTER DESCRIPTION 1\nBEGIN MONSTER\nDESC\nno end\n"
    with pytest.raises(MonsterFileError):
        parse(text)


def test_from_fields_ignores_unknown_words():
    t = MonsterTemplate.from_fields(
        "Rat", "A rat.", "PURPLE RED", "5+0d1", "FLY ERRATIC", "1+1d2", "0+1d2", "r", "80"
    )
    assert t.colors == [Color.RED]
    assert t.abilities == [Ability.ERRATIC]


def test_from_fields_rejects_bad_dice():
    with pytest.raises(ValueError):
        MonsterTemplate.from_fields(
            "Rat", "A rat.", "RED", "fast", "", "1+1d2", "0+1d2", "r", "80"
        )


def test_describe_lists_fields():
    t = parse(SAMPLE)[1]
    lines = t.describe().split("\n")
    assert lines[0] == "Amazon Lich Queen"
    assert "RED GREEN " in lines
    assert "SMART TELE TUNNEL UNIQ " in lines
    assert "10+2d6" in lines
    assert "L" in lines
    assert "20" in lines


def test_load_from_file(tmp_path):
    path = tmp_path / "monster_desc.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    assert len(load_monster_descriptions(path)) == 2


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(MonsterFileError):
        load_monster_descriptions(tmp_path / "absent.txt")


def test_default_path_uses_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_monster_path() == tmp_path / ".rlg327" / "monster_desc.txt"